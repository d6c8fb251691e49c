from pydantic import BaseModel, ConfigDict, Field

from typewriter.formatting import FormatOptions


class RenderOptions(BaseModel):
    """Options for one render call.

    Attributes:
        inlined: Emit one fully expanded expression instead of declarations.
        root: Type name or keypath to expand in inlined mode. Defaults to the
            root of the most recent batch.
        format: Layout options handed to the formatter.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    inlined: bool = False
    root: str | None = None
    format: FormatOptions = Field(default_factory=FormatOptions)
