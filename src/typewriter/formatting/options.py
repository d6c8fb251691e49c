from pydantic import BaseModel, ConfigDict, Field

from typewriter.config import get_settings


class FormatOptions(BaseModel):
    """Layout options for generated code.

    Attributes:
        semi: Terminate statements with a semicolon.
        print_width: Column at which groups break onto several lines.
        tab_width: Spaces per indentation level.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    semi: bool = Field(default_factory=lambda: get_settings().semi)
    print_width: int = Field(
        default_factory=lambda: get_settings().print_width, ge=20, le=400
    )
    tab_width: int = Field(default_factory=lambda: get_settings().tab_width, ge=1, le=8)

    @property
    def terminator(self) -> str:
        return ";" if self.semi else ""
