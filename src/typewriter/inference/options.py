from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from typewriter.config import Settings, get_settings
from typewriter.inference.naming import default_type_name_generator


class AddOptions(BaseModel):
    """Options for one ``add_examples`` batch.

    Attributes:
        named_keypaths: Explicit keypath -> type name overrides.
        type_name_generator: Derives a type name from a keypath, returning
            None to leave the keypath anonymous. None disables generation.
        root_type_name: Name for the root when nothing else names it.
        strict: Raise on cross-batch redefinition of a named type.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    named_keypaths: dict[str, str] = Field(default_factory=dict)
    type_name_generator: Callable[[str], str | None] | None = Field(
        default=default_type_name_generator
    )
    root_type_name: str | None = Field(default=None)
    strict: bool | None = Field(default=None)

    def resolved(self, settings: Settings | None = None) -> "AddOptions":
        """Fill unset values from settings."""
        settings = settings or get_settings()
        return self.model_copy(
            update={
                "root_type_name": self.root_type_name or settings.root_type_name,
                "strict": settings.strict if self.strict is None else self.strict,
            }
        )
