from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from typewriter.core.types import Dialect


class InferenceSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TYPEWRITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    root_type_name: str = Field(default="Root", min_length=1)
    strict: bool = Field(default=False)

    @field_validator("root_type_name")
    @classmethod
    def validate_root_type_name(cls, v: str) -> str:
        if not v.isidentifier():
            raise ValueError(f"root_type_name must be a valid identifier: {v!r}")
        return v


class RenderingSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TYPEWRITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_dialect: Dialect = Field(default=Dialect.TYPESCRIPT)
    semi: bool = Field(default=False)
    print_width: int = Field(default=80, ge=20, le=400)
    tab_width: int = Field(default=2, ge=1, le=8)


class Settings(BaseSettings):
    """Composed settings with shortcut property access."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    inference: InferenceSettings = Field(default_factory=InferenceSettings)
    rendering: RenderingSettings = Field(default_factory=RenderingSettings)

    @property
    def root_type_name(self) -> str:
        return self.inference.root_type_name

    @property
    def strict(self) -> bool:
        return self.inference.strict

    @property
    def default_dialect(self) -> Dialect:
        return self.rendering.default_dialect

    @property
    def semi(self) -> bool:
        return self.rendering.semi

    @property
    def print_width(self) -> int:
        return self.rendering.print_width

    @property
    def tab_width(self) -> int:
        return self.rendering.tab_width


@lru_cache
def get_settings() -> Settings:
    return Settings()
