from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from typewriter.core.types import Kind

if TYPE_CHECKING:
    from typewriter.inference.models import ShapeRecord


@runtime_checkable
class TypeNameGenerator(Protocol):
    def __call__(self, keypath: str) -> str | None: ...


@runtime_checkable
class ModelView(Protocol):
    """Read-only access to an inferred model, as consumed by renderers."""

    def kinds(self, keypath: str) -> Mapping[Kind, ShapeRecord]: ...
    def has(self, keypath: str) -> bool: ...
    def is_named(self, keypath: str) -> bool: ...
    def type_names(self) -> list[str]: ...

    @property
    def root_names(self) -> list[str]: ...
