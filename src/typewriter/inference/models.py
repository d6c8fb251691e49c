from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field

from typewriter.core.types import Kind

ARRAY_ELEMENT = "[]"


@dataclass
class FieldRef:
    keypath: str
    required: bool = True


@dataclass
class ShapeRecord:
    """Fields observed for one kind at one keypath.

    Objects map member names to child references, arrays carry the single
    ``[]`` entry, primitives stay empty.
    """

    fields: dict[str, FieldRef] = field(default_factory=dict)

    @classmethod
    def for_array(cls, element_keypath: str) -> ShapeRecord:
        return cls(fields={ARRAY_ELEMENT: FieldRef(keypath=element_keypath)})

    @property
    def element(self) -> FieldRef | None:
        return self.fields.get(ARRAY_ELEMENT)

    def signature(self) -> frozenset[tuple[str, bool]]:
        return frozenset((name, ref.required) for name, ref in self.fields.items())

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, name: str) -> bool:
        return name in self.fields

    def __getitem__(self, name: str) -> FieldRef:
        return self.fields[name]

    def items(self):
        return self.fields.items()


@dataclass
class TypeModel:
    """Keypath-addressed store of every shape observed so far."""

    _keypaths: dict[str, dict[Kind, ShapeRecord]] = field(default_factory=dict)
    _named_types: dict[str, int] = field(default_factory=dict)
    _root_names: list[str] = field(default_factory=list)

    def kinds(self, keypath: str) -> Mapping[Kind, ShapeRecord]:
        return self._keypaths.get(keypath, {})

    def has(self, keypath: str) -> bool:
        return bool(self._keypaths.get(keypath))

    def is_named(self, keypath: str) -> bool:
        return keypath in self._named_types

    def defining_batch(self, name: str) -> int | None:
        return self._named_types.get(name)

    @property
    def root_names(self) -> list[str]:
        return list(self._root_names)

    @property
    def keypaths(self) -> list[str]:
        return list(self._keypaths)

    def type_names(self) -> list[str]:
        names = list(reversed(self._named_types))
        for root in self._root_names:
            if root not in names and self.has(root):
                names.append(root)
        return names

    def record(self, keypath: str, kind: Kind) -> ShapeRecord | None:
        return self._keypaths.get(keypath, {}).get(kind)

    def set_record(self, keypath: str, kind: Kind, record: ShapeRecord) -> None:
        self._keypaths.setdefault(keypath, {})[kind] = record

    def register_named_type(self, name: str, batch: int) -> bool:
        if name in self._named_types:
            return False
        self._named_types[name] = batch
        return True

    def add_root(self, name: str) -> None:
        if name in self._root_names:
            self._root_names.remove(name)
        self._root_names.append(name)

    def copy(self) -> TypeModel:
        return copy.deepcopy(self)
