from collections.abc import Mapping
from enum import Enum
from numbers import Number
from typing import Any


class _Undefined:
    """Marks a member that is present but carries no value."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: dict) -> "_Undefined":
        return self


UNDEFINED = _Undefined()


class Kind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    FUNCTION = "function"
    UNDEFINED = "undefined"
    UNKNOWN = "unknown"

    @classmethod
    def of(cls, value: Any) -> "Kind":
        if value is UNDEFINED:
            return cls.UNDEFINED
        if value is None:
            return cls.NULL
        # bool is a Number subclass
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, Number):
            return cls.NUMBER
        if isinstance(value, (str, bytes)):
            return cls.STRING
        if isinstance(value, Mapping):
            return cls.OBJECT
        if isinstance(value, (list, tuple, set, frozenset)):
            return cls.ARRAY
        if callable(value):
            return cls.FUNCTION
        return cls.UNKNOWN

    @property
    def is_nullish(self) -> bool:
        return self in (Kind.NULL, Kind.UNDEFINED)

    @property
    def is_container(self) -> bool:
        return self in (Kind.ARRAY, Kind.OBJECT)


class Dialect(str, Enum):
    TYPESCRIPT = "typescript"
    PROP_TYPES = "prop_types"

    @classmethod
    def from_name(cls, name: "str | Dialect") -> "Dialect | None":
        if isinstance(name, cls):
            return name
        aliases = {
            "typescript": cls.TYPESCRIPT,
            "ts": cls.TYPESCRIPT,
            "prop_types": cls.PROP_TYPES,
            "proptypes": cls.PROP_TYPES,
            "prop-types": cls.PROP_TYPES,
        }
        return aliases.get(str(name).lower())
