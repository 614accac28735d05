"""A minimal JSON value model: strings, numbers, booleans, objects and arrays."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import Union

from scorpsim.utility import is_equal


class BadConversion(TypeError):
    """Raised when a JSON value is used as a type it does not have."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(f"Cannot convert JSON value {source} to {target}")
        self.source = source
        self.target = target


class NoSuchElement(LookupError):
    """Raised when an object key or an array index does not exist."""

    def __init__(self, element: Union[str, int]) -> None:
        if isinstance(element, str):
            message = f"No such element with id `{element}` in JSON object"
        else:
            message = f"No such index {element} in JSON array"
        super().__init__(message)
        self.element = element


class _Kind(enum.Enum):
    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    OBJECT = "Object"
    ARRAY = "Array"


Key = Union[str, int]


class Value:
    """A JSON value; use the factories string(), number(), boolean(), object_() and array()."""

    __slots__ = ("_kind", "_data")

    def __init__(self, payload: Union[str, bool, int, float, dict, list]) -> None:
        if isinstance(payload, bool):
            self._kind, self._data = _Kind.BOOLEAN, payload
        elif isinstance(payload, (int, float)):
            self._kind, self._data = _Kind.NUMBER, float(payload)
        elif isinstance(payload, str):
            self._kind, self._data = _Kind.STRING, payload
        elif isinstance(payload, dict):
            self._kind = _Kind.OBJECT
            self._data = {str(k): _checked(v).copy() for k, v in payload.items()}
        elif isinstance(payload, list):
            self._kind = _Kind.ARRAY
            self._data = [_checked(v).copy() for v in payload]
        else:
            raise TypeError(f"Cannot build a JSON value from {type(payload).__name__}")

    # Introspection

    def is_string(self) -> bool:
        return self._kind is _Kind.STRING

    def is_number(self) -> bool:
        return self._kind is _Kind.NUMBER

    def is_boolean(self) -> bool:
        return self._kind is _Kind.BOOLEAN

    def is_object(self) -> bool:
        return self._kind is _Kind.OBJECT

    def is_array(self) -> bool:
        return self._kind is _Kind.ARRAY

    def type_name(self) -> str:
        """Human readable name of the value's type."""
        return self._kind.value

    def _expect(self, kind: _Kind) -> None:
        if self._kind is not kind:
            raise BadConversion(self.type_name(), kind.value)

    # Conversions

    def to_string(self) -> str:
        self._expect(_Kind.STRING)
        return self._data

    def to_int(self) -> int:
        """The number with its decimal part dropped."""
        self._expect(_Kind.NUMBER)
        return int(self._data)

    def to_double(self) -> float:
        self._expect(_Kind.NUMBER)
        return self._data

    def to_bool(self) -> bool:
        self._expect(_Kind.BOOLEAN)
        return self._data

    # Element access, shared by objects and arrays

    def _array_index(self, index: int) -> int:
        self._expect(_Kind.ARRAY)
        if index < 0 or index >= len(self._data):
            raise NoSuchElement(index)
        return index

    def __getitem__(self, key: Key) -> Value:
        if isinstance(key, str):
            self._expect(_Kind.OBJECT)
            try:
                return self._data[key]
            except KeyError:
                raise NoSuchElement(key) from None
        if isinstance(key, int) and not isinstance(key, bool):
            return self._data[self._array_index(key)]
        raise TypeError(f"JSON values are indexed by str or int, not {type(key).__name__}")

    def __setitem__(self, key: Key, value: Value) -> None:
        """Replace an existing element; the key or index must already exist."""
        _checked(value)
        if isinstance(key, str):
            self._expect(_Kind.OBJECT)
            if key not in self._data:
                raise NoSuchElement(key)
            self._data[key] = value.copy()
        elif isinstance(key, int) and not isinstance(key, bool):
            self._data[self._array_index(key)] = value.copy()
        else:
            raise TypeError(f"JSON values are indexed by str or int, not {type(key).__name__}")

    # Object operations

    def has_value(self, key: str) -> bool:
        self._expect(_Kind.OBJECT)
        return key in self._data

    def __contains__(self, key: str) -> bool:
        return self.has_value(key)

    def set(self, key: str, value: Value) -> bool:
        """Insert or update a copy of value; return True if the key was new."""
        self._expect(_Kind.OBJECT)
        _checked(value)
        is_new = key not in self._data
        self._data[key] = value.copy()
        return is_new

    def remove(self, key: Key) -> None:
        """Remove an object member by id or an array element by index."""
        if isinstance(key, str):
            self._expect(_Kind.OBJECT)
            if key not in self._data:
                raise NoSuchElement(key)
            del self._data[key]
        elif isinstance(key, int) and not isinstance(key, bool):
            self._expect(_Kind.ARRAY)
            if key < 0 or key >= len(self._data):
                raise NoSuchElement(0)
            del self._data[key]
        else:
            raise TypeError(f"JSON values are indexed by str or int, not {type(key).__name__}")

    def keys(self) -> list[str]:
        self._expect(_Kind.OBJECT)
        return list(self._data)

    # Array operations

    def size(self) -> int:
        self._expect(_Kind.ARRAY)
        return len(self._data)

    def add(self, value: Value) -> None:
        """Append a copy of value to the array."""
        self._expect(_Kind.ARRAY)
        self._data.append(_checked(value).copy())

    # Copy and comparison

    def copy(self) -> Value:
        """Return a deep copy."""
        clone = Value.__new__(Value)
        clone._kind = self._kind
        if self._kind is _Kind.OBJECT:
            clone._data = {k: v.copy() for k, v in self._data.items()}
        elif self._kind is _Kind.ARRAY:
            clone._data = [v.copy() for v in self._data]
        else:
            clone._data = self._data
        return clone

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Value):
            if self._kind is not other._kind:
                return False
            if self._kind is _Kind.NUMBER:
                return is_equal(self._data, other._data)
            return self._data == other._data
        if isinstance(other, bool):
            return self._kind is _Kind.BOOLEAN and self._data == other
        if isinstance(other, (int, float)):
            return self._kind is _Kind.NUMBER and self._data == float(other)
        if isinstance(other, str):
            return self._kind is _Kind.STRING and self._data == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Value({self._kind.value}: {self._data!r})"


def _checked(value: object) -> Value:
    if not isinstance(value, Value):
        raise TypeError(f"Expected a JSON Value, not {type(value).__name__}")
    return value


def string(text: str) -> Value:
    return Value(str(text))


def number(num: float) -> Value:
    return Value(float(num))


def boolean(flag: bool) -> Value:
    return Value(bool(flag))


def object_() -> Value:
    return Value({})


def array() -> Value:
    return Value([])


def get_property(root: Value, path: Iterable[str]) -> Value:
    """Follow a path of ids through nested objects; raise NoSuchElement if it breaks."""
    current = root
    for key in path:
        current = current[key]
    return current