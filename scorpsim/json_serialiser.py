"""Reading and writing JSON values from and to text and files."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Optional, Union

from scorpsim.json_value import Value, array, boolean, number, object_, string

_WHITESPACE = " \t\n\v\f\r"
_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

PathLike = Union[str, os.PathLike]


class BadPayload(ValueError):
    """Raised when a payload is not valid JSON for this reader."""


class NoSuchFile(FileNotFoundError):
    """Raised when the file to read cannot be opened."""


class _Reader:
    """Recursive-descent reader over a payload string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def read_document(self) -> Value:
        value = self._read_value()
        self._skip_ws()
        if self._pos < len(self._text):
            raise BadPayload("Input contains more data than expected")
        return value

    def _skip_ws(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos] in _WHITESPACE:
            self._pos += 1

    def _peek(self) -> Optional[str]:
        return self._text[self._pos] if self._pos < len(self._text) else None

    def _get(self) -> Optional[str]:
        char = self._peek()
        if char is not None:
            self._pos += 1
        return char

    def _eat(self, literal: str) -> None:
        if not self._text.startswith(literal, self._pos):
            raise BadPayload(f"Expecting {literal}")
        self._pos += len(literal)

    def _read_value(self) -> Value:
        self._skip_ws()
        first = self._peek()
        if first is None:
            raise BadPayload("No value")
        if first == '"':
            return self._read_string()
        if first in "tf":
            return self._read_boolean()
        if first == "{":
            return self._read_object()
        if first == "[":
            return self._read_array()
        return self._read_number()

    def _read_string(self) -> Value:
        if self._get() != '"':
            raise BadPayload("Expecting an opening quote")
        end = self._text.find('"', self._pos)
        if end < 0:
            raise BadPayload("Error while reading string")
        content = self._text[self._pos:end]
        self._pos = end + 1
        return string(content)

    def _read_number(self) -> Value:
        match = _NUMBER.match(self._text, self._pos)
        if match is None:
            raise BadPayload("Couldn't read a number")
        self._pos = match.end()
        return number(float(match.group()))

    def _read_boolean(self) -> Value:
        if self._peek() == "t":
            self._eat("true")
            return boolean(True)
        self._eat("false")
        return boolean(False)

    def _read_pair(self, obj: Value) -> None:
        self._skip_ws()
        key = self._read_string().to_string()
        self._skip_ws()
        if self._get() != ":":
            raise BadPayload("Expecting colon after id in object")
        self._skip_ws()
        obj.set(key, self._read_value())

    def _read_object(self) -> Value:
        self._pos += 1  # opening brace
        obj = object_()
        self._skip_ws()
        following = self._peek()
        if following is None:
            raise BadPayload("Invalid object")
        if following == "}":
            self._pos += 1
            return obj
        self._read_pair(obj)
        while True:
            self._skip_ws()
            char = self._get()
            if char is None:
                raise BadPayload("Invalid object")
            if char == "}":
                return obj
            if char != ",":
                raise BadPayload(f"Unexpected character {char}")
            self._read_pair(obj)

    def _read_array(self) -> Value:
        self._pos += 1  # opening bracket
        arr = array()
        self._skip_ws()
        following = self._peek()
        if following is None:
            raise BadPayload("Invalid array")
        if following == "]":
            self._pos += 1
            return arr
        arr.add(self._read_value())
        while True:
            self._skip_ws()
            char = self._get()
            if char is None:
                raise BadPayload("Invalid array")
            if char == "]":
                return arr
            if char == ",":
                arr.add(self._read_value())
            # Any other character between elements is skipped.


def read_from_string(payload: str) -> Value:
    """Parse a JSON value; raise BadPayload when the format is invalid."""
    return _Reader(payload).read_document()


def read_from_file(filepath: PathLike) -> Value:
    """Parse the JSON value stored in a file; raise NoSuchFile if it cannot be opened."""
    try:
        text = Path(filepath).read_text(encoding="utf-8")
    except OSError:
        raise NoSuchFile(f"No such file: {os.fspath(filepath)}") from None
    return read_from_string(text)


def _format_number(num: float) -> str:
    return f"{num:g}"


def _write(value: Value, indent: int) -> str:
    if value.is_string():
        return f'"{value.to_string()}"'
    if value.is_number():
        return _format_number(value.to_double())
    if value.is_boolean():
        return "true" if value.to_bool() else "false"
    if value.is_object():
        pad = " " * (indent * 4)
        extra_pad = pad + " " * 4
        members = ",".join(
            f'\n{extra_pad}"{key}" : {_write(value[key], indent + 1)}'
            for key in sorted(value.keys())
        )
        return "{" + members + "\n" + pad + "}"
    items = ", ".join(_write(value[i], indent + 1) for i in range(value.size()))
    return "[ " + items + "]"


def write_to_string(value: Value) -> str:
    """Render a JSON value as text; object keys come out sorted."""
    return _write(value, 0)


def write_to_file(value: Value, filepath: PathLike) -> None:
    """Render a JSON value into the given file."""
    Path(filepath).write_text(write_to_string(value), encoding="utf-8")