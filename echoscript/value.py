"""Runtime values of EchoScript programs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


class EchoScriptError(RuntimeError):
    """Raised when an EchoScript program cannot be scanned or run."""


@dataclass(frozen=True)
class Char:
    """A single character, kept apart from one-character strings."""

    char: str

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValueError("a character must be a string of length one")

    @property
    def code(self) -> int:
        """The character's code point."""
        return ord(self.char)

    def __str__(self) -> str:
        return self.char


Data = Union[int, float, str, bool, Char]

_ALLOWED = (bool, int, float, str, Char)


def _format_double(val: float) -> str:
    if math.isfinite(val) and val.is_integer():
        return f"{int(val)}.0"
    text = format(val, "g")
    if "e" not in text and "." in text:
        text = text.rstrip("0")
        if text.endswith("."):
            text += "0"
    return text


@dataclass(frozen=True, eq=False)
class Value:
    """A value held by a variable or produced by an expression."""

    data: Data = 0

    def __post_init__(self) -> None:
        if not isinstance(self.data, _ALLOWED):
            raise TypeError(f"unsupported value type: {type(self.data).__name__}")

    def _key(self) -> tuple[type, Data]:
        return (type(self.data), self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def is_int(self) -> bool:
        return type(self.data) is int

    def is_float(self) -> bool:
        return isinstance(self.data, float)

    def is_string(self) -> bool:
        return isinstance(self.data, str)

    def is_char(self) -> bool:
        return isinstance(self.data, Char)

    def is_bool(self) -> bool:
        return isinstance(self.data, bool)

    def as_int(self) -> int:
        if self.is_int():
            return self.data  # type: ignore[return-value]
        raise EchoScriptError("Value is not an integer")

    def as_bool(self) -> bool:
        if self.is_bool():
            return self.data  # type: ignore[return-value]
        raise EchoScriptError("Value is not a boolean")

    def as_char(self) -> Char:
        if self.is_char():
            return self.data  # type: ignore[return-value]
        raise EchoScriptError("Value is not a character")

    def as_double(self) -> float:
        if self.is_float():
            return self.data  # type: ignore[return-value]
        if self.is_int():
            return float(self.data)
        raise EchoScriptError("Value is not a number")

    def as_number(self) -> int:
        data = self.data
        if isinstance(data, bool):
            return 1 if data else 0
        if isinstance(data, int):
            return data
        if isinstance(data, Char):
            return data.code
        raise EchoScriptError("Value is not numeric")

    def to_string(self) -> str:
        data = self.data
        if isinstance(data, bool):
            return "true" if data else "false"
        if isinstance(data, float):
            return _format_double(data)
        if isinstance(data, Char):
            return data.char
        if isinstance(data, str):
            return data
        return str(data)

    def __str__(self) -> str:
        return self.to_string()