from __future__ import annotations

from dataclasses import dataclass


class LineColumnError(Exception):
    """Base class for every conversion failure raised by linecol."""

    hint: str | None = None

    def describe(self) -> str:
        return str(self.args[0]) if self.args else type(self).__name__

    def __str__(self) -> str:
        base = self.describe()
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base


@dataclass(slots=True, eq=False)
class OffsetOutOfRangeError(LineColumnError):
    offset: object
    length: int
    unit: str
    hint: str | None = None

    def describe(self) -> str:
        return f"{self.unit} offset {self.offset!r} out of range [0, {self.length}]"


@dataclass(slots=True, eq=False)
class PositionOutOfRangeError(LineColumnError):
    line: object
    column: object
    unit: str
    hint: str | None = None

    def describe(self) -> str:
        return f"position {self.line}:{self.column} ({self.unit}) is not in the text"


@dataclass(slots=True, eq=False)
class SpanOutOfRangeError(LineColumnError):
    start: int
    end: int
    length: int
    hint: str | None = None

    def describe(self) -> str:
        return f"span [{self.start}, {self.end}) out of source length {self.length}"
