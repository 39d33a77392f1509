from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


LF = 0x0A
CR = 0x0D


class Unit(str, Enum):
    """What one step of an offset counts."""

    BYTE = "byte"
    CODE_POINT = "code-point"


class ScanState(str, Enum):
    SCANNING = "SCANNING"
    AT_CRLF = "AT_CRLF"  # last unit was a CR, an LF may follow
    DONE = "DONE"


def encode_units(text: str | bytes, unit: Unit) -> Sequence[int]:
    """Return ``text`` as a sequence of integer units.

    Bytes are the UTF-8 encoding of the text; code points are ``ord()``
    values. Either way LF is 0x0A and CR is 0x0D.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        raw = bytes(text)
        if unit is Unit.BYTE:
            return raw
        return [ord(ch) for ch in raw.decode("utf-8")]
    if not isinstance(text, str):
        raise TypeError(f"expected str or bytes, got {type(text).__name__}")
    if unit is Unit.BYTE:
        return text.encode("utf-8")
    return [ord(ch) for ch in text]


@dataclass(slots=True)
class Cursor:
    """Walks a unit sequence keeping 1-based line/column bookkeeping.

    ``offset`` is the number of units consumed so far; ``(line, column)`` is
    the position of the unit at ``offset`` (or of the end of text).
    """

    units: Sequence[int]
    offset: int = 0
    line: int = 1
    column: int = 1
    state: ScanState = ScanState.SCANNING

    def eof(self) -> bool:
        return self.offset >= len(self.units)

    def position(self) -> tuple[int, int]:
        return (self.line, self.column)

    def advance(self) -> None:
        if self.state is ScanState.DONE:
            raise RuntimeError("cursor is finished")
        if self.eof():
            raise RuntimeError("cursor is at end of text")

        u = self.units[self.offset]
        self.offset += 1

        if u == LF:
            # In AT_CRLF the CR already took its column; the LF just closes the line.
            self.line += 1
            self.column = 1
            self.state = ScanState.SCANNING
        elif u == CR:
            self.column += 1
            self.state = ScanState.AT_CRLF
        else:
            self.column += 1
            self.state = ScanState.SCANNING

    def skip_to(self, offset: int) -> None:
        while self.offset < offset:
            self.advance()

    def finish(self) -> tuple[int, int]:
        self.state = ScanState.DONE
        return self.position()
