from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .errors import OffsetOutOfRangeError, PositionOutOfRangeError
from .scan import Cursor, Unit, encode_units


logger = logging.getLogger(__name__)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_offset(units: Sequence[int], offset: object, unit: Unit) -> int:
    if not _is_int(offset) or not 0 <= offset <= len(units):  # type: ignore[operator]
        logger.debug("rejecting %s offset %r (length %d)", unit.value, offset, len(units))
        raise OffsetOutOfRangeError(
            offset=offset,
            length=len(units),
            unit=unit.value,
            hint=f"offsets run from 0 to the text length in {unit.value}s",
        )
    return offset  # type: ignore[return-value]


def to_position(text: str | bytes, offset: int, *, unit: Unit = Unit.BYTE) -> tuple[int, int]:
    """Return the 1-based ``(line, column)`` of ``offset`` in ``text``.

    Raises OffsetOutOfRangeError unless ``0 <= offset <= len(text)`` in ``unit``s.
    """
    units = encode_units(text, unit)
    target = _check_offset(units, offset, unit)
    cur = Cursor(units)
    cur.skip_to(target)
    return cur.finish()


def to_positions(
    text: str | bytes,
    offsets: Iterable[int],
    *,
    unit: Unit = Unit.BYTE,
) -> list[tuple[int, int]]:
    """Resolve many offsets with a single scan; results follow input order."""
    units = encode_units(text, unit)
    targets = [_check_offset(units, o, unit) for o in offsets]

    out: list[tuple[int, int]] = [(0, 0)] * len(targets)
    cur = Cursor(units)
    for i in sorted(range(len(targets)), key=targets.__getitem__):
        cur.skip_to(targets[i])
        out[i] = cur.position()
    cur.finish()
    return out


def to_offset(text: str | bytes, line: int, column: int, *, unit: Unit = Unit.BYTE) -> int:
    """Return the offset (in ``unit``s) of the 1-based ``line``/``column``.

    The end of text is addressable. Positions past the end of their line, or
    lines past the last one, raise PositionOutOfRangeError.
    """
    units = encode_units(text, unit)

    def out_of_range() -> PositionOutOfRangeError:
        logger.debug("rejecting position %r:%r (%s)", line, column, unit.value)
        return PositionOutOfRangeError(
            line=line,
            column=column,
            unit=unit.value,
            hint="lines start at 1; columns run from 1 to the line length + 1",
        )

    if not (_is_int(line) and _is_int(column)) or line < 1 or column < 1:
        raise out_of_range()

    target = (line, column)
    cur = Cursor(units)
    while cur.position() != target:
        if cur.eof() or cur.line > line:
            raise out_of_range()
        cur.advance()
    cur.finish()
    return cur.offset


def offset_to_position(text: str | bytes, offset: int) -> tuple[int, int]:
    return to_position(text, offset, unit=Unit.BYTE)


def code_point_offset_to_position(text: str | bytes, offset: int) -> tuple[int, int]:
    return to_position(text, offset, unit=Unit.CODE_POINT)


def offsets_to_positions(text: str | bytes, offsets: Iterable[int]) -> list[tuple[int, int]]:
    return to_positions(text, offsets, unit=Unit.BYTE)


def code_point_offsets_to_positions(text: str | bytes, offsets: Iterable[int]) -> list[tuple[int, int]]:
    return to_positions(text, offsets, unit=Unit.CODE_POINT)


def position_to_offset(text: str | bytes, line: int, column: int) -> int:
    return to_offset(text, line, column, unit=Unit.BYTE)


def position_to_code_point_offset(text: str | bytes, line: int, column: int) -> int:
    return to_offset(text, line, column, unit=Unit.CODE_POINT)


# camelCase names of the same conversions
offsetToPosition = offset_to_position
codePointOffsetToPosition = code_point_offset_to_position
positionToOffset = position_to_offset
positionToCodePointOffset = position_to_code_point_offset
