from __future__ import annotations

from .api import (
    codePointOffsetToPosition,
    code_point_offset_to_position,
    code_point_offsets_to_positions,
    offsetToPosition,
    offset_to_position,
    offsets_to_positions,
    positionToCodePointOffset,
    positionToOffset,
    position_to_code_point_offset,
    position_to_offset,
    to_offset,
    to_position,
    to_positions,
)
from .errors import LineColumnError, OffsetOutOfRangeError, PositionOutOfRangeError, SpanOutOfRangeError
from .scan import Unit
from .spans import Span

__all__ = [
    "LineColumnError",
    "OffsetOutOfRangeError",
    "PositionOutOfRangeError",
    "Span",
    "SpanOutOfRangeError",
    "Unit",
    "codePointOffsetToPosition",
    "code_point_offset_to_position",
    "code_point_offsets_to_positions",
    "offsetToPosition",
    "offset_to_position",
    "offsets_to_positions",
    "positionToCodePointOffset",
    "positionToOffset",
    "position_to_code_point_offset",
    "position_to_offset",
    "to_offset",
    "to_position",
    "to_positions",
]
