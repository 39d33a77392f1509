from __future__ import annotations

from dataclasses import dataclass

from .api import code_point_offset_to_position
from .errors import SpanOutOfRangeError


@dataclass(frozen=True, slots=True, repr=False)
class Span:
    """Half-open range [start, end) of code points in a shared source text.

    An empty span marks a single offset. Line/column are 1-based and counted
    in code points.
    """

    source: str
    start: int
    end: int
    file: str = "<memory>"

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.source):
            raise SpanOutOfRangeError(
                start=self.start,
                end=self.end,
                length=len(self.source),
                hint="span ranges must satisfy 0 <= start <= end <= len(source)",
            )

    @classmethod
    def full(cls, source: str, *, file: str = "<memory>") -> Span:
        return cls(source, 0, len(source), file=file)

    def __repr__(self) -> str:
        return f"Span({self.text!r}@{self.start}..{self.end})"

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def index(self) -> int:
        return self.start

    @property
    def text(self) -> str:
        return self.source[self.start : self.end]

    # Derived spans

    def create(self, start: int, end: int) -> Span:
        """New span over the same source with an absolute range."""
        return Span(self.source, start, end, file=self.file)

    def slice(self, start: int, end: int) -> Span:
        """New span with a range relative to this span's start."""
        return self.create(self.start + start, self.start + end)

    def split(self, length: int) -> tuple[Span, Span]:
        point = self.start + length
        return self.create(self.start, point), self.create(point, self.end)

    def before(self) -> Span:
        return self.create(0, self.start)

    def after(self) -> Span:
        return self.create(self.end, len(self.source))

    def take(self, length: int) -> Span:
        return self.create(self.start, self.start + min(len(self), length))

    def head(self) -> Span:
        return self.create(self.start, self.start)

    def tail(self) -> Span:
        return self.create(self.end, self.end)

    def trim_start(self) -> Span:
        text = self.text
        return self.create(self.end - len(text.lstrip()), self.end)

    def trim_end(self) -> Span:
        return self.create(self.start, self.start + len(self.text.rstrip()))

    # Lines

    def line_column(self) -> tuple[int, int]:
        return code_point_offset_to_position(self.source, self.start)

    @property
    def line(self) -> int:
        return self.line_column()[0]

    @property
    def column(self) -> int:
        return self.line_column()[1]

    def current_line(self) -> Span:
        """The line containing ``start``, including its terminating LF."""
        line_start = self.source.rfind("\n", 0, self.start) + 1
        lf = self.source.find("\n", line_start)
        line_end = len(self.source) if lf == -1 else lf + 1
        return self.create(line_start, line_end)

    def prev_line(self) -> Span:
        """The line before the current one; an empty span at 0 on the first line."""
        line_start = self.current_line().start
        if line_start == 0:
            return self.create(0, 0)
        return self.create(line_start - 1, line_start - 1).current_line()

    def next_line(self) -> Span:
        """The line after the current one; an empty span at the end on the last line."""
        line_end = self.current_line().end
        if line_end == len(self.source):
            return self.create(line_end, line_end)
        return self.create(line_end, line_end).current_line()

    def format(self) -> str:
        line, column = self.line_column()
        return f"{self.file}:{line}:{column}"
