from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of text length / index into text."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def from_offsets(start: int, end: int) -> "TextRange":
        """Create a TextRange from plain string indices."""
        return TextRange(start, end)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def len(self) -> TextSize:
        return TextSize(self._end - self._start)

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self._start, self._end)

    def contains(self, offset: TextSize) -> bool:
        return self._start <= offset.value < self._end

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Coord system matches python string indices so we can just do this.
    """
    return source[range.start.value : range.end.value]


def line_number_at(source: str, offset: int) -> int:
    """1-based line number of `offset` (newlines before it, plus one)."""
    return source.count("\n", 0, offset) + 1
