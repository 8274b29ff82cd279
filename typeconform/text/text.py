from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of text length / index into a type expression."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def of(text: str) -> "TextSize":
        """Create a TextSize from a string's length."""
        return TextSize(len(text))

    @staticmethod
    def from_int(value: int) -> "TextSize":
        """Create a TextSize from an integer offset."""
        return TextSize(value)

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
    def new(start: TextSize, end: TextSize) -> "TextRange":
        """Create a TextRange from start and end offsets."""
        return TextRange(start.value, end.value)

    @staticmethod
    def at(offset: TextSize, length: TextSize) -> "TextRange":
        """Create a TextRange at offset with given length."""
        return TextRange(offset.value, offset.value + length.value)

    @staticmethod
    def _from_offsets(start: int, end: int) -> "TextRange":
        """Create a TextRange from raw integer offsets (internal use)."""
        return TextRange(start, end)

    @property
    def start(self) -> TextSize:
        """Start offset of the range."""
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        """End offset of the range (exclusive)."""
        return TextSize(self._end)

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self._start, self._end)

    def cover(self, other: "TextRange") -> "TextRange":
        """Get the minimal range that covers both this range and another range."""
        return TextRange._from_offsets(min(self._start, other._start), max(self._end, other._end))

    def shift(self, delta: TextSize) -> "TextRange":
        """Shift the range by the given delta.

        Used to move a range relative to a type expression into the
        coordinates of the declaration source the expression came from.
        """
        d = delta.value
        return TextRange._from_offsets(self._start + d, self._end + d)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange."""
    return source[range.start.value : range.end.value]
