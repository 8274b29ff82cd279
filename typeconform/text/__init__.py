"""Text offsets and ranges for source attribution."""

from typeconform.text.text import TextRange, TextSize, slice_text_range

__all__ = [
    "TextRange",
    "TextSize",
    "slice_text_range",
]
