"""Text offsets and ranges."""

from focusgraph.text.text import (
    TextRange,
    TextSize,
    line_number_at,
    slice_text_range,
)

__all__ = [
    "TextRange",
    "TextSize",
    "line_number_at",
    "slice_text_range",
]
