"""Focus/event parser configuration."""

from dataclasses import dataclass
from enum import StrEnum


class CommentMode(StrEnum):
    """How `#` line comments are removed before scanning."""

    LEGACY = "legacy"
    STRING_AWARE = "string_aware"


@dataclass(frozen=True, slots=True)
class FocusParserOptions:
    """Feature flags for focus tree and event parsing."""

    comment_mode: CommentMode = CommentMode.LEGACY
    report_duplicate_ids: bool = True

    @property
    def string_aware_comments(self) -> bool:
        return self.comment_mode == CommentMode.STRING_AWARE

    @staticmethod
    def for_mode(mode: CommentMode) -> "FocusParserOptions":
        return FocusParserOptions(comment_mode=mode)
