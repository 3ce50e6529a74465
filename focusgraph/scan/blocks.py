"""Brace matching for `name = { ... }` blocks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache
import re


@dataclass(frozen=True, slots=True)
class NamedBlock:
    """Offsets of one `name = { ... }` occurrence.

    `body_start` is just after the opening brace, `body_end` is the index of
    the matching closing brace.
    """

    match_start: int
    body_start: int
    body_end: int

    def body(self, text: str) -> str:
        return text[self.body_start : self.body_end]

    def source(self, text: str) -> str:
        """The whole block including the key and both braces."""
        return text[self.match_start : self.body_end + 1]


@lru_cache(maxsize=64)
def block_pattern(name: str) -> re.Pattern[str]:
    """Compiled pattern for a word-bounded `name = {` opener."""
    return re.compile(rf"\b{re.escape(name)}\s*=\s*\{{")


def find_block_end(text: str, start: int) -> int:
    """Index of the `}` closing the block whose body starts at `start`.

    Braces inside double-quoted strings or after a `#` on the same line are
    ignored. Returns -1 when the text ends before the block closes.
    """
    depth = 1
    in_string = False
    in_comment = False

    for index in range(start, len(text)):
        ch = text[index]

        if in_comment:
            if ch == "\n":
                in_comment = False
            continue

        if ch == '"':
            if index == 0 or text[index - 1] != "\\":
                in_string = not in_string
            continue

        if in_string:
            continue

        if ch == "#":
            in_comment = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return index

    return -1


def iter_named_blocks(text: str, name: str) -> Iterator[NamedBlock]:
    """Yield every terminated `name = { ... }` block in `text`.

    The search resumes right after each opener, so a same-named block nested
    inside another one is yielded as well. Unterminated blocks are skipped.
    """
    pattern = block_pattern(name)
    position = 0
    while (match := pattern.search(text, position)) is not None:
        position = match.end()
        body_end = find_block_end(text, match.end())
        if body_end == -1:
            continue
        yield NamedBlock(match_start=match.start(), body_start=match.end(), body_end=body_end)
