"""Field extraction from a block's source text.

Two scoping rules coexist on purpose:

- `extract_field` and `extract_number` take the first `name = value` anywhere
  in the block, nested sub-blocks included. Use them for names that never
  appear inside nested blocks of a focus (`id`, `icon`, `cost`,
  `relative_position_id`).
- `extract_top_level_number` only looks at direct children of the block, so
  `x`/`y` inside `completion_reward` or `ai_will_do` are not picked up.
"""

from __future__ import annotations

from functools import lru_cache
import re

from focusgraph.scan.blocks import block_pattern, find_block_end
from focusgraph.scan.scalar import parse_leading_number, parse_number


@lru_cache(maxsize=64)
def _field_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf'\b{re.escape(name)}\s*=\s*(?:"([^"\n]*)"|([^\s"#{{}}]+))')


@lru_cache(maxsize=64)
def _top_level_number_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf"{re.escape(name)}\s*=\s*([+-]?(?:\d+\.\d+|\d+))")


def extract_field(block: str, name: str) -> str | None:
    """Value of the first `name = value` in `block`, quotes removed."""
    match = _field_pattern(name).search(block)
    if match is None:
        return None
    quoted, bare = match.groups()
    return quoted if quoted is not None else bare


def extract_number(block: str, name: str) -> int | float | None:
    value = extract_field(block, name)
    if value is None:
        return None
    return parse_leading_number(value)


def extract_top_level_number(block: str, name: str) -> int | float | None:
    """Numeric `name = <number>` declared directly inside `block`.

    `block` is the full block source including its own braces, so direct
    children sit at depth 1.
    """
    if not name:
        return None
    pattern = _top_level_number_pattern(name)
    first = name[0]
    depth = 0
    in_string = False

    for index, ch in enumerate(block):
        if ch == '"':
            if index == 0 or block[index - 1] != "\\":
                in_string = not in_string
            continue
        if in_string:
            continue

        if ch == "{":
            depth += 1
            continue
        if ch == "}":
            depth = max(0, depth - 1)
            continue

        if depth != 1 or ch != first:
            continue
        if index > 0 and _is_word_char(block[index - 1]):
            continue

        match = pattern.match(block, index)
        if match is None:
            continue
        return parse_number(match.group(1))

    return None


def extract_block_text(block: str, name: str) -> str | None:
    """Trimmed source text between the braces of the first `name = { ... }`."""
    match = block_pattern(name).search(block)
    if match is None:
        return None
    body_end = find_block_end(block, match.end())
    if body_end == -1:
        return None
    return block[match.end() : body_end].strip()


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"
