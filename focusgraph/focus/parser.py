"""Focus tree parser for HOI4-style `focus_tree = { ... }` files."""

from __future__ import annotations

import re

from focusgraph.diagnostics import Diagnostic, diagnostic_from_spec
from focusgraph.diagnostics.codes import FOCUS_DUPLICATE_ID, FOCUS_UNTERMINATED_BLOCK
from focusgraph.focus.model import FocusNode, FocusTree
from focusgraph.focus.options import FocusParserOptions
from focusgraph.focus.positions import resolve_absolute_positions
from focusgraph.scan import (
    block_pattern,
    extract_block_text,
    extract_field,
    extract_mutually_exclusive,
    extract_number,
    extract_prerequisites,
    extract_top_level_number,
    find_block_end,
    strip_line_comments,
)
from focusgraph.text import TextRange, line_number_at

_FOCUS_BLOCK_RE = re.compile(r"\bfocus\s*=\s*\{")

DEFAULT_TREE_ID = "unknown"


def parse_focus_tree_text(
    source_text: str,
    options: FocusParserOptions | None = None,
) -> FocusTree | None:
    """Parse the first `focus_tree` block of a script file.

    Returns None when the file has no `focus_tree = {` or its block never
    closes. Malformed focus blocks inside the tree are skipped rather than
    failing the whole parse.
    """
    options = options or FocusParserOptions()
    text = strip_line_comments(source_text, string_aware=options.string_aware_comments)

    tree_match = block_pattern("focus_tree").search(text)
    if tree_match is None:
        return None
    tree_end = find_block_end(text, tree_match.end())
    if tree_end == -1:
        return None

    tree_offset = tree_match.start()
    tree_text = text[tree_offset : tree_end + 1]
    tree_id = extract_field(tree_text, "id") or DEFAULT_TREE_ID

    diagnostics: list[Diagnostic] = []
    focuses: dict[str, FocusNode] = {}

    position = 0
    while (focus_match := _FOCUS_BLOCK_RE.search(tree_text, position)) is not None:
        focus_end = find_block_end(tree_text, focus_match.end())
        if focus_end == -1:
            diagnostics.append(
                diagnostic_from_spec(
                    FOCUS_UNTERMINATED_BLOCK,
                    start=tree_offset + focus_match.start(),
                    end=tree_offset + focus_match.end(),
                )
            )
            position = focus_match.end()
            continue

        position = focus_end + 1
        start = tree_offset + focus_match.start()
        end = tree_offset + focus_end + 1
        node = _parse_focus_block(text, start, end)
        if node is None:
            continue

        existing = focuses.get(node.id)
        if existing is not None and options.report_duplicate_ids:
            diagnostics.append(
                diagnostic_from_spec(
                    FOCUS_DUPLICATE_ID,
                    start=start,
                    end=end,
                    detail=f"`{node.id}` already declared on line {existing.line}.",
                )
            )
        focuses[node.id] = node

    diagnostics.extend(resolve_absolute_positions(focuses))

    return FocusTree(
        id=tree_id,
        focuses=focuses,
        source_text=text,
        diagnostics=diagnostics,
    )


def _parse_focus_block(text: str, start: int, end: int) -> FocusNode | None:
    block = text[start:end]
    focus_id = extract_field(block, "id")
    if not focus_id:
        return None

    return FocusNode(
        id=focus_id,
        x=extract_top_level_number(block, "x") or 0,
        y=extract_top_level_number(block, "y") or 0,
        icon=extract_field(block, "icon") or None,
        cost=extract_number(block, "cost"),
        prerequisite=extract_prerequisites(block),
        mutually_exclusive=extract_mutually_exclusive(block),
        relative_position_id=extract_field(block, "relative_position_id") or None,
        modifier_text=extract_block_text(block, "modifier"),
        completion_reward_text=extract_block_text(block, "completion_reward"),
        line=line_number_at(text, start),
        end_line=line_number_at(text, end - 1),
        range=TextRange.from_offsets(start, end),
    )
