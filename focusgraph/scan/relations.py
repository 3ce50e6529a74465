"""Prerequisite and mutual-exclusion extraction."""

from __future__ import annotations

import re

from focusgraph.scan.blocks import iter_named_blocks

_FOCUS_REFERENCE_RE = re.compile(r"\bfocus\s*=\s*([A-Za-z0-9_]+)")


def extract_prerequisites(block: str) -> list[list[str]]:
    """One AND-group per `prerequisite = { ... }`; any group satisfies (OR).

    Blocks that reference no focus are dropped.
    """
    groups: list[list[str]] = []
    for prerequisite in iter_named_blocks(block, "prerequisite"):
        focus_ids = _FOCUS_REFERENCE_RE.findall(prerequisite.body(block))
        if focus_ids:
            groups.append(focus_ids)
    return groups


def extract_mutually_exclusive(block: str) -> list[str]:
    """All focus ids from every `mutually_exclusive` block, in order, not deduplicated."""
    exclusive: list[str] = []
    for mutually_exclusive in iter_named_blocks(block, "mutually_exclusive"):
        exclusive.extend(_FOCUS_REFERENCE_RE.findall(mutually_exclusive.body(block)))
    return exclusive
