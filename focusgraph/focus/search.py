"""Focus id lookup."""

from __future__ import annotations

from collections.abc import Iterable


def search_focuses(focuses: Iterable[str], query: str) -> list[str]:
    """Ids containing `query`, case-insensitively, in iteration order.

    `focuses` is usually the `FocusTree.focuses` mapping. An empty query
    matches nothing.
    """
    if not query:
        return []
    needle = query.lower()
    return [focus_id for focus_id in focuses if needle in focus_id.lower()]
