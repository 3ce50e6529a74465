"""Event file parser building the `country_event` call graph."""

from __future__ import annotations

import re

from focusgraph.diagnostics import Diagnostic, diagnostic_from_spec
from focusgraph.diagnostics.codes import EVENT_UNTERMINATED_BLOCK
from focusgraph.events.model import EventGraph, EventNode
from focusgraph.focus.options import FocusParserOptions
from focusgraph.scan import (
    block_pattern,
    extract_field,
    find_block_end,
    iter_named_blocks,
    strip_line_comments,
)
from focusgraph.text import TextRange, line_number_at

_EVENT_ID = r'(?:"([A-Za-z0-9_.]+)"|([A-Za-z0-9_.]+))'
_ID_RE = re.compile(rf"\bid\s*=\s*{_EVENT_ID}")
_DIRECT_CALL_RE = re.compile(rf"\bcountry_event\s*=\s*{_EVENT_ID}")


def parse_event_text(
    source_text: str,
    options: FocusParserOptions | None = None,
) -> EventGraph:
    """Parse every top-level `country_event` block of an event file.

    Search resumes after each parsed block, so `country_event` calls nested
    inside an event are read as children, not as declarations.
    """
    options = options or FocusParserOptions()
    text = strip_line_comments(source_text, string_aware=options.string_aware_comments)
    pattern = block_pattern("country_event")

    nodes: dict[str, EventNode] = {}
    called: set[str] = set()
    diagnostics: list[Diagnostic] = []

    position = 0
    while (match := pattern.search(text, position)) is not None:
        block_end = find_block_end(text, match.end())
        if block_end == -1:
            diagnostics.append(
                diagnostic_from_spec(
                    EVENT_UNTERMINATED_BLOCK,
                    start=match.start(),
                    end=match.end(),
                )
            )
            position = match.end()
            continue

        position = block_end + 1
        block = text[match.start() : block_end + 1]
        event_id = _extract_event_id(block)
        if event_id is None:
            continue

        children = _extract_child_events(block)
        called.update(children)
        nodes[event_id] = EventNode(
            id=event_id,
            title=extract_field(block, "title") or None,
            desc=extract_field(block, "desc") or None,
            children=children,
            line=line_number_at(text, match.start()),
            end_line=line_number_at(text, block_end),
            range=TextRange.from_offsets(match.start(), block_end + 1),
        )

    root_nodes = tuple(event_id for event_id in nodes if event_id not in called)
    return EventGraph(
        nodes=nodes,
        root_nodes=root_nodes,
        source_text=text,
        diagnostics=tuple(diagnostics),
    )


def _extract_event_id(block: str) -> str | None:
    match = _ID_RE.search(block)
    if match is None:
        return None
    quoted, bare = match.groups()
    return quoted if quoted is not None else bare


def _extract_child_events(block: str) -> tuple[str, ...]:
    """At most one triggered event per `option`; a direct call wins over a block call."""
    children: list[str] = []
    for option in iter_named_blocks(block, "option"):
        body = option.body(block)

        direct = _DIRECT_CALL_RE.search(body)
        if direct is not None:
            quoted, bare = direct.groups()
            children.append(quoted if quoted is not None else bare)
            continue

        call = next(iter_named_blocks(body, "country_event"), None)
        if call is None:
            continue
        child_id = _extract_event_id(call.body(body))
        if child_id is not None:
            children.append(child_id)
    return tuple(children)
