"""Models for parsed event files."""

from __future__ import annotations

from dataclasses import dataclass, field

from focusgraph.diagnostics import Diagnostic
from focusgraph.text import TextRange


@dataclass(frozen=True, slots=True)
class EventNode:
    """One `country_event = { ... }` declaration and the events it triggers."""

    id: str
    title: str | None
    desc: str | None
    children: tuple[str, ...]
    line: int
    end_line: int
    range: TextRange


@dataclass(frozen=True, slots=True)
class EventGraph:
    """Events of one file keyed by id, plus the ids no other event triggers."""

    nodes: dict[str, EventNode]
    root_nodes: tuple[str, ...]
    source_text: str = ""
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    def get(self, event_id: str) -> EventNode | None:
        return self.nodes.get(event_id)

    def callers_of(self, event_id: str) -> tuple[str, ...]:
        return tuple(node.id for node in self.nodes.values() if event_id in node.children)
