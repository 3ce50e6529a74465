"""Breadth-first layering of an event call graph."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from focusgraph.events.model import EventGraph


@dataclass(slots=True)
class EventLayer:
    level: int
    event_ids: list[str] = field(default_factory=list)


def build_event_layers(graph: EventGraph) -> list[EventLayer]:
    """Group events by call depth starting from the graph's root events.

    An event reachable along several paths lands in the layer of its first
    visit. Triggered ids that are not declared in the file still get a slot.
    """
    layers: list[EventLayer] = []
    visited: set[str] = set()
    queue: deque[tuple[str, int]] = deque((root_id, 0) for root_id in graph.root_nodes)

    while queue:
        event_id, level = queue.popleft()
        if event_id in visited:
            continue
        visited.add(event_id)

        while len(layers) <= level:
            layers.append(EventLayer(level=len(layers)))
        layers[level].event_ids.append(event_id)

        node = graph.nodes.get(event_id)
        if node is None:
            continue
        for child_id in node.children:
            if child_id not in visited:
                queue.append((child_id, level + 1))

    return layers
