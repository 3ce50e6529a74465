"""`country_event` call graph parsing."""

from focusgraph.events.layers import EventLayer, build_event_layers
from focusgraph.events.model import EventGraph, EventNode
from focusgraph.events.parser import parse_event_text

__all__ = [
    "EventGraph",
    "EventLayer",
    "EventNode",
    "build_event_layers",
    "parse_event_text",
]
