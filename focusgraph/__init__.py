"""Focus tree and event graph extraction from Paradox script text."""

from focusgraph.events import EventGraph, EventNode, build_event_layers, parse_event_text
from focusgraph.focus import (
    CommentMode,
    FocusNode,
    FocusParserOptions,
    FocusTree,
    parse_focus_tree_text,
    search_focuses,
)

__all__ = [
    "CommentMode",
    "EventGraph",
    "EventNode",
    "FocusNode",
    "FocusParserOptions",
    "FocusTree",
    "build_event_layers",
    "parse_event_text",
    "parse_focus_tree_text",
    "search_focuses",
]
