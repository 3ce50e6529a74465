"""Focus tree parsing, position resolution and lookup."""

from focusgraph.focus.model import FocusNode, FocusPosition, FocusTree
from focusgraph.focus.options import CommentMode, FocusParserOptions
from focusgraph.focus.parser import DEFAULT_TREE_ID, parse_focus_tree_text
from focusgraph.focus.positions import resolve_absolute_positions
from focusgraph.focus.search import search_focuses

__all__ = [
    "DEFAULT_TREE_ID",
    "CommentMode",
    "FocusNode",
    "FocusParserOptions",
    "FocusPosition",
    "FocusTree",
    "parse_focus_tree_text",
    "resolve_absolute_positions",
    "search_focuses",
]
