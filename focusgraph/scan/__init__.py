"""Comment-aware scanning and field extraction over raw script text."""

from focusgraph.scan.blocks import NamedBlock, block_pattern, find_block_end, iter_named_blocks
from focusgraph.scan.comments import strip_line_comments
from focusgraph.scan.fields import (
    extract_block_text,
    extract_field,
    extract_number,
    extract_top_level_number,
)
from focusgraph.scan.relations import extract_mutually_exclusive, extract_prerequisites
from focusgraph.scan.scalar import parse_leading_number, parse_number

__all__ = [
    "NamedBlock",
    "block_pattern",
    "extract_block_text",
    "extract_field",
    "extract_mutually_exclusive",
    "extract_number",
    "extract_prerequisites",
    "extract_top_level_number",
    "find_block_end",
    "iter_named_blocks",
    "parse_leading_number",
    "parse_number",
    "strip_line_comments",
]
