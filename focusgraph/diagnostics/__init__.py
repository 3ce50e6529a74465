"""Diagnostics."""

from focusgraph.diagnostics.codes import (
    EVENT_UNTERMINATED_BLOCK,
    FOCUS_DUPLICATE_ID,
    FOCUS_RELATIVE_POSITION_CYCLE,
    FOCUS_UNTERMINATED_BLOCK,
    DiagnosticSpec,
)
from focusgraph.diagnostics.diagnostic import Diagnostic, Severity, diagnostic_from_spec
from focusgraph.diagnostics.report import collect_diagnostics, has_errors, has_warnings

__all__ = [
    "EVENT_UNTERMINATED_BLOCK",
    "FOCUS_DUPLICATE_ID",
    "FOCUS_RELATIVE_POSITION_CYCLE",
    "FOCUS_UNTERMINATED_BLOCK",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "diagnostic_from_spec",
    "has_errors",
    "has_warnings",
]
