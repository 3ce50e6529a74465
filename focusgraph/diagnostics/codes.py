"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


FOCUS_RELATIVE_POSITION_CYCLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="FOCUS_RELATIVE_POSITION_CYCLE",
    message="Cyclic `relative_position_id` chain.",
    hint="Nodes on the cycle are placed at their own `x`/`y`. Break the chain so one node has no relative base.",
    severity="warning",
    category="focus",
)

FOCUS_UNTERMINATED_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="FOCUS_UNTERMINATED_BLOCK",
    message="Unterminated `focus` block; the node was skipped.",
    hint="Check for a missing closing brace or an unbalanced double quote.",
    severity="warning",
    category="focus",
)

FOCUS_DUPLICATE_ID: Final[DiagnosticSpec] = DiagnosticSpec(
    code="FOCUS_DUPLICATE_ID",
    message="Duplicate focus id; the later declaration replaces the earlier one.",
    hint="Keep only one `focus` block per id in the same tree.",
    severity="warning",
    category="focus",
)

EVENT_UNTERMINATED_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVENT_UNTERMINATED_BLOCK",
    message="Unterminated `country_event` block; the event was skipped.",
    hint="Check for a missing closing brace or an unbalanced double quote.",
    severity="warning",
    category="event",
)
