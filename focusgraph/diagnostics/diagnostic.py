"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from focusgraph.diagnostics.codes import DiagnosticSpec
from focusgraph.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the focus and event parsers."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None


def diagnostic_from_spec(
    spec: DiagnosticSpec,
    *,
    start: int,
    end: int,
    detail: str | None = None,
) -> Diagnostic:
    message = spec.message if detail is None else f"{spec.message} {detail}"
    return Diagnostic(
        code=spec.code,
        message=message,
        range=TextRange.from_offsets(start, end),
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )
