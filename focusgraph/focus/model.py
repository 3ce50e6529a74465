"""Models for parsed focus trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from focusgraph.diagnostics import Diagnostic, has_warnings
from focusgraph.text import TextRange

Number: TypeAlias = int | float


@dataclass(frozen=True, slots=True)
class FocusPosition:
    """Resolved absolute grid coordinates of a focus."""

    x: Number
    y: Number


@dataclass(slots=True)
class FocusNode:
    """One `focus = { ... }` declaration.

    Everything except `position` is fixed at parse time. `position` is written
    once by `resolve_absolute_positions`.
    """

    id: str
    x: Number = 0
    y: Number = 0
    icon: str | None = None
    cost: Number | None = None
    prerequisite: list[list[str]] = field(default_factory=list)
    mutually_exclusive: list[str] = field(default_factory=list)
    relative_position_id: str | None = None
    modifier_text: str | None = None
    completion_reward_text: str | None = None
    line: int = 1
    end_line: int = 1
    range: TextRange = field(default_factory=lambda: TextRange(0, 0))
    position: FocusPosition | None = None

    @property
    def absolute_x(self) -> Number | None:
        return None if self.position is None else self.position.x

    @property
    def absolute_y(self) -> Number | None:
        return None if self.position is None else self.position.y

    @property
    def is_resolved(self) -> bool:
        return self.position is not None

    def prerequisite_ids(self) -> tuple[str, ...]:
        """Every focus id mentioned by any prerequisite group, first-seen order."""
        return tuple(dict.fromkeys(focus_id for group in self.prerequisite for focus_id in group))


@dataclass(slots=True)
class FocusTree:
    """Result of parsing one `focus_tree = { ... }` block.

    Node ranges refer to `source_text`, the comment-stripped input.
    """

    id: str
    focuses: dict[str, FocusNode]
    source_text: str = ""
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return has_warnings(self.diagnostics)

    def contains(self, focus_id: str) -> bool:
        return focus_id in self.focuses

    def get(self, focus_id: str) -> FocusNode | None:
        return self.focuses.get(focus_id)

    def search(self, query: str) -> list[str]:
        from focusgraph.focus.search import search_focuses

        return search_focuses(self.focuses, query)
