"""Absolute position resolution for `relative_position_id` chains."""

from __future__ import annotations

from collections.abc import Mapping

from focusgraph.diagnostics import Diagnostic, diagnostic_from_spec
from focusgraph.diagnostics.codes import FOCUS_RELATIVE_POSITION_CYCLE
from focusgraph.focus.model import FocusNode, FocusPosition


def resolve_absolute_positions(focuses: Mapping[str, FocusNode]) -> list[Diagnostic]:
    """Set `position` on every node in `focuses`.

    A node with a `relative_position_id` naming another node in the mapping
    sits at that node's absolute position plus its own `x`/`y`. A node with no
    base (or a base id missing from the mapping) sits at its own `x`/`y`.

    Nodes on a cycle are placed at their own `x`/`y` and one warning is
    returned per cycle, naming the node where the walk re-entered the cycle.
    Chains are followed with an explicit stack, so chain length is not bounded
    by the interpreter's recursion limit.
    """
    diagnostics: list[Diagnostic] = []
    calculated: set[str] = set()

    for start_id in focuses:
        if start_id in calculated:
            continue

        # Nodes waiting for their base, innermost last.
        visiting: list[str] = []
        visiting_set: set[str] = set()
        current_id = start_id

        while True:
            node = focuses[current_id]

            if current_id in calculated and node.position is not None:
                base = node.position
                break

            if current_id in visiting_set:
                cycle_start = visiting.index(current_id)
                cycle = visiting[cycle_start:]
                diagnostics.append(_cycle_diagnostic(node, cycle))
                for member_id in cycle:
                    member = focuses[member_id]
                    _place(member, member.x, member.y)
                    calculated.add(member_id)
                    visiting_set.discard(member_id)
                del visiting[cycle_start:]
                base = FocusPosition(x=node.x, y=node.y)
                break

            base_id = node.relative_position_id
            if base_id is None or base_id not in focuses:
                base = _place(node, node.x, node.y)
                calculated.add(current_id)
                break

            visiting.append(current_id)
            visiting_set.add(current_id)
            current_id = base_id

        for waiting_id in reversed(visiting):
            waiting = focuses[waiting_id]
            base = _place(waiting, base.x + waiting.x, base.y + waiting.y)
            calculated.add(waiting_id)

    return diagnostics


def _place(node: FocusNode, x: int | float, y: int | float) -> FocusPosition:
    position = FocusPosition(x=x, y=y)
    node.position = position
    return position


def _cycle_diagnostic(node: FocusNode, cycle: list[str]) -> Diagnostic:
    path = " -> ".join([*cycle, node.id])
    return diagnostic_from_spec(
        FOCUS_RELATIVE_POSITION_CYCLE,
        start=node.range.start.value,
        end=node.range.end.value,
        detail=f"Cycle re-entered at `{node.id}`: {path}.",
    )
