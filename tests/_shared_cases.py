"""Centralized focus tree and event sources used across scan/focus/event tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap
from typing import Literal, TypeAlias, cast


@dataclass(frozen=True, slots=True)
class FocusCase:
    name: str
    source: str
    expected_ids: tuple[str, ...]


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


FOCUS_CASES: tuple[FocusCase, ...] = (
    FocusCase(
        name="commented_out_focus_between_siblings",
        source=_dedent(
            """
            focus_tree = {
                id = test_tree

                focus = {
                    id = active_focus
                    x = 0
                    y = 0
                    cost = 10
                    icon = "gfx/interface/icons/goal_icons_generic_generic_focus.dds"
                }

                # focus = {
                #     id = commented_focus
                #     x = 1
                #     y = 0
                # }

                focus = {
                    id = another_active_focus
                    x = 2
                    y = 0
                    cost = 20

                    prerequisite = {
                        focus = active_focus
                        # focus = commented_focus
                    }
                }
            }
            """
        ),
        expected_ids=("active_focus", "another_active_focus"),
    ),
    FocusCase(
        name="inline_comments_after_values",
        source=_dedent(
            """
            focus_tree = {
                id = test_tree
                focus = {
                    id = test_focus
                    x = 0
                    y = 0
                    cost = 10  # inline note
                    icon = "gfx/interface/goals/focus_generic.dds"  # icon note
                }
                focus = {
                    id = another_test_focus
                    x = 1
                    y = 0
                    cost = 15  # another note
                    prerequisite = {
                        focus = test_focus  # prerequisite note
                    }
                }
            }
            """
        ),
        expected_ids=("test_focus", "another_test_focus"),
    ),
    FocusCase(
        name="only_comment_lines_and_trailing_commented_block",
        source=_dedent(
            """
            focus_tree = {
                id = test_tree

                # a comment line

                focus = {
                    id = sole_focus
                    x = 0
                    y = 0
                    cost = 5
                }

                # focus = {
                #     id = should_be_ignored
                # }
            }
            """
        ),
        expected_ids=("sole_focus",),
    ),
    FocusCase(
        name="relative_position_chain",
        source=_dedent(
            """
            focus_tree = {
                id = chain_tree
                focus = {
                    id = A
                    x = 0
                    y = 0
                }
                focus = {
                    id = B
                    relative_position_id = A
                    x = 5
                    y = 0
                }
                focus = {
                    id = C
                    relative_position_id = B
                    x = 2
                    y = 0
                }
            }
            """
        ),
        expected_ids=("A", "B", "C"),
    ),
    FocusCase(
        name="nested_fields_do_not_leak",
        source=_dedent(
            """
            focus_tree = {
                id = nested_tree
                country = {
                    factor = 0
                    modifier = {
                        add = 10
                        tag = GER
                    }
                }
                focus = {
                    id = GER_rhineland
                    icon = GFX_goal_generic_army_doctrines
                    completion_reward = {
                        x = 99
                        y = 99
                        add_political_power = 120
                    }
                    x = 4
                    y = 1
                    cost = 7.5
                    mutually_exclusive = { focus = GER_oppose_hitler }
                    mutually_exclusive = { focus = GER_hitler focus = GER_oppose_hitler }
                    modifier = {
                        political_power_gain = 0.1
                    }
                }
                focus = {
                    id = GER_oppose_hitler
                    x = -2
                    y = 3
                    prerequisite = { focus = GER_rhineland focus = GER_army }
                    prerequisite = { focus = GER_navy }
                    prerequisite = { }
                }
            }
            """
        ),
        expected_ids=("GER_rhineland", "GER_oppose_hitler"),
    ),
)

CaseName: TypeAlias = Literal[
    "commented_out_focus_between_siblings",
    "inline_comments_after_values",
    "only_comment_lines_and_trailing_commented_block",
    "relative_position_chain",
    "nested_fields_do_not_leak",
]

CASE_BY_NAME: dict[CaseName, FocusCase] = cast(
    dict[CaseName, FocusCase],
    {case.name: case for case in FOCUS_CASES},
)

EVENT_SOURCE = _dedent(
    """
    namespace = my_event

    country_event = {
        id = my_event.1
        title = my_event.1.t
        desc = "my_event.1.d"

        option = {
            name = my_event.1.a
            country_event = my_event.2
        }
        option = {
            name = my_event.1.b
            country_event = { id = my_event.3 days = 2 }
        }
    }

    # country_event = {
    #     id = my_event.99
    # }

    country_event = {
        id = my_event.2
        option = {
            name = my_event.2.a
            country_event = { days = 1 id = "my_event.4" }
        }
    }

    country_event = {
        id = my_event.3
        option = { name = my_event.3.a }
    }

    country_event = {
        id = my_event.5
        title = my_event.5.t
    }
    """
)


def case_source(name: CaseName) -> str:
    return CASE_BY_NAME[name].source


def case_id(case: FocusCase) -> str:
    return case.name
