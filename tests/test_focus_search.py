from focusgraph import search_focuses
from focusgraph.focus import parse_focus_tree_text
from tests._shared_cases import case_source


def test_search_is_case_insensitive_substring_match() -> None:
    tree = parse_focus_tree_text(case_source("commented_out_focus_between_siblings"))

    assert tree is not None
    assert search_focuses(tree.focuses, "active") == ["active_focus", "another_active_focus"]
    assert search_focuses(tree.focuses, "ACTIVE") == ["active_focus", "another_active_focus"]
    assert search_focuses(tree.focuses, "another") == ["another_active_focus"]
    assert tree.search("Active_F") == ["active_focus", "another_active_focus"]


def test_empty_query_returns_nothing() -> None:
    tree = parse_focus_tree_text(case_source("commented_out_focus_between_siblings"))

    assert tree is not None
    assert search_focuses(tree.focuses, "") == []


def test_search_keeps_mapping_order_and_handles_misses() -> None:
    focuses = {"GER_zeta": 1, "ENG_alpha": 2, "GER_alpha": 3}

    assert search_focuses(focuses, "alpha") == ["ENG_alpha", "GER_alpha"]
    assert search_focuses(focuses, "ger_") == ["GER_zeta", "GER_alpha"]
    assert search_focuses(focuses, "missing") == []
