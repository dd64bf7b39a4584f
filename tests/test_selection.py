"""Unit tests for top-N selection and display ordering."""

from __future__ import annotations

import pytest

from tagcloud.cloud.selection import alpha_order, count_order, select_top_n


def test_ties_broken_alphabetically_at_both_stages() -> None:
    table = {"apple": 5, "banana": 5, "cherry": 2}
    assert select_top_n(table, 2) == [("apple", 5), ("banana", 5)]


def test_selection_by_count_then_display_alphabetically() -> None:
    table = {"zebra": 9, "mango": 1, "apple": 4, "kiwi": 7}
    assert select_top_n(table, 3) == [("apple", 4), ("kiwi", 7), ("zebra", 9)]


def test_count_ties_resolved_case_insensitively() -> None:
    table = {"delta": 3, "Alpha": 3, "charlie": 3}
    assert select_top_n(table, 2) == [("Alpha", 3), ("charlie", 3)]


def test_display_order_ignores_case() -> None:
    table = {"Zebra": 1, "apple": 1, "Mango": 3}
    assert [word for word, _ in select_top_n(table, 3)] == ["apple", "Mango", "Zebra"]


def test_display_tie_broken_by_count_descending() -> None:
    table = {"Apple": 2, "apple": 5}
    assert select_top_n(table, 2) == [("apple", 5), ("Apple", 2)]


def test_n_equal_to_table_size_selects_everything() -> None:
    table = {"beta": 1, "alpha": 2, "gamma": 3}
    assert select_top_n(table, 3) == [("alpha", 2), ("beta", 1), ("gamma", 3)]


def test_n_above_table_size_is_clamped() -> None:
    table = {"beta": 1, "alpha": 2, "gamma": 3}
    assert select_top_n(table, 50) == select_top_n(table, 3)


def test_rejects_non_positive_n() -> None:
    with pytest.raises(ValueError):
        select_top_n({"alpha": 1}, 0)


def test_rejects_empty_table() -> None:
    with pytest.raises(ValueError):
        select_top_n({}, 1)


def test_sort_keys() -> None:
    assert count_order(("Word", 3)) == (-3, "word")
    assert alpha_order(("Word", 3)) == ("word", -3)
