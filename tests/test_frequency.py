"""Unit tests for word counting and case-variant merging."""

from __future__ import annotations

from tagcloud.cloud.frequency import (
    build_frequency_table,
    capitalize_first,
    count_words,
    merge_case_variants,
)


# ---------------------------------------------------------------------------
# count_words


def test_count_words_is_case_sensitive_and_filters() -> None:
    counts = count_words(["The cat and the Cat, a cat."])
    assert dict(counts) == {"The": 1, "cat": 2, "Cat": 1}


def test_count_words_spans_lines() -> None:
    counts = count_words(["tag cloud", "cloud-tag", "CLOUD"])
    assert counts["tag"] == 2
    assert counts["cloud"] == 2
    assert counts["CLOUD"] == 1


def test_count_words_never_keeps_excluded_tokens() -> None:
    counts = count_words(["a and the x y z", "the the and a I"])
    assert not counts


def test_count_words_keeps_contractions_split() -> None:
    counts = count_words(["it's don't"])
    # apostrophe is a separator, leaving single letters that are excluded
    assert dict(counts) == {"it": 1, "don": 1}


# ---------------------------------------------------------------------------
# merge_case_variants


def test_capitalize_first_leaves_rest_untouched() -> None:
    assert capitalize_first("iPhone") == "IPhone"
    assert capitalize_first("cAT") == "CAT"


def test_merge_keeps_more_frequent_capitalized_spelling() -> None:
    assert merge_case_variants({"cat": 3, "Cat": 5}) == {"Cat": 8}


def test_merge_keeps_more_frequent_lowercase_spelling() -> None:
    assert merge_case_variants({"Cat": 3, "cat": 5}) == {"cat": 8}


def test_merge_tie_favours_lowercase() -> None:
    assert merge_case_variants({"Cat": 4, "cat": 4}) == {"cat": 8}


def test_merge_carries_unpaired_words() -> None:
    table = {"Dog": 2, "bird": 1, "NASA": 3}
    assert merge_case_variants(table) == table


def test_merge_does_not_double_caseless_words() -> None:
    assert merge_case_variants({"42nd": 3, "2024": 1}) == {"42nd": 3, "2024": 1}


def test_merge_is_pairwise_only() -> None:
    # CAT pairs with cat first, so the later Cat/cat pair is already recorded
    merged = merge_case_variants({"CAT": 1, "Cat": 2, "cat": 4})
    assert merged == {"cat": 5}


def test_merge_does_not_mutate_input() -> None:
    table = {"cat": 3, "Cat": 5}
    merge_case_variants(table)
    assert table == {"cat": 3, "Cat": 5}


def test_build_frequency_table_counts_then_merges() -> None:
    table = build_frequency_table(["Cat cat cat dog.", "Dog dog dog the a and x", "bird"])
    assert table == {"cat": 3, "dog": 4, "bird": 1}
