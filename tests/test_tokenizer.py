"""Unit tests for run tokenization and token classification."""

from __future__ import annotations

import pytest

from tagcloud.cloud.tokenizer import (
    is_countable,
    is_excluded,
    is_separator,
    is_separator_token,
    iter_runs,
    next_run,
)
from tagcloud.constants import SEPARATORS


# ---------------------------------------------------------------------------
# next_run


def test_next_run_returns_word_run() -> None:
    assert next_run("hello, world", 0) == "hello"


def test_next_run_returns_separator_run() -> None:
    assert next_run("hello, world", 5) == ", "


def test_next_run_stops_at_end_of_line() -> None:
    assert next_run("hello, world", 7) == "world"


def test_next_run_from_middle_of_word() -> None:
    assert next_run("hello", 2) == "llo"


@pytest.mark.parametrize(
    "line",
    [
        "The quick (brown) fox -- jumps!",
        '"Quoted", she said; then: left/right*',
        "under_score back\\slash `tick` [brackets] it's",
        "   leading and trailing   ",
        "nodelimiters",
        "...",
        "\tTabbed\r",
    ],
)
def test_runs_reconstruct_line_and_are_homogeneous(line: str) -> None:
    runs = list(iter_runs(line))
    assert "".join(runs) == line
    for run in runs:
        assert run
        flags = {is_separator(char) for char in run}
        assert len(flags) == 1


def test_adjacent_runs_alternate_kind() -> None:
    runs = list(iter_runs("a, b. c"))
    kinds = [is_separator_token(run) for run in runs]
    assert all(left != right for left, right in zip(kinds, kinds[1:]))


def test_empty_line_has_no_runs() -> None:
    assert list(iter_runs("")) == []


# ---------------------------------------------------------------------------
# classification


def test_separator_set_contents() -> None:
    assert SEPARATORS == frozenset("\"\t\n\r, `-.!?[]';:/()*\\_")
    assert not is_separator("#")
    assert not is_separator("&")


def test_separator_token_checks_first_character() -> None:
    assert is_separator_token(" -")
    assert is_separator_token("...")
    assert not is_separator_token("word")


@pytest.mark.parametrize("token", ["a", "and", "the", "I", "x", "7"])
def test_excluded_tokens(token: str) -> None:
    assert is_excluded(token)


@pytest.mark.parametrize("token", ["The", "And", "A1", "an", "cat"])
def test_stopwords_are_case_sensitive(token: str) -> None:
    assert not is_excluded(token)


def test_countable_requires_word_and_not_excluded() -> None:
    assert is_countable("cloud")
    assert not is_countable(", ")
    assert not is_countable("the")
    assert not is_countable("s")
