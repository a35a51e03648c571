# tests/test_edit_distance.py
# bounded Levenshtein: exact values, sentinel, symmetry, length-gap shortcut

import itertools

import pytest

from trie_autocorrector.core import edit_distance
from trie_autocorrector.core.edit_distance import (
    bounded_edit_distance,
    edit_row,
    first_row,
    levenshtein,
)

WORDS = ["", "a", "ab", "ba", "abc", "cat", "cot", "cats", "car", "act", "kitten", "sitting", "flaw", "lawn"]


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("", "", 0),
        ("", "abc", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("cat", "cot", 1),
        ("cot", "car", 2),
        ("cot", "cats", 2),
        ("ab", "ba", 2),
        ("intention", "execution", 5),
    ],
)
def test_unbounded_distance(a, b, expected):
    assert levenshtein(a, b) == expected
    assert bounded_edit_distance(a, b, None) == expected


def test_within_bound_returns_true_distance():
    assert bounded_edit_distance("kitten", "sitting", 3) == 3
    assert bounded_edit_distance("kitten", "sitting", 5) == 3
    assert bounded_edit_distance("same", "same", 0) == 0


def test_over_bound_returns_sentinel():
    assert bounded_edit_distance("kitten", "sitting", 2) == 3
    assert bounded_edit_distance("kitten", "sitting", 1) == 2
    assert bounded_edit_distance("abc", "xyz", 0) == 1
    assert bounded_edit_distance("ab", "ba", 1) == 2


@pytest.mark.parametrize("k", [0, 1, 2, 3])
def test_sentinel_property(k):
    for a, b in itertools.product(WORDS, repeat=2):
        assert bounded_edit_distance(a, b, k) == min(levenshtein(a, b), k + 1)


@pytest.mark.parametrize("k", [0, 1, 2, 4])
def test_symmetry(k):
    for a, b in itertools.combinations(WORDS, 2):
        assert bounded_edit_distance(a, b, k) == bounded_edit_distance(b, a, k)


def test_length_gap_skips_the_table(monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("DP table should not be built")

    monkeypatch.setattr(edit_distance, "edit_row", boom)
    assert bounded_edit_distance("a", "abcd", 2) == 3
    assert bounded_edit_distance("abcdef", "", 4) == 5


@pytest.mark.parametrize("k", [-1, -3])
def test_negative_bound_returns_sentinel(k):
    assert bounded_edit_distance("a", "b", k) == k + 1
    assert bounded_edit_distance("same", "same", k) == k + 1
    assert bounded_edit_distance("", "abc", k) == bounded_edit_distance("abc", "", k)


def test_edit_row_builds_table():
    row = first_row("cat")
    assert row == [0, 1, 2, 3]
    row = edit_row(row, "c", "cat")
    assert row == [1, 0, 1, 2]
    row = edit_row(row, "o", "cat")
    assert row == [2, 1, 1, 2]
    row = edit_row(row, "t", "cat")
    assert row[-1] == levenshtein("cot", "cat") == 1
