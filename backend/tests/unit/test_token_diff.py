"""Unit tests for differ.services.diff.tokens."""
import pytest

from differ.services.diff.tokenizer import tokenize
from differ.services.diff.tokens import (
    PartKind,
    TokenDiffPart,
    align_tokens,
    diff_text,
    merge_parts,
)

U, A, R = PartKind.UNCHANGED, PartKind.ADDED, PartKind.REMOVED


def _pairs(parts):
    return [(p.text, p.kind) for p in parts]


def test_whole_word_change_is_removed_then_added():
    assert _pairs(diff_text("red", "blue")) == [("red", R), ("blue", A)]


def test_digit_change_stays_apart_from_letters():
    assert _pairs(diff_text("abc123", "abc456")) == [("abc", U), ("123", R), ("456", A)]


def test_identical_text_is_one_unchanged_span():
    line = '        "size": "M"'
    assert _pairs(diff_text(line, line)) == [(line, U)]


def test_json_value_change():
    parts = diff_text('        "color": "red",', '        "color": "blue",')
    assert _pairs(parts) == [
        ('        "color": "', U),
        ("red", R),
        ("blue", A),
        ('",', U),
    ]


def test_empty_sides():
    assert diff_text("", "") == []
    assert _pairs(diff_text("", "new value")) == [("new value", A)]
    assert _pairs(diff_text("old value", "")) == [("old value", R)]


def test_ties_prefer_insert():
    # Swapped tokens: the trailing "a" is inserted, the leading one removed.
    assert _pairs(diff_text("a1", "1a")) == [("a", R), ("1", U), ("a", A)]


def test_parts_rebuild_both_sides():
    old = '    "name": "Product A"'
    new = '    "name": "Product B",'
    parts = diff_text(old, new)
    assert "".join(p.text for p in parts if p.kind != A) == old
    assert "".join(p.text for p in parts if p.kind != R) == new


def test_adjacent_parts_differ_in_kind():
    parts = diff_text("The cat sat on 3 mats.", "A dog sat on 12 mats!")
    for left, right in zip(parts, parts[1:]):
        assert left.kind != right.kind


def test_align_tokens_compares_text():
    assert _pairs(align_tokens(tokenize("x = 1"), tokenize("x = 2"))) == [
        ("x = ", U),
        ("1", R),
        ("2", A),
    ]


def test_merge_coalesces_runs():
    parts = [
        TokenDiffPart("a", U),
        TokenDiffPart(" ", U),
        TokenDiffPart("b", R),
        TokenDiffPart("c", R),
        TokenDiffPart("d", A),
        TokenDiffPart("e", U),
    ]
    assert _pairs(merge_parts(parts)) == [("a ", U), ("bc", R), ("d", A), ("e", U)]


@pytest.mark.parametrize(
    "old,new",
    [
        ("red", "blue"),
        ("abc123", "abc456"),
        ('"tags": ["a", "b"]', '"tags": ["a", "c", "d"]'),
        ("", "x"),
    ],
)
def test_merge_is_idempotent(old, new):
    parts = diff_text(old, new)
    assert merge_parts(parts) == parts


def test_merge_of_nothing():
    assert merge_parts([]) == []
