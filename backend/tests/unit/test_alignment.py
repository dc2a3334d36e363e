"""Unit tests for differ.services.diff.alignment."""
from differ.services.diff.alignment import (
    AlignmentOp,
    EditOp,
    align,
    build_table,
    prefer_delete,
    prefer_insert,
)


def _ops(steps):
    return [s.op for s in steps]


def test_empty_inputs_align_to_nothing():
    assert align([], [], prefer_delete) == []
    assert align([], [], prefer_insert) == []


def test_one_empty_side():
    assert align(["a", "b"], [], prefer_delete) == [
        AlignmentOp(EditOp.DELETE, "a", None),
        AlignmentOp(EditOp.DELETE, "b", None),
    ]
    assert align([], ["a", "b"], prefer_insert) == [
        AlignmentOp(EditOp.INSERT, None, "a"),
        AlignmentOp(EditOp.INSERT, None, "b"),
    ]


def test_table_borders_and_distance():
    table = build_table("kitten", "sitting", prefer_delete)
    assert [cell.cost for cell in table[0]] == list(range(8))
    assert [row[0].cost for row in table] == list(range(7))
    assert all(cell.op is EditOp.INSERT for cell in table[0][1:])
    assert all(row[0].op is EditOp.DELETE for row in table[1:])
    assert table[-1][-1].cost == 3


def test_prefer_delete_order():
    assert prefer_delete(1, 1, 1) is EditOp.DELETE
    assert prefer_delete(2, 1, 1) is EditOp.INSERT
    assert prefer_delete(2, 2, 1) is EditOp.REPLACE
    assert prefer_delete(1, 2, 1) is EditOp.DELETE


def test_prefer_insert_never_replaces():
    assert prefer_insert(1, 1, 0) is EditOp.INSERT
    assert prefer_insert(0, 1, 0) is EditOp.DELETE
    assert prefer_insert(5, 5, 0) is EditOp.INSERT


def test_swap_resolves_differently_per_policy():
    left, right = ["a", "b"], ["b", "a"]
    assert _ops(align(left, right, prefer_delete)) == [EditOp.INSERT, EditOp.MATCH, EditOp.DELETE]
    assert _ops(align(left, right, prefer_insert)) == [EditOp.DELETE, EditOp.MATCH, EditOp.INSERT]


def test_custom_equality():
    steps = align(["A", "b"], ["a", "B"], prefer_delete, equal=lambda x, y: x.lower() == y.lower())
    assert _ops(steps) == [EditOp.MATCH, EditOp.MATCH]
    assert steps[0] == AlignmentOp(EditOp.MATCH, "A", "a")


def test_every_element_consumed_once_in_order():
    left = list("abcxdef")
    right = list("zabdeyf")
    for policy in (prefer_delete, prefer_insert):
        steps = align(left, right, policy)
        assert [s.left for s in steps if s.left is not None] == left
        assert [s.right for s in steps if s.right is not None] == right
