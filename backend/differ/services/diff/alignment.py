"""
Minimum edit-distance alignment shared by the line and token differs.

Both differs fill the same (m+1) x (n+1) cost table and walk it back from the
bottom-right corner. They differ only in which operation a cell records when
the two elements are not equal; that choice is delegated to a tie-break policy.

Each cell stores its cost together with the operation chosen for it, so the
backtrack simply follows recorded operations.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")


class EditOp(StrEnum):
    MATCH = "match"
    DELETE = "delete"
    INSERT = "insert"
    REPLACE = "replace"


class Cell(NamedTuple):
    cost: int
    op: EditOp


@dataclass(frozen=True)
class AlignmentOp(Generic[T]):
    """
    One step of an alignment.

    ``left`` is None for INSERT, ``right`` is None for DELETE.
    """

    op: EditOp
    left: T | None = None
    right: T | None = None


# Policy input: the costs of the delete, insert and replace neighbours
# (cost(i-1, j), cost(i, j-1), cost(i-1, j-1)) before adding the edit cost.
TieBreakPolicy = Callable[[int, int, int], EditOp]

# (left consumed, right consumed) for each operation.
_STEP: dict[EditOp, tuple[int, int]] = {
    EditOp.MATCH: (1, 1),
    EditOp.DELETE: (1, 0),
    EditOp.INSERT: (0, 1),
    EditOp.REPLACE: (1, 1),
}


def prefer_delete(delete: int, insert: int, replace: int) -> EditOp:
    """Line-level policy: delete wins ties over insert, insert over replace."""
    if delete <= insert and delete <= replace:
        return EditOp.DELETE
    if insert <= replace:
        return EditOp.INSERT
    return EditOp.REPLACE


def prefer_insert(delete: int, insert: int, replace: int) -> EditOp:
    """Token-level policy: no replace; insert wins unless deleting is strictly cheaper."""
    return EditOp.INSERT if insert <= delete else EditOp.DELETE


def build_table(
    left: Sequence[T],
    right: Sequence[T],
    policy: TieBreakPolicy,
    equal: Callable[[T, T], bool] = operator.eq,
) -> list[list[Cell]]:
    """Fill the cost table. Row 0 is all inserts, column 0 all deletes."""
    m, n = len(left), len(right)

    table: list[list[Cell]] = [[Cell(0, EditOp.MATCH)] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        table[i][0] = Cell(i, EditOp.DELETE)
    for j in range(1, n + 1):
        table[0][j] = Cell(j, EditOp.INSERT)

    for i in range(1, m + 1):
        row, above = table[i], table[i - 1]
        for j in range(1, n + 1):
            if equal(left[i - 1], right[j - 1]):
                row[j] = Cell(above[j - 1].cost, EditOp.MATCH)
                continue
            delete, insert, replace = above[j].cost, row[j - 1].cost, above[j - 1].cost
            row[j] = Cell(1 + min(delete, insert, replace), policy(delete, insert, replace))

    return table


def backtrack(
    left: Sequence[T],
    right: Sequence[T],
    table: list[list[Cell]],
) -> list[AlignmentOp[T]]:
    """Walk the table from (m, n) to (0, 0) and return ops in input order."""
    ops: list[AlignmentOp[T]] = []
    i, j = len(left), len(right)

    while i > 0 or j > 0:
        op = table[i][j].op
        di, dj = _STEP[op]
        ops.append(
            AlignmentOp(
                op=op,
                left=left[i - 1] if di else None,
                right=right[j - 1] if dj else None,
            )
        )
        i -= di
        j -= dj

    ops.reverse()
    return ops


def align(
    left: Sequence[T],
    right: Sequence[T],
    policy: TieBreakPolicy,
    equal: Callable[[T, T], bool] = operator.eq,
) -> list[AlignmentOp[T]]:
    """Return a minimum-cost alignment of ``left`` onto ``right``."""
    if not left and not right:
        return []
    return backtrack(left, right, build_table(left, right, policy, equal))
