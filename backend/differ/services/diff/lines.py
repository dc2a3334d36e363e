"""
Line-level diff: alignment of two line sequences and numbered diff records.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from differ.services.diff.alignment import AlignmentOp, EditOp, align, prefer_delete
from differ.services.diff.tokens import TokenDiffPart


class LineStatus(StrEnum):
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


_STATUS: dict[EditOp, LineStatus] = {
    EditOp.MATCH: LineStatus.UNCHANGED,
    EditOp.DELETE: LineStatus.REMOVED,
    EditOp.INSERT: LineStatus.ADDED,
    EditOp.REPLACE: LineStatus.MODIFIED,
}


@dataclass(frozen=True)
class DiffLine:
    """
    One row of a side-by-side diff.

    ``left_number`` is None only for added lines and ``right_number`` only for
    removed lines. ``spans`` carries intra-line highlights for modified lines.
    """

    left_number: int | None
    right_number: int | None
    left: str
    right: str
    status: LineStatus
    spans: tuple[TokenDiffPart, ...] | None = None


def align_lines(lines1: Sequence[str], lines2: Sequence[str]) -> list[AlignmentOp[str]]:
    """Align two line sequences on exact text equality (delete-preferred ties)."""
    return align(lines1, lines2, prefer_delete)


def build_diff_lines(ops: Iterable[AlignmentOp[str]]) -> list[DiffLine]:
    """Number aligned lines from 1 on each side and tag them with a status."""
    result: list[DiffLine] = []
    left_number = 1
    right_number = 1

    for step in ops:
        status = _STATUS[step.op]
        left_present = step.op is not EditOp.INSERT
        right_present = step.op is not EditOp.DELETE

        result.append(
            DiffLine(
                left_number=left_number if left_present else None,
                right_number=right_number if right_present else None,
                left=step.left or "",
                right=step.right or "",
                status=status,
            )
        )
        if left_present:
            left_number += 1
        if right_present:
            right_number += 1

    return result


def diff_lines(lines1: Sequence[str], lines2: Sequence[str]) -> list[DiffLine]:
    return build_diff_lines(align_lines(lines1, lines2))
