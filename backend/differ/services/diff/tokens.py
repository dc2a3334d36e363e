"""
Token-level diff used to highlight the changed parts of a modified line.

Unlike the line differ there is no replace step: two differing tokens are
reported as a removal followed by an addition. Ties favour insertion.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import StrEnum
from typing import NamedTuple

from differ.services.diff.alignment import AlignmentOp, EditOp, align, prefer_insert
from differ.services.diff.tokenizer import Token, tokenize


class PartKind(StrEnum):
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


class TokenDiffPart(NamedTuple):
    text: str
    kind: PartKind


def _same_text(a: Token, b: Token) -> bool:
    return a.text == b.text


def _to_parts(step: AlignmentOp[Token]) -> list[TokenDiffPart]:
    if step.op is EditOp.MATCH:
        return [TokenDiffPart(step.left.text, PartKind.UNCHANGED)]
    if step.op is EditOp.DELETE:
        return [TokenDiffPart(step.left.text, PartKind.REMOVED)]
    if step.op is EditOp.INSERT:
        return [TokenDiffPart(step.right.text, PartKind.ADDED)]
    # REPLACE never comes out of prefer_insert; split it the same way anyway.
    return [
        TokenDiffPart(step.left.text, PartKind.REMOVED),
        TokenDiffPart(step.right.text, PartKind.ADDED),
    ]


def merge_parts(parts: Iterable[TokenDiffPart]) -> list[TokenDiffPart]:
    """Coalesce adjacent parts of the same kind into one part."""
    merged: list[TokenDiffPart] = []
    for part in parts:
        if merged and merged[-1].kind == part.kind:
            merged[-1] = TokenDiffPart(merged[-1].text + part.text, part.kind)
        else:
            merged.append(part)
    return merged


def align_tokens(tokens1: Sequence[Token], tokens2: Sequence[Token]) -> list[TokenDiffPart]:
    """Align two token sequences and return merged highlight spans."""
    ops = align(tokens1, tokens2, prefer_insert, equal=_same_text)
    return merge_parts(part for step in ops for part in _to_parts(step))


def diff_text(old: str, new: str) -> list[TokenDiffPart]:
    """Tokenize both strings and return the merged word-level diff."""
    return align_tokens(tokenize(old), tokenize(new))
