"""
Diff engine: serializes two values and produces an annotated line diff.

The engine is stateless. Every call receives its inputs explicitly and keeps
only local working memory, so one instance can serve concurrent requests.

Flow:
  value1, value2 -> serializer -> line alignment -> numbered DiffLine records
  -> word-level spans attached to every modified line
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from typing import Any, Protocol

import structlog

from differ.core.errors import InputTooLargeError, MissingInputError
from differ.services.diff.lines import DiffLine, LineStatus, diff_lines
from differ.services.diff.tokenizer import tokenize
from differ.services.diff.tokens import align_tokens

_log = structlog.get_logger(__name__)


class Serializer(Protocol):
    def to_lines(self, value: Any) -> list[str]: ...


class DiffEngine:
    """
    Compares two structured values line by line.

    ``max_lines`` caps the line count of each serialized side, ``max_cells``
    caps the size of the line alignment table (left lines times right lines)
    and ``max_line_tokens`` caps the token count of a modified line before
    word-level highlighting is skipped for it. ``None`` disables a cap.
    """

    def __init__(
        self,
        serializer: Serializer,
        max_lines: int | None = None,
        max_line_tokens: int | None = None,
        max_cells: int | None = None,
    ) -> None:
        self._serializer = serializer
        self._max_lines = max_lines
        self._max_cells = max_cells
        self._max_line_tokens = max_line_tokens

    def compare(self, value1: Any, value2: Any) -> list[DiffLine]:
        """
        Serialize both values and diff the resulting lines.

        Raises:
            MissingInputError: if either value is None.
            SerializationError: if a value cannot be serialized.
            InputTooLargeError: if a side exceeds ``max_lines`` or the pair
                exceeds ``max_cells``.
        """
        missing = [
            name for name, value in (("payload1", value1), ("payload2", value2)) if value is None
        ]
        if missing:
            raise MissingInputError(missing=missing)

        lines1 = self._serializer.to_lines(value1)
        lines2 = self._serializer.to_lines(value2)
        return self.compare_lines(lines1, lines2)

    def compare_lines(self, lines1: Sequence[str], lines2: Sequence[str]) -> list[DiffLine]:
        """Diff two line sequences and attach spans to modified lines."""
        self._check_size("payload1", lines1)
        self._check_size("payload2", lines2)
        if self._max_cells is not None and len(lines1) * len(lines2) > self._max_cells:
            raise InputTooLargeError.for_cells(len(lines1), len(lines2), self._max_cells)

        result = [self._highlight(line) for line in diff_lines(lines1, lines2)]

        _log.debug(
            "lines_compared",
            left_lines=len(lines1),
            right_lines=len(lines2),
            modified=sum(1 for line in result if line.status == LineStatus.MODIFIED),
        )
        return result

    def _check_size(self, side: str, lines: Sequence[str]) -> None:
        if self._max_lines is not None and len(lines) > self._max_lines:
            raise InputTooLargeError.for_side(side, len(lines), self._max_lines)

    def _highlight(self, line: DiffLine) -> DiffLine:
        if line.status != LineStatus.MODIFIED:
            return line

        tokens1 = tokenize(line.left)
        tokens2 = tokenize(line.right)
        limit = self._max_line_tokens
        if limit is not None and max(len(tokens1), len(tokens2)) > limit:
            _log.info(
                "highlight_skipped",
                left_number=line.left_number,
                left_tokens=len(tokens1),
                right_tokens=len(tokens2),
                limit=limit,
            )
            return line

        return dataclasses.replace(line, spans=tuple(align_tokens(tokens1, tokens2)))
