"""
JSON serializer feeding the diff engine.

Pretty-prints a value with sorted keys so that structurally equal inputs
always produce the same lines, whatever order their keys arrived in.
"""

from __future__ import annotations

import json
from typing import Any

import structlog

from differ.core.errors import SerializationError

_log = structlog.get_logger(__name__)


class JsonSerializer:
    """Turns a JSON-compatible value into an ordered list of text lines."""

    def __init__(self, indent: int = 4, sort_keys: bool = True) -> None:
        self._indent = indent
        self._sort_keys = sort_keys

    def dumps(self, value: Any) -> str:
        try:
            return json.dumps(
                value,
                indent=self._indent,
                sort_keys=self._sort_keys,
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError) as exc:
            _log.warning("serialization_failed", error=str(exc), value_type=type(value).__name__)
            raise SerializationError(f"Value cannot be serialized to JSON: {exc}") from exc

    def to_lines(self, value: Any) -> list[str]:
        return self.dumps(value).split("\n")
