"""JSON input validation used by editors before submitting a comparison."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class JsonValidation:
    valid: bool
    error: str | None = None
    data: Any = None


def validate_json(text: str) -> JsonValidation:
    """Parse ``text`` as JSON, reporting blank input and syntax errors."""
    if not text.strip():
        return JsonValidation(valid=False, error="JSON cannot be empty")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        return JsonValidation(valid=False, error=f"Invalid JSON: {exc}")

    return JsonValidation(valid=True, data=data)
