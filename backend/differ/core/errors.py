"""
Structured error taxonomy for json-differ.

Every application error has:
  - A stable error code (prefixed by domain)
  - An HTTP status code
  - A human-readable message
  - An optional detail dict for machine consumers

The diff engine itself never fails on well-formed input; these errors belong
to the layers that feed it (payload storage, fixtures, serialization).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Stable error codes. Never reuse a retired code."""

    # Payloads
    PAYLOAD_MISSING = "PAY_001"
    PAYLOAD_FIXTURE_NOT_FOUND = "PAY_002"
    PAYLOAD_FIXTURE_INVALID = "PAY_003"

    # Comparison
    COMPARE_SERIALIZATION_FAILED = "CMP_001"
    COMPARE_INPUT_TOO_LARGE = "CMP_002"

    # Generic
    VALIDATION_ERROR = "GEN_001"
    INTERNAL_ERROR = "GEN_002"
    NOT_FOUND = "GEN_003"


class AppError(Exception):
    """Base class for all application errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        http_status: int = 500,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status
        self.detail = detail or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "detail": self.detail,
            }
        }


# ── Typed convenience subclasses ──────────────────────────────────────── #


class NotFoundError(AppError):
    def __init__(
        self,
        entity: str,
        entity_id: str | None = None,
        code: ErrorCode = ErrorCode.NOT_FOUND,
        message: str | None = None,
    ) -> None:
        detail = {"entity": entity}
        if entity_id:
            detail["id"] = entity_id
        super().__init__(
            code=code,
            message=message or f"{entity} not found",
            http_status=404,
            detail=detail,
        )


class ValidationError(AppError):
    def __init__(self, message: str, detail: dict[str, Any] | None = None) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
            http_status=422,
            detail=detail,
        )


class MissingInputError(AppError):
    """One or both values to compare are absent."""

    def __init__(
        self,
        message: str = "Missing payloads. Please send both payload1 and payload2 first.",
        missing: list[str] | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.PAYLOAD_MISSING,
            message=message,
            http_status=400,
            detail={"missing": missing} if missing else None,
        )


class SerializationError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(
            code=ErrorCode.COMPARE_SERIALIZATION_FAILED,
            message=message,
            http_status=422,
        )


class FixtureError(AppError):
    def __init__(self, message: str, filename: str) -> None:
        super().__init__(
            code=ErrorCode.PAYLOAD_FIXTURE_INVALID,
            message=message,
            http_status=500,
            detail={"filename": filename},
        )


class InputTooLargeError(AppError):
    def __init__(self, message: str, detail: dict[str, Any]) -> None:
        super().__init__(
            code=ErrorCode.COMPARE_INPUT_TOO_LARGE,
            message=message,
            http_status=413,
            detail=detail,
        )

    @classmethod
    def for_side(cls, side: str, count: int, limit: int) -> InputTooLargeError:
        return cls(
            f"{side} serializes to {count} lines; the limit is {limit}",
            {"side": side, "lines": count, "limit": limit},
        )

    @classmethod
    def for_cells(cls, left: int, right: int, limit: int) -> InputTooLargeError:
        return cls(
            f"Comparing {left} x {right} lines needs {left * right} cells; the limit is {limit}",
            {"left_lines": left, "right_lines": right, "cells": left * right, "limit": limit},
        )
