"""Comparison request / response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from differ.services.diff.lines import DiffLine, LineStatus
from differ.services.diff.tokens import PartKind


class SpanOut(BaseModel):
    """A run of text inside a modified line, with how it changed."""

    text: str
    kind: PartKind


class DiffLineOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    left_number: int | None = Field(alias="leftNumber")
    right_number: int | None = Field(alias="rightNumber")
    left: str
    right: str
    status: LineStatus
    spans: list[SpanOut] | None = Field(
        default=None,
        description="Word-level highlights; only present on modified lines",
    )

    @classmethod
    def from_line(cls, line: DiffLine) -> DiffLineOut:
        return cls(
            left_number=line.left_number,
            right_number=line.right_number,
            left=line.left,
            right=line.right,
            status=line.status,
            spans=(
                [SpanOut(text=part.text, kind=part.kind) for part in line.spans]
                if line.spans is not None
                else None
            ),
        )


class CompareResponse(BaseModel):
    diffs: list[DiffLineOut]


class CompareCustomRequest(BaseModel):
    payload1: Any = Field(..., description="Left-hand JSON value")
    payload2: Any = Field(..., description="Right-hand JSON value")

    @field_validator("payload1", "payload2")
    @classmethod
    def must_not_be_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("payload must not be null")
        return v


class ValidateRequest(BaseModel):
    input: str = Field(..., max_length=5_000_000)


class ValidateResponse(BaseModel):
    valid: bool
    error: str | None = None
    data: Any = None
