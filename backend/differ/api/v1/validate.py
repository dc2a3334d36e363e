"""JSON validation endpoint for editor input."""

from __future__ import annotations

from fastapi import APIRouter

from differ.schemas.diff import ValidateRequest, ValidateResponse
from differ.services.validation import validate_json

router = APIRouter(tags=["validate"])


@router.post("/validate", response_model=ValidateResponse, summary="Check that text is valid JSON")
async def validate(body: ValidateRequest) -> ValidateResponse:
    result = validate_json(body.input)
    return ValidateResponse(valid=result.valid, error=result.error, data=result.data)
