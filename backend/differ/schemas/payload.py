"""Payload storage schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from differ.services.payload_store import PayloadSlot


class StorePayloadRequest(BaseModel):
    type: PayloadSlot = Field(..., description="payload1 | payload2")


class StorePayloadResponse(BaseModel):
    ok: bool = True
    received: PayloadSlot
