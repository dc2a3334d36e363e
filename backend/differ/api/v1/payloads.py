"""Example payload storage endpoint."""

from __future__ import annotations

import structlog
from fastapi import APIRouter

from differ.api.deps import Fixtures, Store
from differ.schemas.payload import StorePayloadRequest, StorePayloadResponse

_log = structlog.get_logger(__name__)
router = APIRouter(tags=["payloads"])


@router.post(
    "/payload",
    response_model=StorePayloadResponse,
    summary="Load an example payload into the temporary store",
)
async def store_payload(
    body: StorePayloadRequest,
    store: Store,
    fixtures: Fixtures,
) -> StorePayloadResponse:
    """
    Read ``<type>.json`` from the fixtures directory and keep it for later
    comparison via ``GET /compare``. Entries expire after the configured TTL.
    """
    payload = fixtures.load(body.type)
    store.put(body.type, payload)
    return StorePayloadResponse(ok=True, received=body.type)
