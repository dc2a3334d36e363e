"""Comparison endpoints."""

from __future__ import annotations

import time
from typing import Any

import structlog
from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool

from differ.api.deps import Engine, Store
from differ.core.errors import AppError, MissingInputError
from differ.core.metrics import COMPARISON_SECONDS, COMPARISONS, DIFF_LINES
from differ.schemas.diff import CompareCustomRequest, CompareResponse, DiffLineOut
from differ.services.diff.engine import DiffEngine
from differ.services.payload_store import PayloadSlot

_log = structlog.get_logger(__name__)
router = APIRouter(tags=["compare"])


async def _run_comparison(
    engine: DiffEngine, route: str, payload1: Any, payload2: Any
) -> CompareResponse:
    start = time.perf_counter()
    try:
        lines = await run_in_threadpool(engine.compare, payload1, payload2)
    except AppError:
        COMPARISONS.labels(route=route, outcome="rejected").inc()
        raise
    elapsed = time.perf_counter() - start

    COMPARISONS.labels(route=route, outcome="ok").inc()
    COMPARISON_SECONDS.labels(route=route).observe(elapsed)
    DIFF_LINES.observe(len(lines))
    _log.info(
        "comparison_completed",
        route=route,
        rows=len(lines),
        duration_ms=int(elapsed * 1000),
    )
    return CompareResponse(diffs=[DiffLineOut.from_line(line) for line in lines])


@router.get(
    "/compare",
    response_model=CompareResponse,
    summary="Compare the two stored payloads",
)
async def compare_stored(store: Store, engine: Engine) -> CompareResponse:
    """
    Diff ``payload1`` against ``payload2`` as previously stored via
    ``POST /payload``. Fails with 400 if either is missing or expired.
    """
    payload1 = store.get(PayloadSlot.PAYLOAD1)
    payload2 = store.get(PayloadSlot.PAYLOAD2)
    if payload1 is None or payload2 is None:
        missing = [
            slot.value
            for slot, value in ((PayloadSlot.PAYLOAD1, payload1), (PayloadSlot.PAYLOAD2, payload2))
            if value is None
        ]
        COMPARISONS.labels(route="compare", outcome="rejected").inc()
        raise MissingInputError(missing=missing)

    return await _run_comparison(engine, "compare", payload1, payload2)


@router.post(
    "/compare-custom",
    response_model=CompareResponse,
    summary="Compare two payloads sent in the request body",
)
async def compare_custom(body: CompareCustomRequest, engine: Engine) -> CompareResponse:
    return await _run_comparison(engine, "compare_custom", body.payload1, body.payload2)
