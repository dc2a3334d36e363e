"""API router aggregator."""

from fastapi import APIRouter

from differ.api.v1 import compare, payloads, validate

router = APIRouter(prefix="/api")
router.include_router(payloads.router)
router.include_router(compare.router)
router.include_router(validate.router)
