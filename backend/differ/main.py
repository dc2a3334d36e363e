"""
json-differ: FastAPI application factory.

Application lifecycle:
  startup  → configure logging
  shutdown → drop stored payloads
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from differ.api.v1.router import router as api_router
from differ.config.logging_config import configure_logging
from differ.config.settings import Settings, get_settings
from differ.core.errors import AppError
from differ.core.middleware import (
    CorrelationIDMiddleware,
    SecurityHeadersMiddleware,
    app_error_handler,
    unhandled_exception_handler,
    validation_error_handler,
)
from differ.services.diff.engine import DiffEngine
from differ.services.fixtures import FixtureLoader
from differ.services.payload_store import PayloadStore
from differ.services.serializer import JsonSerializer

_log = structlog.get_logger(__name__)


def _create_limiter(settings: Settings) -> Limiter:
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Application factory. Returns a configured FastAPI instance."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=(
            "Side-by-side JSON comparison: line-level alignment with "
            "word-level highlights for modified lines."
        ),
        docs_url="/docs" if settings.environment.value != "production" else None,
        redoc_url="/redoc" if settings.environment.value != "production" else None,
        openapi_url="/openapi.json" if settings.environment.value != "production" else None,
    )

    # ── Collaborators ─────────────────────────────────────────────────── #
    app.state.payload_store = PayloadStore(ttl_seconds=settings.payload_ttl_seconds)
    app.state.fixture_loader = FixtureLoader(settings.fixtures_dir)
    app.state.diff_engine = DiffEngine(
        JsonSerializer(indent=settings.json_indent, sort_keys=settings.sort_keys),
        max_lines=settings.max_lines,
        max_line_tokens=settings.max_line_tokens,
        max_cells=settings.max_cells,
    )

    # ── Startup / Shutdown ────────────────────────────────────────────── #
    @app.on_event("startup")
    async def on_startup() -> None:
        configure_logging(
            log_level=settings.log_level.value,
            json_logs=settings.log_json,
            log_file=settings.log_file,
        )
        _log.info(
            "differ_ready",
            version=settings.app_version,
            environment=settings.environment.value,
            host=settings.host,
            port=settings.port,
            fixtures_dir=str(settings.fixtures_dir),
        )

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        app.state.payload_store.clear()
        _log.info("differ_shutdown")

    # ── Rate Limiting ─────────────────────────────────────────────────── #
    limiter = _create_limiter(settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # ── CORS ──────────────────────────────────────────────────────────── #
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-ID"],
    )

    # ── Custom Middleware (applied in reverse order) ───────────────────── #
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    # ── Exception Handlers ────────────────────────────────────────────── #
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ── Routes ────────────────────────────────────────────────────────── #
    app.include_router(api_router)

    # ── Health ────────────────────────────────────────────────────────── #
    @app.get("/health", tags=["health"], summary="Health check")
    async def health() -> dict[str, Any]:
        """Returns service health and whether the example fixtures are present."""
        fixtures_ok = settings.fixtures_dir.is_dir()
        return {
            "status": "healthy" if fixtures_ok else "degraded",
            "fixtures": "ok" if fixtures_ok else "unavailable",
            "stored_payloads": len(app.state.payload_store),
            "version": settings.app_version,
        }

    # ── Metrics (Prometheus) ──────────────────────────────────────────── #
    @app.get("/metrics", tags=["observability"], summary="Prometheus metrics")
    async def metrics() -> Response:
        from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return app


# Entry point for uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run("differ.main:app", host=_settings.host, port=_settings.port)
