"""
Shared pytest fixtures for json-differ backend tests.

Provides:
  - test Settings pointing at a temporary fixtures directory
  - FastAPI app built from those settings
  - async HTTP client over ASGITransport
"""
from __future__ import annotations

import json
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from differ.config.settings import Environment, Settings
from differ.main import create_app
from differ.services.diff.engine import DiffEngine
from differ.services.serializer import JsonSerializer


PAYLOAD1 = {"id": 1, "name": "Product A", "metadata": {"color": "red", "size": "M"}}
PAYLOAD2 = {"id": 1, "name": "Product B", "metadata": {"color": "blue", "size": "M"}, "stock": 4}


# ─── Settings ─────────────────────────────────────────────────────────────────

@pytest.fixture
def fixtures_dir(tmp_path: Path) -> Path:
    """Temporary directory seeded with payload1.json and payload2.json."""
    directory = tmp_path / "storage"
    directory.mkdir()
    (directory / "payload1.json").write_text(json.dumps(PAYLOAD1), encoding="utf-8")
    (directory / "payload2.json").write_text(json.dumps(PAYLOAD2), encoding="utf-8")
    return directory


@pytest.fixture
def test_settings(fixtures_dir: Path) -> Settings:
    return Settings(
        environment=Environment.TESTING,
        debug=True,
        fixtures_dir=fixtures_dir,
        cors_origins=["http://localhost:5173"],
        log_json=False,
        rate_limit_default="1000/minute",
    )


# ─── Clock ───────────────────────────────────────────────────────────────────

class FakeClock:
    """Monotonic clock stand-in that only moves when a test advances it."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# ─── Engine ───────────────────────────────────────────────────────────────────

@pytest.fixture
def engine() -> DiffEngine:
    return DiffEngine(JsonSerializer())


# ─── App & HTTP client ────────────────────────────────────────────────────────

@pytest.fixture
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest_asyncio.fixture(scope="function")
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
