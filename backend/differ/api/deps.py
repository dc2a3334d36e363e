"""
FastAPI dependency providers.

Shared collaborators live on ``app.state`` and are created once per
application in ``create_app``; routes only ever receive them through here.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from differ.services.diff.engine import DiffEngine
from differ.services.fixtures import FixtureLoader
from differ.services.payload_store import PayloadStore


def get_payload_store(request: Request) -> PayloadStore:
    return request.app.state.payload_store


def get_fixture_loader(request: Request) -> FixtureLoader:
    return request.app.state.fixture_loader


def get_diff_engine(request: Request) -> DiffEngine:
    return request.app.state.diff_engine


Store = Annotated[PayloadStore, Depends(get_payload_store)]
Fixtures = Annotated[FixtureLoader, Depends(get_fixture_loader)]
Engine = Annotated[DiffEngine, Depends(get_diff_engine)]
