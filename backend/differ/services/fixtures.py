"""Loads the bundled example payloads (``payload1.json`` / ``payload2.json``)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

from differ.core.errors import ErrorCode, FixtureError, NotFoundError
from differ.services.payload_store import PayloadSlot

_log = structlog.get_logger(__name__)


class FixtureLoader:
    def __init__(self, fixtures_dir: Path) -> None:
        self._dir = fixtures_dir

    def path_for(self, slot: PayloadSlot) -> Path:
        return self._dir / f"{slot.value}.json"

    def load(self, slot: PayloadSlot) -> Any:
        """
        Read and parse the example payload for ``slot``.

        Raises:
            NotFoundError: if the fixture file does not exist.
            FixtureError: if the file is not valid JSON.
        """
        path = self.path_for(slot)
        if not path.is_file():
            raise NotFoundError(
                "PayloadFixture",
                path.name,
                code=ErrorCode.PAYLOAD_FIXTURE_NOT_FOUND,
                message=f"Example payload file not found: {path.name}",
            )

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            _log.error("fixture_invalid_json", filename=path.name, error=str(exc))
            raise FixtureError("Invalid JSON in payload file", path.name) from exc

        _log.debug("fixture_loaded", filename=path.name)
        return payload
