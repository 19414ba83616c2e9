"""Pytest configuration and fixtures for the PetStay reservation site tests.

This module provides reusable fixtures for testing:
- A frozen clock so lead-time rules are deterministic
- A temporary static root and reservation log per test
- An application and TestClient wired to both
- Sample reservation payloads
"""

import datetime as dt
import json
from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from petstay.api.main import create_app
from petstay.config import Settings
from petstay.services.reservation_log import ReservationLog
from petstay.services.submission import ReservationSubmissionService

# === Clock ===

TODAY = dt.date(2026, 7, 1)
NOW = dt.datetime(2026, 7, 1, 9, 30, tzinfo=dt.UTC)

INDEX_HTML = "<!DOCTYPE html><html><body><h1>PetStay</h1></body></html>"


class FixedClock:
    """Clock that always reports the same day and time."""

    def __init__(self, today: dt.date = TODAY, now: dt.datetime = NOW):
        self._today = today
        self._now = now

    def today(self) -> dt.date:
        return self._today

    def now(self) -> dt.datetime:
        return self._now


def days_from_today(days: int) -> str:
    """YYYY-MM-DD string ``days`` after the frozen today."""
    return (TODAY + dt.timedelta(days=days)).isoformat()


def read_log_lines(path: Path) -> list[dict[str, Any]]:
    """Parse every line of an NDJSON reservation log."""
    if not path.exists():
        return []
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


# === Filesystem Fixtures ===


@pytest.fixture
def static_root(tmp_path: Path) -> Path:
    """Create a small website under a temporary directory."""
    root = tmp_path / "site"
    root.mkdir()
    (root / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (root / "styles.css").write_text("body { margin: 0; }", encoding="utf-8")
    (root / "app.js").write_text("console.log('hi');", encoding="utf-8")
    (root / "logo.PNG").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "notes.unknownext").write_bytes(b"\x00\x01\x02")
    (root / "images").mkdir()
    (root / "images" / "hamster.svg").write_text("<svg></svg>", encoding="utf-8")
    return root


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "reservations.ndjson"


# === Application Fixtures ===


@pytest.fixture
def settings(static_root: Path, log_path: Path) -> Settings:
    return Settings(static_root=static_root, reservation_log=log_path)


@pytest.fixture
def app(settings: Settings, clock: FixedClock) -> FastAPI:
    return create_app(settings, clock)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client for the site."""
    return TestClient(app)


@pytest.fixture
def submission_service(log_path: Path, clock: FixedClock) -> ReservationSubmissionService:
    return ReservationSubmissionService(log=ReservationLog(log_path), clock=clock)


# === Sample Data ===


@pytest.fixture
def valid_payload() -> dict[str, str]:
    """A reservation request that passes every rule against the frozen clock."""
    return {
        "owner-name": "Ada Lovelace",
        "email": "ada@example.com",
        "hamster-name": "Fluffy",
        "check-in": days_from_today(3),
        "check-out": days_from_today(5),
    }
