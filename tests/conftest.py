"""Pytest configuration for shared coaching fixtures."""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable, Optional

import pytest

from micoach_mcp_server.models import Assessment, AssessmentPreferences
from micoach_mcp_server.services.coaching import CoachingService
from micoach_mcp_server.storage.base import KeyValueStorage
from micoach_mcp_server.storage.coaching import CoachingStorage

START = datetime(2026, 3, 2, 9, 30)  # A Monday


class FixedClock:
    """Clock returning a controllable time."""

    def __init__(self, now: datetime = START):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, days: int = 0, hours: int = 0) -> None:
        self.now = self.now + timedelta(days=days, hours=hours)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def store(tmp_path) -> KeyValueStorage:
    return KeyValueStorage(data_dir=tmp_path)


@pytest.fixture
def storage(store) -> CoachingStorage:
    return CoachingStorage(store)


@pytest.fixture
def service(storage, clock) -> CoachingService:
    return CoachingService(storage, clock=clock)


@pytest.fixture
def make_assessment() -> Callable[..., Assessment]:
    """Build assessments with sensible defaults."""

    def _make(
        main_objective: str = "Salud",
        pace: str = "moderado",
        metadata: Optional[dict[str, str]] = None,
    ) -> Assessment:
        return Assessment(
            id="assessment-1",
            user_id="user-1",
            main_objective=main_objective,
            time_commitment="30 minutos",
            preferences=AssessmentPreferences(pace=pace),
            metadata=metadata or {},
            created_at=START,
        )

    return _make
