"""Shared fixtures: fixed clock, cycle config, and an in-memory stand-in for the DB session."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.db.session import get_db
from app.main import app
from app.schemas.analytics import CycleConfig, ExerciseSession, LoggedSet

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


class FakeResult:
    """Mimics the slice of sqlalchemy Result the endpoints use."""

    def __init__(self, items):
        self._items = list(items)

    def scalars(self):
        return self

    def all(self):
        return list(self._items)

    def scalar_one_or_none(self):
        return self._items[0] if self._items else None

    def scalar_one(self):
        return self._items[0]

    def first(self):
        return self._items[0] if self._items else None


class FakeSession:
    """Returns queued results in order, one per execute() call."""

    def __init__(self, results=()):
        self.results = [list(r) for r in results]
        self.statements = []

    async def execute(self, stmt):
        self.statements.append(stmt)
        return FakeResult(self.results.pop(0) if self.results else [])


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def cycle_config() -> CycleConfig:
    return CycleConfig(cycle_length_days=28, reference_start_date=date(2026, 1, 1), timezone="UTC")


@pytest.fixture
def make_session():
    """Build an ExerciseSession from (weight, reps, rir) tuples."""

    def _make(workout_id, occurred_at, sets, exercise_id="bench"):
        return ExerciseSession(
            workout_id=workout_id,
            exercise_id=exercise_id,
            occurred_at=occurred_at,
            sets=tuple(
                LoggedSet(set_number=i, weight=w, reps=r, rir=rir)
                for i, (w, r, rir) in enumerate(sets, start=1)
            ),
        )

    return _make


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def fake_db(client):
    """Install a FakeSession as the get_db dependency; tests queue results on it."""
    session = FakeSession()

    async def _override():
        yield session

    app.dependency_overrides[get_db] = _override
    return session
