"""Analytics engine schemas: inputs (sets, sessions, events, cycle config) and derived outputs.

Inputs are frozen so the engine never mutates a caller's snapshot.
"""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import CyclePhase, TimeFrame


# ── Inputs ───────────────────────────────────────────────────────────────

class LoggedSet(BaseModel):
    """One logged set. Valid for analytics only when weight and reps are both > 0."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    set_number: int = Field(1, ge=1)
    weight: float | None = Field(None, ge=0)
    reps: int | None = Field(None, ge=0)
    rir: int | None = Field(None, ge=0, le=10, description="Reps in reserve")

    @property
    def is_valid(self) -> bool:
        return (
            self.weight is not None
            and self.reps is not None
            and self.weight > 0
            and self.reps > 0
        )


class ExerciseSession(BaseModel):
    """All sets of one exercise within one workout."""

    model_config = ConfigDict(frozen=True)

    workout_id: Any
    exercise_id: Any
    occurred_at: dt.datetime
    sets: tuple[LoggedSet, ...] = ()


class CycleConfig(BaseModel):
    """Cycle length and the most recent confirmed period start."""

    model_config = ConfigDict(frozen=True)

    cycle_length_days: int = 28
    reference_start_date: dt.date
    timezone: str = "UTC"


class DatedEvent(BaseModel):
    """A dated event (e.g. an injury). Only ``date`` is used by the engine."""

    model_config = ConfigDict(frozen=True)

    date: dt.datetime | dt.date | str
    category: str | None = None


# ── Progression outputs ──────────────────────────────────────────────────

class BestSet(BaseModel):
    weight: float
    reps: int
    rir: int | None = None


class ProgressionPoint(BaseModel):
    """Derived metrics for one exercise session."""

    date: dt.datetime
    session_id: Any
    set_count: int
    max_weight: float
    avg_weight: float
    total_volume: float
    best_set: BestSet
    estimated_1rm: float
    avg_reps: float
    avg_rir: float | None = None


class PersonalRecord(BaseModel):
    value: float = 0
    date: dt.datetime | None = None
    session_id: Any = None


class PersonalRecords(BaseModel):
    max_weight: PersonalRecord
    max_volume: PersonalRecord
    max_1rm: PersonalRecord
    max_reps: PersonalRecord


class Improvement(BaseModel):
    weight: float = 0.0  # % change, first half vs second half
    volume: float = 0.0
    period: TimeFrame


class ProgressionSummary(BaseModel):
    total_workouts: int = 0
    total_sets: int = 0
    peak_weight: float = 0.0
    peak_volume: float = 0.0
    peak_1rm: float = 0.0
    average_weight: float = 0.0
    average_volume: float = 0.0
    improvement: Improvement


class TimeWindow(BaseModel):
    start: dt.datetime
    end: dt.datetime


class ExerciseProgression(BaseModel):
    exercise_id: Any
    timeframe: TimeWindow
    data_points: list[ProgressionPoint]
    summary: ProgressionSummary
    personal_records: PersonalRecords


# ── Cycle outputs ────────────────────────────────────────────────────────

class PhaseBand(BaseModel):
    phase: CyclePhase
    start_day: int
    end_day: int


class CycleDay(BaseModel):
    cycle_day: int
    phase: CyclePhase
    is_forecast: bool


class CycleInfo(CycleDay):
    """Cycle day plus outlook: next period/ovulation, fertile window and training advice."""

    date: dt.date
    cycle_length_days: int
    next_period_date: dt.date
    next_ovulation_date: dt.date
    is_in_fertile_window: bool
    training_recommendations: list[str] = []


class CycleDayCount(BaseModel):
    cycle_day: int
    count: int
    phase: CyclePhase


class PhaseStatistics(BaseModel):
    events_by_phase: dict[CyclePhase, int]
    total_events: int = 0
    dominant_phase: CyclePhase | None = None
    days_since_last_event: int | None = None
    last_event_date: dt.date | None = None
    events_by_cycle_day: list[CycleDayCount] = []
