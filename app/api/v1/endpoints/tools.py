"""Calculators over caller-supplied data (pure logic, no DB): 1RM, progression, cycle day, phase stats."""

from datetime import date
from typing import Any

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from app.core.config import get_settings
from app.core.enums import TimeFrame
from app.schemas.analytics import (
    CycleConfig,
    CycleInfo,
    DatedEvent,
    ExerciseProgression,
    ExerciseSession,
    PhaseStatistics,
)
from app.services.cycle import describe_cycle_day
from app.services.one_rm import estimate_one_rm
from app.services.phase_statistics import calculate_phase_statistics
from app.services.progression import build_exercise_progression

router = APIRouter()


# ---- 1RM calculator ----


class OneRmResponse(BaseModel):
    weight: float
    reps: int
    rir: int | None = None
    estimated_1rm: float


@router.get("/one-rm", response_model=OneRmResponse)
async def one_rm_calculator(
    weight: float = Query(..., gt=0),
    reps: int = Query(..., ge=1),
    rir: int | None = Query(None, ge=0, le=10),
):
    """Estimated 1RM (average of Epley, Brzycki, Lombardi, O'Conner). Reps + RIR are capped at 30."""
    return OneRmResponse(
        weight=weight,
        reps=reps,
        rir=rir,
        estimated_1rm=estimate_one_rm(weight, reps, rir),
    )


# ---- Progression from posted sessions ----


class ProgressionRequest(BaseModel):
    exercise_id: Any = Field(..., description="Sessions logged against other exercises are ignored")
    timeframe: TimeFrame = TimeFrame.ONE_MONTH
    sessions: list[ExerciseSession] = []


@router.post("/progression", response_model=ExerciseProgression)
async def progression_calculator(payload: ProgressionRequest):
    """Progression points, summary and personal records for the posted sessions."""
    return build_exercise_progression(payload.exercise_id, payload.sessions, payload.timeframe)


# ---- Cycle day ----


@router.get("/cycle-day", response_model=CycleInfo)
async def cycle_day_calculator(
    reference_start_date: date,
    target_date: date | None = None,
    cycle_length_days: int | None = None,
    timezone: str | None = None,
):
    """Cycle day, phase and outlook for target_date (default today). Invalid length/timezone -> 422."""
    settings = get_settings()
    config = CycleConfig(
        cycle_length_days=(
            settings.default_cycle_length_days if cycle_length_days is None else cycle_length_days
        ),
        reference_start_date=reference_start_date,
        timezone=timezone or settings.default_cycle_timezone,
    )
    return describe_cycle_day(config, target_date)


# ---- Phase statistics from posted events ----


class PhaseStatisticsRequest(BaseModel):
    config: CycleConfig
    events: list[DatedEvent] = []


@router.post("/phase-statistics", response_model=PhaseStatistics)
async def phase_statistics_calculator(payload: PhaseStatisticsRequest):
    """Posted events bucketed by cycle phase. Filter by category before posting."""
    return calculate_phase_statistics(payload.events, payload.config)
