"""Exercise progression endpoints: progression over a timeframe, and quick stats from the last logged set."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.config import get_settings
from app.core.enums import TimeFrame
from app.core.errors import InvalidConfigurationError
from app.db.session import get_db
from app.models.exercise import Exercise
from app.models.workout import Workout, WorkoutSet
from app.schemas.analytics import ExerciseProgression
from app.schemas.exercise import ExerciseQuickStats
from app.services.progression import build_exercise_progression, group_sets_into_sessions
from app.services.time_window import parse_timeframe, resolve_time_window

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/{exercise_id}/progression", response_model=ExerciseProgression)
async def exercise_progression(
    exercise_id: uuid.UUID,
    timeframe: TimeFrame | None = None,
    db: AsyncSession = Depends(get_db),
):
    """
    Progression for one exercise within a timeframe (1week, 1month, 3months, 6months, 1year, all):
    - one data point per workout (max/avg weight, volume, best set, estimated 1RM, avg reps/RIR)
    - summary (totals, peaks, averages, first-half vs second-half improvement)
    - personal records (max weight, volume, 1RM, reps)
    """
    if timeframe is None:
        timeframe = parse_timeframe(get_settings().default_timeframe)
    try:
        ex_result = await db.execute(select(Exercise).where(Exercise.id == exercise_id))
        if ex_result.scalar_one_or_none() is None:
            raise HTTPException(status_code=404, detail="Exercise not found")

        now = datetime.now(timezone.utc)
        start, end = resolve_time_window(timeframe, now)
        result = await db.execute(
            select(WorkoutSet)
            .join(Workout, Workout.id == WorkoutSet.workout_id)
            .where(
                WorkoutSet.exercise_id == exercise_id,
                Workout.started_at >= start,
                Workout.started_at <= end,
            )
            .options(selectinload(WorkoutSet.workout))
            .order_by(Workout.started_at, WorkoutSet.set_number)
        )
        sessions = group_sets_into_sessions(result.scalars().all())
        return build_exercise_progression(exercise_id, sessions, timeframe, now)
    except (HTTPException, InvalidConfigurationError):
        raise
    except Exception as e:
        logger.exception("GET /exercises/%s/progression failed: %s", exercise_id, e)
        raise HTTPException(status_code=500, detail=f"Failed to calculate progression: {e}")


@router.get("/{exercise_id}/quick-stats", response_model=ExerciseQuickStats)
async def exercise_quick_stats(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Last set logged for this exercise (weight, reps, workout start) and the number of workouts using it."""
    ex_result = await db.execute(select(Exercise).where(Exercise.id == exercise_id))
    if ex_result.scalar_one_or_none() is None:
        raise HTTPException(status_code=404, detail="Exercise not found")

    # Most recent workout first, then the highest set number within it
    last_result = await db.execute(
        select(WorkoutSet, Workout.started_at)
        .join(Workout, Workout.id == WorkoutSet.workout_id)
        .where(WorkoutSet.exercise_id == exercise_id)
        .order_by(Workout.started_at.desc(), WorkoutSet.set_number.desc())
        .limit(1)
    )
    last = last_result.first()
    if last is None:
        return ExerciseQuickStats()

    last_set, started_at = last
    count_result = await db.execute(
        select(func.count(func.distinct(WorkoutSet.workout_id))).where(
            WorkoutSet.exercise_id == exercise_id
        )
    )
    return ExerciseQuickStats(
        last_used=started_at,
        last_weight=float(last_set.weight) if last_set.weight is not None else None,
        last_reps=last_set.reps,
        times_used=count_result.scalar_one(),
    )
