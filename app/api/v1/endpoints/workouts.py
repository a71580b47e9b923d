"""Workout CRUD endpoints."""

from __future__ import annotations

import uuid
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.session import get_db
from app.models.exercise import Exercise
from app.models.workout import Workout, WorkoutSet
from app.schemas.workout import (
    WorkoutCreate,
    WorkoutRead,
    WorkoutReadWithSets,
    WorkoutSetCreate,
    WorkoutSetRead,
)

router = APIRouter()


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    db: AsyncSession = Depends(get_db),
    skip: int = 0,
    limit: int = 50,
    from_date: datetime | None = None,
    to_date: datetime | None = None,
):
    """List workouts (without sets), newest first, optionally filtered by date range."""
    stmt = select(Workout)
    if from_date:
        stmt = stmt.where(Workout.started_at >= from_date)
    if to_date:
        stmt = stmt.where(Workout.started_at <= to_date)
    stmt = stmt.order_by(Workout.started_at.desc()).offset(skip).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())


@router.post("", response_model=WorkoutRead, status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    db: AsyncSession = Depends(get_db),
):
    """Start a new workout (started_at defaults to now)."""
    workout = Workout(**payload.model_dump(exclude_none=True))
    db.add(workout)
    await db.flush()
    await db.refresh(workout)
    return WorkoutRead.model_validate(workout)


@router.get("/{workout_id}", response_model=WorkoutReadWithSets)
async def get_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a workout with all sets."""
    result = await db.execute(
        select(Workout)
        .where(Workout.id == workout_id)
        .options(selectinload(Workout.sets))
    )
    workout = result.scalar_one_or_none()
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")

    # Stable order per exercise: set_number then id
    sorted_sets = sorted(workout.sets, key=lambda s: (s.set_number, str(s.id)))
    return WorkoutReadWithSets(
        id=workout.id,
        started_at=workout.started_at,
        ended_at=workout.ended_at,
        notes=workout.notes,
        sets=[WorkoutSetRead.model_validate(s) for s in sorted_sets],
    )


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a workout and its sets."""
    result = await db.execute(select(Workout).where(Workout.id == workout_id))
    workout = result.scalar_one_or_none()
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    await db.delete(workout)
    return None


@router.post("/{workout_id}/sets", response_model=WorkoutSetRead, status_code=201)
async def add_set_to_workout(
    workout_id: uuid.UUID,
    payload: WorkoutSetCreate,
    db: AsyncSession = Depends(get_db),
):
    """Log a set. Weight and reps are optional; incomplete sets are ignored by analytics."""
    result = await db.execute(select(Workout).where(Workout.id == workout_id))
    if result.scalar_one_or_none() is None:
        raise HTTPException(status_code=404, detail="Workout not found")
    ex_result = await db.execute(select(Exercise.id).where(Exercise.id == payload.exercise_id))
    if ex_result.scalar_one_or_none() is None:
        raise HTTPException(status_code=404, detail="Exercise not found")

    set_ = WorkoutSet(workout_id=workout_id, **payload.model_dump())
    db.add(set_)
    await db.flush()
    await db.refresh(set_)
    return set_
