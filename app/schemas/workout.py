"""Workout and WorkoutSet schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class WorkoutSetBase(BaseModel):
    exercise_id: UUID
    set_number: int = Field(1, ge=1)
    weight: float | None = Field(None, ge=0)
    reps: int | None = Field(None, ge=0)
    rir: int | None = Field(None, ge=0, le=10, description="Reps in reserve")
    notes: str | None = Field(None, max_length=500)


class WorkoutSetCreate(WorkoutSetBase):
    pass


class WorkoutSetRead(WorkoutSetBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    workout_id: UUID


class WorkoutCreate(BaseModel):
    started_at: datetime | None = None
    ended_at: datetime | None = None
    notes: str | None = None


class WorkoutRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    started_at: datetime
    ended_at: datetime | None = None
    notes: str | None = None


class WorkoutReadWithSets(WorkoutRead):
    """Workout with nested sets (for detail view)."""

    sets: list[WorkoutSetRead] = []
