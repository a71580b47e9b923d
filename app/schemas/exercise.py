"""Exercise schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    category: str | None = Field(None, max_length=100)
    unit: str = Field(default="kg", max_length=20)


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID


class ExerciseQuickStats(BaseModel):
    """Last logged set for an exercise and how many workouts included it."""

    last_used: datetime | None = None
    last_weight: float | None = None
    last_reps: int | None = None
    times_used: int = 0
