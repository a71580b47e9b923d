"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.cycle_settings import CycleSettings
from app.models.event import Event
from app.models.exercise import Exercise
from app.models.workout import Workout, WorkoutSet

__all__ = [
    "CycleSettings",
    "Event",
    "Exercise",
    "Workout",
    "WorkoutSet",
]
