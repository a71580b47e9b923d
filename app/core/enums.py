"""Shared enums for models, analytics and API."""

from enum import Enum


class EventType(str, Enum):
    """Kind of dated health/biological event."""

    INJURY = "injury"
    ILLNESS = "illness"
    NOTE = "note"


class TimeFrame(str, Enum):
    """Symbolic progression window."""

    ONE_WEEK = "1week"
    ONE_MONTH = "1month"
    THREE_MONTHS = "3months"
    SIX_MONTHS = "6months"
    ONE_YEAR = "1year"
    ALL = "all"


class CyclePhase(str, Enum):
    """Cycle phase, declared in cycle-day order (iteration order is significant)."""

    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATION = "ovulation"
    EARLY_LUTEAL = "earlyLuteal"
    LATE_LUTEAL = "lateLuteal"


class PRType(str, Enum):
    """Type of personal record."""

    WEIGHT = "max_weight"  # Heaviest working weight in a session
    VOLUME = "max_volume"  # Highest session volume (sum of weight × reps)
    ONE_RM = "max_1rm"  # Best estimated 1RM
    REPS = "max_reps"  # Most reps in a session's best set
