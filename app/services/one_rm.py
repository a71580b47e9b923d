"""Estimated 1RM: average of Epley, Brzycki, Lombardi and O'Conner on RIR-adjusted reps."""

from __future__ import annotations

import math
from collections.abc import Iterable

from app.core.constants import ONE_RM_MAX_REPS, ONE_RM_MIN_REPS


def round_half_up(value: float, ndigits: int = 1) -> float:
    """Round halves towards +infinity (so 2.25 -> 2.3 and -2.25 -> -2.2)."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def _epley(weight: float, reps: int) -> float:
    return weight * (1 + reps / 30)


def _brzycki(weight: float, reps: int) -> float:
    return weight * (36 / (37 - reps))


def _lombardi(weight: float, reps: int) -> float:
    return weight * reps ** 0.10


def _oconner(weight: float, reps: int) -> float:
    return weight * (1 + reps / 40)


def estimate_one_rm(weight: float, reps: int, rir: int | None = None) -> float:
    """
    Estimated one-rep max for a set.
    Reps in reserve are added to reps, then clamped to 1-30 (the formulas are
    unreliable beyond that). Out-of-range input saturates, it is never rejected.
    """
    effective_reps = reps + (rir or 0)
    capped = min(max(effective_reps, ONE_RM_MIN_REPS), ONE_RM_MAX_REPS)
    estimates = (
        _epley(weight, capped),
        _brzycki(weight, capped),
        _lombardi(weight, capped),
        _oconner(weight, capped),
    )
    return round_half_up(sum(estimates) / len(estimates), 1)


def set_volume(weight: float, reps: int) -> float:
    """Volume of one set (weight × reps)."""
    return weight * reps


def total_volume(sets: Iterable[tuple[float | None, int | None]]) -> float:
    """Sum of weight × reps, skipping sets missing either value."""
    return sum(set_volume(w, r) for w, r in sets if w and r)
