"""Cycle phase calculator: cycle day, phase bands and outlook for a date.

Phase bands scale the 28-day reference partition (menstrual 1-7, follicular 8-12,
ovulation 13-16, early luteal 17-20, late luteal 21-28) to the configured length.
Each boundary is floored; late luteal absorbs the remainder so the bands always
partition [1, cycle_length_days].
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.core.constants import (
    FERTILE_DAYS_BEFORE_OVULATION,
    MAX_CYCLE_LENGTH_DAYS,
    PHASE_RECOMMENDATIONS,
    REFERENCE_CYCLE_LENGTH,
    REFERENCE_PHASE_ENDS,
)
from app.core.enums import CyclePhase
from app.core.errors import InvalidConfigurationError
from app.schemas.analytics import CycleConfig, CycleDay, CycleInfo, PhaseBand


def validate_cycle_config(config: CycleConfig) -> ZoneInfo:
    """Reject configs the day math cannot handle. Returns the resolved timezone."""
    if config.cycle_length_days is None or config.cycle_length_days < 1:
        raise InvalidConfigurationError(
            f"cycle_length_days must be >= 1 (got {config.cycle_length_days})"
        )
    if config.cycle_length_days > MAX_CYCLE_LENGTH_DAYS:
        raise InvalidConfigurationError(
            f"cycle_length_days must be <= {MAX_CYCLE_LENGTH_DAYS} (got {config.cycle_length_days})"
        )
    if config.reference_start_date is None:
        raise InvalidConfigurationError("reference_start_date is required")
    try:
        return ZoneInfo(config.timezone or "UTC")
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidConfigurationError(f"Unknown timezone: {config.timezone!r}") from e


def to_local_date(value: date | datetime | str, tz: ZoneInfo) -> date:
    """
    Calendar date of `value` in `tz`.
    Aware datetimes are converted; naive ones are taken as already local.
    ISO strings (date-only, T or space separated, with or without offset) are
    parsed; anything unparseable is a caller error.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError as e:
            raise InvalidConfigurationError(f"Unparseable date: {value!r}") from e
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidConfigurationError(f"Unparseable date: {value!r}")


@lru_cache(maxsize=64)
def _band_ends(cycle_length_days: int) -> tuple[int, ...]:
    ends = [
        (ref_end * cycle_length_days) // REFERENCE_CYCLE_LENGTH
        for ref_end in REFERENCE_PHASE_ENDS.values()
    ]
    ends[-1] = cycle_length_days
    return tuple(ends)


def phase_bands(cycle_length_days: int) -> list[PhaseBand]:
    """Day range of each phase, in phase order. Very short cycles can leave early bands empty."""
    if cycle_length_days < 1:
        raise InvalidConfigurationError(
            f"cycle_length_days must be >= 1 (got {cycle_length_days})"
        )
    bands = []
    start = 1
    for phase, end in zip(CyclePhase, _band_ends(cycle_length_days)):
        bands.append(PhaseBand(phase=phase, start_day=start, end_day=end))
        start = max(start, end + 1)
    return bands


def phase_for_day(cycle_day: int, cycle_length_days: int) -> CyclePhase:
    """Phase containing a 1-indexed cycle day."""
    for phase, end in zip(CyclePhase, _band_ends(cycle_length_days)):
        if cycle_day <= end:
            return phase
    return CyclePhase.LATE_LUTEAL


def calculate_cycle_day(config: CycleConfig, target_date: date | datetime | str) -> CycleDay:
    """Cycle day (1-indexed) and phase for target_date. Dates before the reference are forecasts."""
    tz = validate_cycle_config(config)
    target = to_local_date(target_date, tz)
    reference = to_local_date(config.reference_start_date, tz)
    length = config.cycle_length_days

    days_since = (target - reference).days
    # Python's % is already non-negative for a positive modulus
    cycle_day = days_since % length + 1
    return CycleDay(
        cycle_day=cycle_day,
        phase=phase_for_day(cycle_day, length),
        is_forecast=target < reference,
    )


def describe_cycle_day(
    config: CycleConfig,
    target_date: date | datetime | str | None = None,
) -> CycleInfo:
    """
    Cycle day plus outlook for target_date (today in the config timezone by default):
    next period start, next ovulation start, fertile window and training recommendations.
    """
    tz = validate_cycle_config(config)
    if target_date is None:
        target = datetime.now(timezone.utc).astimezone(tz).date()
    else:
        target = to_local_date(target_date, tz)
    day = calculate_cycle_day(config, target)
    length = config.cycle_length_days

    cycle_start = target - timedelta(days=day.cycle_day - 1)
    ovulation = next(b for b in phase_bands(length) if b.phase == CyclePhase.OVULATION)
    if ovulation.end_day < ovulation.start_day:
        # Cycle too short for an ovulation band: fall back to the cycle start
        ovulation_offset = 0
    else:
        ovulation_offset = ovulation.start_day - 1
    next_ovulation = cycle_start + timedelta(days=ovulation_offset)
    if next_ovulation < target:
        next_ovulation += timedelta(days=length)

    fertile_start = max(1, ovulation.start_day - FERTILE_DAYS_BEFORE_OVULATION)
    return CycleInfo(
        cycle_day=day.cycle_day,
        phase=day.phase,
        is_forecast=day.is_forecast,
        date=target,
        cycle_length_days=length,
        next_period_date=cycle_start + timedelta(days=length),
        next_ovulation_date=next_ovulation,
        is_in_fertile_window=fertile_start <= day.cycle_day <= ovulation.end_day,
        training_recommendations=list(PHASE_RECOMMENDATIONS[day.phase]),
    )
