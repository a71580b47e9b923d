"""Phase-correlation statistics: bucket dated events (e.g. injuries) by cycle phase."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from datetime import date, datetime, timezone

from app.core.enums import CyclePhase
from app.schemas.analytics import CycleConfig, CycleDayCount, DatedEvent, PhaseStatistics
from app.services.cycle import (
    calculate_cycle_day,
    phase_for_day,
    to_local_date,
    validate_cycle_config,
)


def dominant_phase(counts: dict[CyclePhase, int]) -> CyclePhase | None:
    """Phase with the strictly highest count; ties go to the earlier phase. None if all zero."""
    best: CyclePhase | None = None
    for phase in CyclePhase:
        count = counts.get(phase, 0)
        if count > 0 and (best is None or count > counts[best]):
            best = phase
    return best


def calculate_phase_statistics(
    events: Sequence[DatedEvent],
    config: CycleConfig,
    now: datetime | None = None,
) -> PhaseStatistics:
    """
    Per-phase event counts (all five phases, cycle order), dominant phase and
    whole days since the most recent event. Events are not filtered here:
    callers pass only the category they want correlated.
    """
    tz = validate_cycle_config(config)
    if now is None:
        now = datetime.now(timezone.utc)
    today = to_local_date(now, tz)

    by_phase: dict[CyclePhase, int] = {phase: 0 for phase in CyclePhase}
    by_day: Counter[int] = Counter()
    last_event: date | None = None

    for event in events:
        event_date = to_local_date(event.date, tz)
        day = calculate_cycle_day(config, event_date)
        by_phase[day.phase] += 1
        by_day[day.cycle_day] += 1
        if last_event is None or event_date > last_event:
            last_event = event_date

    length = config.cycle_length_days
    return PhaseStatistics(
        events_by_phase=by_phase,
        total_events=len(events),
        dominant_phase=dominant_phase(by_phase),
        days_since_last_event=(today - last_event).days if last_event is not None else None,
        last_event_date=last_event,
        events_by_cycle_day=[
            CycleDayCount(cycle_day=d, count=by_day.get(d, 0), phase=phase_for_day(d, length))
            for d in range(1, length + 1)
        ],
    )
