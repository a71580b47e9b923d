"""Statistics endpoints: injury correlation by cycle phase."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.endpoints.cycle import get_cycle_config
from app.core.config import get_settings
from app.core.enums import EventType, TimeFrame
from app.db.session import get_db
from app.models.event import Event
from app.schemas.analytics import DatedEvent, PhaseStatistics
from app.services.phase_statistics import calculate_phase_statistics
from app.services.time_window import parse_timeframe, resolve_time_window

router = APIRouter()


@router.get("/injury-cycle", response_model=PhaseStatistics)
async def injury_cycle_statistics(
    event_type: EventType = EventType.INJURY,
    timeframe: TimeFrame | None = None,
    db: AsyncSession = Depends(get_db),
):
    """
    Events of one type (injuries by default) within the timeframe, bucketed by cycle phase:
    per-phase counts, dominant phase, per-cycle-day histogram and days since the last event.
    """
    if timeframe is None:
        timeframe = parse_timeframe(get_settings().default_timeframe)
    config = await get_cycle_config(db)
    if config is None:
        raise HTTPException(status_code=404, detail="Cycle settings not configured")

    start, end = resolve_time_window(timeframe)
    result = await db.execute(
        select(Event.occurred_on, Event.event_type)
        .where(
            Event.event_type == event_type,
            Event.occurred_on >= start.date(),
            Event.occurred_on <= end.date(),
        )
        .order_by(Event.occurred_on)
    )
    events = [
        DatedEvent(date=row.occurred_on, category=row.event_type.value)
        for row in result.all()
    ]
    return calculate_phase_statistics(events, config)
