"""Event endpoints: log and list dated health events (injury, illness, note)."""

import uuid
from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import EventType
from app.db.session import get_db
from app.models.event import Event
from app.schemas.event import EventCreate, EventRead

router = APIRouter()


@router.get("", response_model=list[EventRead])
async def list_events(
    event_type: EventType | None = None,
    from_date: date | None = None,
    to_date: date | None = None,
    db: AsyncSession = Depends(get_db),
):
    """List events, newest first, optionally filtered by type and date range."""
    stmt = select(Event)
    if event_type:
        stmt = stmt.where(Event.event_type == event_type)
    if from_date:
        stmt = stmt.where(Event.occurred_on >= from_date)
    if to_date:
        stmt = stmt.where(Event.occurred_on <= to_date)
    result = await db.execute(stmt.order_by(Event.occurred_on.desc()))
    return list(result.scalars().all())


@router.post("", response_model=EventRead, status_code=201)
async def create_event(payload: EventCreate, db: AsyncSession = Depends(get_db)):
    event = Event(**payload.model_dump())
    db.add(event)
    await db.flush()
    await db.refresh(event)
    return event


@router.delete("/{event_id}", status_code=204)
async def delete_event(event_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Event).where(Event.id == event_id))
    event = result.scalar_one_or_none()
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    await db.delete(event)
    return None
