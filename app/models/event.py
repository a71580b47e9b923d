"""Event model - dated health/biological events (injury, illness, note)."""

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Enum, Index, Integer, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.core.enums import EventType
from app.db.base import Base


class Event(Base):
    """A dated event. Injuries feed the phase-correlation statistics."""

    __tablename__ = "events"
    __table_args__ = (Index("ix_events_type_occurred_on", "event_type", "occurred_on"),)

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    event_type: Mapped[EventType] = mapped_column(Enum(EventType), nullable=False)
    occurred_on: Mapped[date] = mapped_column(Date, nullable=False)
    severity: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 1-5
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
