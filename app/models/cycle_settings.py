"""CycleSettings model: singleton cycle configuration (length, last period start, timezone)."""

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class CycleSettings(Base):
    """One row per user; single row with a fixed id until auth exists.

    Only the reference start date is stored: cycle day and phase are always recomputed.
    """

    __tablename__ = "cycle_settings"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    cycle_length_days: Mapped[int] = mapped_column(Integer, nullable=False, default=28)
    last_period_date: Mapped[date] = mapped_column(Date, nullable=False)
    timezone: Mapped[str] = mapped_column(String(64), nullable=False, default="UTC")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
