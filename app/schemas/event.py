"""Event schemas."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import EventType


class EventCreate(BaseModel):
    event_type: EventType
    occurred_on: date
    severity: int | None = Field(None, ge=1, le=5)
    notes: str | None = None


class EventRead(EventCreate):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    created_at: datetime
