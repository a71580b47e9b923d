"""Cycle settings schemas."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import MAX_CYCLE_LENGTH_DAYS


class CycleSettingsUpdate(BaseModel):
    cycle_length_days: int = Field(28, ge=1, le=MAX_CYCLE_LENGTH_DAYS, description="Cycle length in days (typically 21-35)")
    last_period_date: date = Field(..., description="Most recent confirmed period start")
    timezone: str = Field("UTC", max_length=64, description="IANA timezone name")


class CycleSettingsRead(CycleSettingsUpdate):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    updated_at: datetime
