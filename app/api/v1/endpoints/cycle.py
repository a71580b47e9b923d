"""Cycle endpoints: singleton cycle settings + cycle day/phase outlook."""

from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.models.cycle_settings import CycleSettings
from app.schemas.analytics import CycleConfig, CycleInfo, PhaseBand
from app.schemas.cycle import CycleSettingsRead, CycleSettingsUpdate
from app.services.cycle import describe_cycle_day, phase_bands, validate_cycle_config

logger = logging.getLogger(__name__)
router = APIRouter()
# Singleton until auth: one row in cycle_settings with this UUID as primary key.
SETTINGS_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")


async def get_cycle_config(db: AsyncSession) -> CycleConfig | None:
    """Engine config from the stored settings row, or None if cycle tracking is not set up."""
    result = await db.execute(select(CycleSettings).where(CycleSettings.id == SETTINGS_ID))
    settings_row = result.scalar_one_or_none()
    if settings_row is None:
        return None
    return CycleConfig(
        cycle_length_days=settings_row.cycle_length_days,
        reference_start_date=settings_row.last_period_date,
        timezone=settings_row.timezone,
    )


@router.get("/settings", response_model=CycleSettingsRead | None)
async def get_cycle_settings(db: AsyncSession = Depends(get_db)):
    """Stored cycle settings, or null when cycle tracking is not set up."""
    result = await db.execute(select(CycleSettings).where(CycleSettings.id == SETTINGS_ID))
    return result.scalar_one_or_none()


@router.put("/settings", response_model=CycleSettingsRead)
async def upsert_cycle_settings(payload: CycleSettingsUpdate, db: AsyncSession = Depends(get_db)):
    """Create or update the singleton cycle settings. Session is committed by get_db after this returns."""
    # Unknown timezone -> InvalidConfigurationError -> 422
    validate_cycle_config(
        CycleConfig(
            cycle_length_days=payload.cycle_length_days,
            reference_start_date=payload.last_period_date,
            timezone=payload.timezone,
        )
    )

    result = await db.execute(select(CycleSettings).where(CycleSettings.id == SETTINGS_ID))
    row = result.scalar_one_or_none()
    if row:
        row.cycle_length_days = payload.cycle_length_days
        row.last_period_date = payload.last_period_date
        row.timezone = payload.timezone
        row.updated_at = datetime.now(timezone.utc)
    else:
        row = CycleSettings(id=SETTINGS_ID, **payload.model_dump())
        db.add(row)
    await db.flush()
    await db.refresh(row)
    logger.info("Cycle settings updated: length=%s", row.cycle_length_days)
    return row


@router.get("/info", response_model=CycleInfo)
async def cycle_info(on: date | None = None, db: AsyncSession = Depends(get_db)):
    """Cycle day, phase and outlook for a date (today in the configured timezone by default)."""
    config = await get_cycle_config(db)
    if config is None:
        raise HTTPException(status_code=404, detail="Cycle settings not configured")
    return describe_cycle_day(config, on)


@router.get("/phases", response_model=list[PhaseBand])
async def cycle_phases(db: AsyncSession = Depends(get_db)):
    """Day range of each phase for the configured cycle length."""
    config = await get_cycle_config(db)
    if config is None:
        raise HTTPException(status_code=404, detail="Cycle settings not configured")
    return phase_bands(config.cycle_length_days)
