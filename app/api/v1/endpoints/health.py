"""Liveness and readiness probes."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.session import get_db
from app.models.cycle_settings import CycleSettings

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health():
    return {"status": "ok", "service": get_settings().app_name}


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """DB reachable, plus whether cycle analytics have settings to work from."""
    try:
        result = await db.execute(select(CycleSettings.id).limit(1))
        configured = result.scalar_one_or_none() is not None
    except Exception as e:
        logger.warning("Readiness check failed: %s", e)
        return JSONResponse(status_code=503, content={"status": "error", "database": str(e)})
    return {"status": "ok", "database": "connected", "cycle_tracking": configured}
