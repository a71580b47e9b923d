"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    cycle,
    events,
    exercises,
    health,
    progression,
    statistics,
    tools,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(progression.router, prefix="/exercises", tags=["progression"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(events.router, prefix="/events", tags=["events"])
api_router.include_router(cycle.router, prefix="/cycle", tags=["cycle"])
api_router.include_router(statistics.router, prefix="/statistics", tags=["statistics"])
api_router.include_router(tools.router, prefix="/tools", tags=["tools"])
