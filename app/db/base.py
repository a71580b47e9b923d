"""Declarative base shared by the diary tables (exercises, workouts, sets, events, cycle settings)."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
