"""Exercise progression: per-session aggregation, summary, improvement trend and personal records.

Everything here is recomputed on demand from the sets passed in; nothing is cached or stored.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timezone
from typing import Any

from app.core.constants import IMPROVEMENT_MIN_WORKOUTS
from app.core.enums import PRType, TimeFrame
from app.core.errors import InvalidConfigurationError
from app.schemas.analytics import (
    BestSet,
    ExerciseProgression,
    ExerciseSession,
    Improvement,
    LoggedSet,
    PersonalRecord,
    PersonalRecords,
    ProgressionPoint,
    ProgressionSummary,
    TimeWindow,
)
from app.services.one_rm import estimate_one_rm, round_half_up
from app.services.time_window import parse_timeframe, resolve_time_window

logger = logging.getLogger(__name__)


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _aware(dt: datetime) -> datetime:
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


def _best_set(valid_sets: Sequence[LoggedSet]) -> LoggedSet:
    """Highest weight × reps; equal products go to the heavier set. Earlier set wins exact ties."""
    best = valid_sets[0]
    for current in valid_sets[1:]:
        best_value = best.weight * best.reps
        current_value = current.weight * current.reps
        if current_value > best_value:
            best = current
        elif current_value == best_value and current.weight > best.weight:
            best = current
    return best


def aggregate_session(session: ExerciseSession) -> ProgressionPoint | None:
    """One progression point for the session, or None when it has no set with weight and reps."""
    valid = [s for s in session.sets if s.is_valid]
    if not valid:
        logger.debug("Session %s has no valid sets; skipped", session.workout_id)
        return None

    weights = [float(s.weight) for s in valid]
    reps = [s.reps for s in valid]
    rirs = [s.rir for s in valid if s.rir is not None]
    best = _best_set(valid)

    return ProgressionPoint(
        date=session.occurred_at,
        session_id=session.workout_id,
        set_count=len(valid),
        max_weight=max(weights),
        avg_weight=_mean(weights),
        total_volume=sum(w * r for w, r in zip(weights, reps)),
        best_set=BestSet(weight=best.weight, reps=best.reps, rir=best.rir),
        estimated_1rm=estimate_one_rm(best.weight, best.reps, best.rir),
        avg_reps=_mean(reps),
        avg_rir=_mean(rirs) if rirs else None,
    )


def _improvement(points: Sequence[ProgressionPoint], timeframe: TimeFrame) -> Improvement:
    """First half vs second half (% change of mean max weight and mean volume)."""
    if len(points) < IMPROVEMENT_MIN_WORKOUTS:
        return Improvement(weight=0.0, volume=0.0, period=timeframe)

    midpoint = len(points) // 2
    first, second = points[:midpoint], points[midpoint:]

    def pct_change(metric: Callable[[ProgressionPoint], float]) -> float:
        before = _mean([metric(p) for p in first])
        after = _mean([metric(p) for p in second])
        if before == 0:
            return 0.0
        return round_half_up((after - before) / before * 100, 1)

    return Improvement(
        weight=pct_change(lambda p: p.max_weight),
        volume=pct_change(lambda p: p.total_volume),
        period=timeframe,
    )


def _personal_record(
    points: Sequence[ProgressionPoint],
    metric: Callable[[ProgressionPoint], float],
) -> PersonalRecord:
    """Running max with strict >, so the earliest point holding the max is kept."""
    if not points:
        return PersonalRecord(value=0, date=None, session_id=None)
    best = points[0]
    for p in points[1:]:
        if metric(p) > metric(best):
            best = p
    return PersonalRecord(value=metric(best) or 0, date=best.date, session_id=best.session_id)


_RECORD_METRICS: dict[PRType, Callable[[ProgressionPoint], float]] = {
    PRType.WEIGHT: lambda p: p.max_weight,
    PRType.VOLUME: lambda p: p.total_volume,
    PRType.ONE_RM: lambda p: p.estimated_1rm,
    PRType.REPS: lambda p: p.best_set.reps,
}


def personal_records(points: Sequence[ProgressionPoint]) -> PersonalRecords:
    """The four personal records over date-ordered points."""
    return PersonalRecords(
        **{kind.value: _personal_record(points, metric) for kind, metric in _RECORD_METRICS.items()}
    )


def summarize(points: Sequence[ProgressionPoint], timeframe: TimeFrame) -> ProgressionSummary:
    """Totals, peaks, averages and improvement trend over date-ordered points."""
    return ProgressionSummary(
        total_workouts=len(points),
        total_sets=sum(p.set_count for p in points),
        peak_weight=max((p.max_weight for p in points), default=0.0),
        peak_volume=max((p.total_volume for p in points), default=0.0),
        peak_1rm=max((p.estimated_1rm for p in points), default=0.0),
        average_weight=_mean([p.avg_weight for p in points]),
        average_volume=_mean([p.total_volume for p in points]),
        improvement=_improvement(points, timeframe),
    )


def build_exercise_progression(
    exercise_id: Any,
    sessions: Iterable[ExerciseSession],
    timeframe: TimeFrame | str = TimeFrame.ONE_MONTH,
    now: datetime | None = None,
) -> ExerciseProgression:
    """
    Progression for one exercise within a timeframe.

    Sessions outside the window, or logged against another exercise, are ignored.
    Sessions without a valid set contribute nothing. Empty input yields an all-zero
    summary and zero-valued records rather than an error.
    """
    if exercise_id is None:
        raise InvalidConfigurationError("exercise_id is required")

    tf = parse_timeframe(timeframe)
    start, end = resolve_time_window(tf, now)

    points: list[ProgressionPoint] = []
    for session in sessions:
        if session.exercise_id != exercise_id:
            continue
        if not (start <= _aware(session.occurred_at) <= end):
            continue
        point = aggregate_session(session)
        if point is not None:
            points.append(point)
    points.sort(key=lambda p: _aware(p.date))

    return ExerciseProgression(
        exercise_id=exercise_id,
        timeframe=TimeWindow(start=start, end=end),
        data_points=points,
        summary=summarize(points, tf),
        personal_records=personal_records(points),
    )


def group_sets_into_sessions(rows: Iterable[Any]) -> list[ExerciseSession]:
    """
    Group WorkoutSet rows (with `workout` loaded) into one session per (workout, exercise).
    Sets keep their set_number order; sessions follow workout start time.
    """
    grouped: dict[tuple[Any, Any], dict[str, Any]] = {}
    for row in rows:
        key = (row.workout_id, row.exercise_id)
        if key not in grouped:
            grouped[key] = {
                "workout_id": row.workout_id,
                "exercise_id": row.exercise_id,
                "occurred_at": row.workout.started_at,
                "sets": [],
            }
        grouped[key]["sets"].append(
            LoggedSet(
                set_number=row.set_number,
                weight=float(row.weight) if row.weight is not None else None,
                reps=row.reps,
                rir=row.rir,
            )
        )
    sessions = [
        ExerciseSession(
            workout_id=g["workout_id"],
            exercise_id=g["exercise_id"],
            occurred_at=g["occurred_at"],
            sets=tuple(sorted(g["sets"], key=lambda s: s.set_number)),
        )
        for g in grouped.values()
    ]
    sessions.sort(key=lambda s: _aware(s.occurred_at))
    return sessions
