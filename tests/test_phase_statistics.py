"""Tests for phase-correlation statistics."""

from datetime import date, datetime, timezone

import pytest

from app.core.enums import CyclePhase
from app.core.errors import InvalidConfigurationError
from app.schemas.analytics import CycleConfig, DatedEvent
from app.services.phase_statistics import calculate_phase_statistics, dominant_phase

NOW = datetime(2026, 2, 1, 12, tzinfo=timezone.utc)


def _events(*days: str) -> list[DatedEvent]:
    return [DatedEvent(date=d, category="injury") for d in days]


class TestCalculatePhaseStatistics:
    def test_no_events(self, cycle_config):
        stats = calculate_phase_statistics([], cycle_config, now=NOW)

        assert list(stats.events_by_phase) == list(CyclePhase)
        assert all(count == 0 for count in stats.events_by_phase.values())
        assert stats.total_events == 0
        assert stats.dominant_phase is None
        assert stats.days_since_last_event is None
        assert stats.last_event_date is None
        assert len(stats.events_by_cycle_day) == 28
        assert all(d.count == 0 for d in stats.events_by_cycle_day)

    def test_counts_by_phase_in_cycle_order(self, cycle_config):
        events = _events("2026-01-02", "2026-01-14", "2026-01-15", "2026-01-25", "2026-01-30")
        stats = calculate_phase_statistics(events, cycle_config, now=NOW)

        assert list(stats.events_by_phase.items()) == [
            (CyclePhase.MENSTRUAL, 2),  # Jan 2 and Jan 30 (day 2 of next cycle)
            (CyclePhase.FOLLICULAR, 0),
            (CyclePhase.OVULATION, 2),
            (CyclePhase.EARLY_LUTEAL, 0),
            (CyclePhase.LATE_LUTEAL, 1),
        ]
        assert stats.total_events == 5

    def test_tie_goes_to_earlier_phase(self, cycle_config):
        events = _events(
            "2026-01-01", "2026-01-02", "2026-01-03",  # menstrual
            "2026-01-08", "2026-01-09", "2026-01-10",  # follicular
        )
        stats = calculate_phase_statistics(events, cycle_config, now=NOW)
        assert stats.dominant_phase == CyclePhase.MENSTRUAL

    def test_strictly_highest_wins(self, cycle_config):
        events = _events("2026-01-01", "2026-01-08", "2026-01-09")
        stats = calculate_phase_statistics(events, cycle_config, now=NOW)
        assert stats.dominant_phase == CyclePhase.FOLLICULAR

    def test_days_since_last_event(self, cycle_config):
        events = _events("2026-01-10", "2026-01-03", "2026-01-08")
        stats = calculate_phase_statistics(events, cycle_config, now=NOW)
        assert stats.last_event_date == date(2026, 1, 10)
        assert stats.days_since_last_event == 22

    def test_events_by_cycle_day(self, cycle_config):
        events = _events("2026-01-13", "2026-02-10", "2026-01-01")
        stats = calculate_phase_statistics(events, cycle_config, now=NOW)

        by_day = {d.cycle_day: d for d in stats.events_by_cycle_day}
        assert by_day[13].count == 2
        assert by_day[13].phase == CyclePhase.OVULATION
        assert by_day[1].count == 1
        assert by_day[28].phase == CyclePhase.LATE_LUTEAL
        assert sum(d.count for d in stats.events_by_cycle_day) == 3

    def test_no_filtering_by_category(self, cycle_config):
        events = [
            DatedEvent(date=date(2026, 1, 1), category="injury"),
            DatedEvent(date=datetime(2026, 1, 2, 8, tzinfo=timezone.utc), category="illness"),
            DatedEvent(date="2026-01-03"),
        ]
        stats = calculate_phase_statistics(events, cycle_config, now=NOW)
        assert stats.total_events == 3
        assert stats.events_by_phase[CyclePhase.MENSTRUAL] == 3

    def test_invalid_config_rejected_even_without_events(self):
        config = CycleConfig(cycle_length_days=0, reference_start_date=date(2026, 1, 1))
        with pytest.raises(InvalidConfigurationError):
            calculate_phase_statistics([], config, now=NOW)

    def test_overlong_cycle_rejected_before_building_histogram(self):
        config = CycleConfig(cycle_length_days=3_000_000, reference_start_date=date(2026, 1, 1))
        with pytest.raises(InvalidConfigurationError):
            calculate_phase_statistics(_events("2026-01-02"), config, now=NOW)

    def test_space_separated_event_timestamp(self, cycle_config):
        stats = calculate_phase_statistics(_events("2026-01-13 21:15:00"), cycle_config, now=NOW)
        assert stats.events_by_phase[CyclePhase.OVULATION] == 1

    def test_unparseable_event_date_rejected(self, cycle_config):
        with pytest.raises(InvalidConfigurationError):
            calculate_phase_statistics(_events("yesterday"), cycle_config, now=NOW)


class TestDominantPhase:
    def test_all_zero(self):
        assert dominant_phase({phase: 0 for phase in CyclePhase}) is None

    def test_later_phase_with_higher_count(self):
        counts = {phase: 1 for phase in CyclePhase}
        counts[CyclePhase.LATE_LUTEAL] = 4
        assert dominant_phase(counts) == CyclePhase.LATE_LUTEAL
