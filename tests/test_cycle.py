"""Tests for cycle day, phase bands and cycle outlook."""

from datetime import date, datetime, timedelta, timezone

import pytest

from app.core.constants import PHASE_RECOMMENDATIONS
from app.core.enums import CyclePhase
from app.core.errors import InvalidConfigurationError
from app.schemas.analytics import CycleConfig
from app.services.cycle import (
    calculate_cycle_day,
    describe_cycle_day,
    phase_bands,
    phase_for_day,
)

REFERENCE = date(2026, 1, 1)


class TestCalculateCycleDay:
    def test_reference_date_is_day_one(self, cycle_config):
        day = calculate_cycle_day(cycle_config, REFERENCE)
        assert (day.cycle_day, day.phase, day.is_forecast) == (1, CyclePhase.MENSTRUAL, False)

    @pytest.mark.parametrize("length", [21, 28, 35])
    def test_wraps_after_cycle_length(self, length):
        config = CycleConfig(cycle_length_days=length, reference_start_date=REFERENCE)
        assert calculate_cycle_day(config, REFERENCE + timedelta(days=length)).cycle_day == 1

    @pytest.mark.parametrize(
        "offset, cycle_day, phase",
        [
            (6, 7, CyclePhase.MENSTRUAL),
            (7, 8, CyclePhase.FOLLICULAR),
            (12, 13, CyclePhase.OVULATION),
            (16, 17, CyclePhase.EARLY_LUTEAL),
            (20, 21, CyclePhase.LATE_LUTEAL),
            (27, 28, CyclePhase.LATE_LUTEAL),
        ],
    )
    def test_reference_partition(self, cycle_config, offset, cycle_day, phase):
        day = calculate_cycle_day(cycle_config, REFERENCE + timedelta(days=offset))
        assert (day.cycle_day, day.phase) == (cycle_day, phase)

    def test_date_before_reference_is_forecast(self, cycle_config):
        day = calculate_cycle_day(cycle_config, REFERENCE - timedelta(days=1))
        assert day.cycle_day == 28
        assert day.phase == CyclePhase.LATE_LUTEAL
        assert day.is_forecast is True

    def test_far_past_date(self, cycle_config):
        assert calculate_cycle_day(cycle_config, REFERENCE - timedelta(days=28 * 5 + 3)).cycle_day == 26

    def test_iso_string_target(self, cycle_config):
        assert calculate_cycle_day(cycle_config, "2026-01-13").phase == CyclePhase.OVULATION

    @pytest.mark.parametrize(
        "value",
        ["2026-01-13 10:00:00", "2026-01-13T10:00:00", "2026-01-13T23:30:00+02:00", "2026-01-13 08:00:00+00:00"],
    )
    def test_iso_datetime_strings(self, cycle_config, value):
        assert calculate_cycle_day(cycle_config, value).cycle_day == 13

    def test_offset_string_converted_to_config_timezone(self, cycle_config):
        # 01:30 at +02:00 is still the previous evening in UTC
        assert calculate_cycle_day(cycle_config, "2026-01-14T01:30:00+02:00").cycle_day == 13

    def test_aware_datetime_uses_config_timezone(self):
        config = CycleConfig(reference_start_date=REFERENCE, timezone="Europe/Berlin")
        late_evening_utc = datetime(2026, 1, 1, 23, 30, tzinfo=timezone.utc)
        assert calculate_cycle_day(config, late_evening_utc).cycle_day == 2

    @pytest.mark.parametrize("length", [0, -5])
    def test_non_positive_length_rejected(self, length):
        config = CycleConfig(cycle_length_days=length, reference_start_date=REFERENCE)
        with pytest.raises(InvalidConfigurationError):
            calculate_cycle_day(config, REFERENCE)

    @pytest.mark.parametrize("length", [91, 3_000_000])
    def test_overlong_cycle_rejected(self, length):
        config = CycleConfig(cycle_length_days=length, reference_start_date=REFERENCE)
        with pytest.raises(InvalidConfigurationError):
            calculate_cycle_day(config, REFERENCE)

    def test_longest_accepted_cycle(self):
        config = CycleConfig(cycle_length_days=90, reference_start_date=REFERENCE)
        assert calculate_cycle_day(config, REFERENCE + timedelta(days=89)).cycle_day == 90

    def test_unknown_timezone_rejected(self):
        config = CycleConfig(reference_start_date=REFERENCE, timezone="Mars/Olympus_Mons")
        with pytest.raises(InvalidConfigurationError):
            calculate_cycle_day(config, REFERENCE)

    @pytest.mark.parametrize("value", ["not-a-date", "2026-13-45", ""])
    def test_unparseable_date_rejected(self, cycle_config, value):
        with pytest.raises(InvalidConfigurationError):
            calculate_cycle_day(cycle_config, value)


class TestPhaseBands:
    def test_reference_length_matches_reference_partition(self):
        bands = [(b.phase, b.start_day, b.end_day) for b in phase_bands(28)]
        assert bands == [
            (CyclePhase.MENSTRUAL, 1, 7),
            (CyclePhase.FOLLICULAR, 8, 12),
            (CyclePhase.OVULATION, 13, 16),
            (CyclePhase.EARLY_LUTEAL, 17, 20),
            (CyclePhase.LATE_LUTEAL, 21, 28),
        ]

    def test_scaled_boundaries_floor_and_absorb_remainder(self):
        assert [b.end_day for b in phase_bands(21)] == [5, 9, 12, 15, 21]
        assert [b.end_day for b in phase_bands(35)] == [8, 15, 20, 25, 35]

    @pytest.mark.parametrize("length", range(21, 36))
    def test_bands_partition_the_cycle(self, length):
        bands = phase_bands(length)
        assert [b.phase for b in bands] == list(CyclePhase)
        assert bands[0].start_day == 1
        assert bands[-1].end_day == length
        for prev, cur in zip(bands, bands[1:]):
            assert cur.start_day == prev.end_day + 1
        for b in bands:
            assert b.start_day <= b.end_day

        for day in range(1, length + 1):
            containing = [b.phase for b in bands if b.start_day <= day <= b.end_day]
            assert containing == [phase_for_day(day, length)]

    def test_zero_length_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            phase_bands(0)


class TestDescribeCycleDay:
    def test_outlook_early_in_cycle(self, cycle_config):
        info = describe_cycle_day(cycle_config, date(2026, 1, 5))
        assert info.cycle_day == 5
        assert info.date == date(2026, 1, 5)
        assert info.next_period_date == date(2026, 1, 29)
        assert info.next_ovulation_date == date(2026, 1, 13)
        assert info.is_in_fertile_window is False
        assert info.training_recommendations == PHASE_RECOMMENDATIONS[CyclePhase.MENSTRUAL]

    @pytest.mark.parametrize("day, expected", [(9, False), (10, True), (16, True), (17, False)])
    def test_fertile_window(self, cycle_config, day, expected):
        info = describe_cycle_day(cycle_config, REFERENCE + timedelta(days=day - 1))
        assert info.is_in_fertile_window is expected

    def test_next_ovulation_rolls_into_next_cycle(self, cycle_config):
        info = describe_cycle_day(cycle_config, date(2026, 1, 20))
        assert info.next_ovulation_date == date(2026, 2, 10)

    def test_later_cycle(self, cycle_config):
        info = describe_cycle_day(cycle_config, date(2026, 2, 3))
        assert info.cycle_day == 6
        assert info.next_period_date == date(2026, 2, 26)
        assert info.is_forecast is False

    def test_defaults_to_today(self, cycle_config):
        info = describe_cycle_day(cycle_config)
        assert 1 <= info.cycle_day <= 28
