"""Tests for timeframe token resolution."""

from datetime import datetime, timezone

import pytest

from app.core.enums import TimeFrame
from app.services.time_window import EPOCH, parse_timeframe, resolve_time_window

END_OF_DAY = dict(hour=23, minute=59, second=59, microsecond=999999)


class TestResolveTimeWindow:
    @pytest.mark.parametrize(
        "timeframe, expected_start",
        [
            (TimeFrame.ONE_WEEK, datetime(2026, 3, 8, tzinfo=timezone.utc)),
            (TimeFrame.ONE_MONTH, datetime(2026, 2, 15, tzinfo=timezone.utc)),
            (TimeFrame.THREE_MONTHS, datetime(2025, 12, 15, tzinfo=timezone.utc)),
            (TimeFrame.SIX_MONTHS, datetime(2025, 9, 15, tzinfo=timezone.utc)),
            (TimeFrame.ONE_YEAR, datetime(2025, 3, 15, tzinfo=timezone.utc)),
            (TimeFrame.ALL, EPOCH),
        ],
    )
    def test_start_of_window(self, now, timeframe, expected_start):
        start, end = resolve_time_window(timeframe, now)
        assert start == expected_start
        assert end == now.replace(**END_OF_DAY)

    def test_string_tokens(self, now):
        assert resolve_time_window("3months", now) == resolve_time_window(TimeFrame.THREE_MONTHS, now)

    def test_month_end_clamped(self):
        start, _ = resolve_time_window(TimeFrame.ONE_MONTH, datetime(2026, 3, 31, 9, tzinfo=timezone.utc))
        assert start == datetime(2026, 2, 28, tzinfo=timezone.utc)

    def test_leap_day_one_year_back(self):
        start, _ = resolve_time_window(TimeFrame.ONE_YEAR, datetime(2024, 2, 29, tzinfo=timezone.utc))
        assert start == datetime(2023, 2, 28, tzinfo=timezone.utc)

    def test_crosses_year_boundary(self):
        start, _ = resolve_time_window(TimeFrame.ONE_MONTH, datetime(2026, 1, 10, tzinfo=timezone.utc))
        assert start == datetime(2025, 12, 10, tzinfo=timezone.utc)

    def test_naive_now_treated_as_utc(self):
        start, end = resolve_time_window(TimeFrame.ONE_WEEK, datetime(2026, 3, 15, 12))
        assert start.tzinfo is not None
        assert end == datetime(2026, 3, 15, tzinfo=timezone.utc).replace(**END_OF_DAY)


class TestParseTimeframe:
    def test_known_token(self):
        assert parse_timeframe("6months") is TimeFrame.SIX_MONTHS

    @pytest.mark.parametrize("token", ["", "2weeks", None])
    def test_unknown_falls_back(self, token):
        assert parse_timeframe(token) is TimeFrame.ONE_MONTH
