"""
Tests for domain models.
"""

from datetime import datetime, timedelta, timezone

import pendulum
import pytest

from callbooking.domain.models import (
    BookingRequest,
    NormalizedInterval,
    WeekdayInterval,
    WeeklyAvailability,
)


class TestWeeklyAvailability:
    """Tests for WeeklyAvailability model."""

    def test_default_week(self):
        """Default week has weekdays enabled and the weekend disabled."""
        availability = WeeklyAvailability.default()

        assert len(availability) == 7
        assert [interval.enabled for interval in availability] == [
            False, True, True, True, True, True, False
        ]
        assert all(interval.start_time == "08:00" for interval in availability)
        assert all(interval.end_time == "18:00" for interval in availability)

    def test_requires_one_interval_per_weekday(self):
        """Anything but 7 ordered entries is rejected."""
        intervals = list(WeeklyAvailability.default())

        with pytest.raises(ValueError, match="one interval per weekday"):
            WeeklyAvailability(intervals=intervals[:6])

        with pytest.raises(ValueError, match="one interval per weekday"):
            WeeklyAvailability(intervals=list(reversed(intervals)))

    def test_update_day(self):
        """User changes replace a single row."""
        availability = WeeklyAvailability.default()

        availability.update_day(0, enabled=True, start_time="10:00")

        assert availability[0] == WeekdayInterval(week_day=0, enabled=True, start_time="10:00", end_time="18:00")
        assert availability[1].start_time == "08:00"

    def test_update_unknown_day_raises(self):
        """Weekday must be between 0 and 6."""
        with pytest.raises(ValueError):
            WeeklyAvailability.default().update_day(7, enabled=True)

    def test_invalid_week_day(self):
        """WeekdayInterval rejects out of range weekdays."""
        with pytest.raises(ValueError):
            WeekdayInterval(week_day=-1, enabled=True, start_time="08:00", end_time="18:00")


class TestNormalizedInterval:
    """Tests for NormalizedInterval model."""

    def test_payload_and_duration(self):
        interval = NormalizedInterval(week_day=1, start_time_in_minutes=480, end_time_in_minutes=1080)

        assert interval.duration_minutes() == 600
        assert interval.to_payload() == {
            "weekDay": 1,
            "startTimeInMinutes": 480,
            "endTimeInMinutes": 1080,
        }
        assert str(interval) == "1: 08:00 - 18:00"


class TestBookingRequest:
    """Tests for BookingRequest model."""

    def test_payload_sends_utc_timestamp(self):
        """The date is serialized as ISO-8601 in UTC."""
        date = pendulum.parse("2024-03-15 10:00", tz="America/Sao_Paulo")
        booking = BookingRequest(
            name="John Doe",
            email="john@example.com",
            observations=None,
            scheduling_date=date,
        )

        assert booking.to_payload() == {
            "name": "John Doe",
            "email": "john@example.com",
            "observations": None,
            "date": "2024-03-15T13:00:00Z",
        }

    def test_naive_date_is_rejected(self):
        """Without a timezone the UTC instant would be a guess."""
        with pytest.raises(ValueError, match="timezone-aware"):
            BookingRequest(
                name="John Doe",
                email="john@example.com",
                observations=None,
                scheduling_date=datetime(2024, 3, 15, 14),
            )

    def test_aware_stdlib_datetime(self):
        """A stdlib datetime with tzinfo is converted to UTC."""
        booking = BookingRequest(
            name="John Doe",
            email="john@example.com",
            observations=None,
            scheduling_date=datetime(2024, 3, 15, 14, tzinfo=timezone(timedelta(hours=-3))),
        )

        assert booking.to_payload()["date"] == "2024-03-15T17:00:00Z"
