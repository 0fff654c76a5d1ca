"""
Domain models for weekly availability and booking requests.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

import pendulum

from .time_conversion import convert_minutes_to_time_string

WEEK_DAYS = range(7)  # 0=Sunday, 6=Saturday
DEFAULT_START_TIME = "08:00"
DEFAULT_END_TIME = "18:00"
DEFAULT_ENABLED_WEEK_DAYS = (1, 2, 3, 4, 5)


@dataclass(frozen=True)
class WeekdayInterval:
    """
    One row of the weekly availability form, as entered by the user.
    """
    week_day: int
    enabled: bool
    start_time: str  # HH:MM
    end_time: str  # HH:MM

    def __post_init__(self):
        if self.week_day not in WEEK_DAYS:
            raise ValueError(f"week_day must be between 0 and 6, got {self.week_day}")


@dataclass(frozen=True)
class NormalizedInterval:
    """
    An enabled weekday interval expressed in minutes since midnight.
    """
    week_day: int
    start_time_in_minutes: int
    end_time_in_minutes: int

    def duration_minutes(self) -> int:
        """Return the duration in minutes."""
        return self.end_time_in_minutes - self.start_time_in_minutes

    def to_payload(self) -> Dict[str, int]:
        """Serialize using the API's camelCase field names."""
        return {
            "weekDay": self.week_day,
            "startTimeInMinutes": self.start_time_in_minutes,
            "endTimeInMinutes": self.end_time_in_minutes,
        }

    def __str__(self) -> str:
        start = convert_minutes_to_time_string(self.start_time_in_minutes)
        end = convert_minutes_to_time_string(self.end_time_in_minutes)
        return f"{self.week_day}: {start} - {end}"


@dataclass
class WeeklyAvailability:
    """
    The weekly availability form state.

    Invariant: holds exactly one interval per weekday, ordered 0..6.
    """
    intervals: List[WeekdayInterval]

    def __post_init__(self):
        week_days = [interval.week_day for interval in self.intervals]
        if week_days != list(WEEK_DAYS):
            raise ValueError(
                f"Weekly availability needs one interval per weekday in order 0..6, got {week_days}"
            )

    @classmethod
    def default(
        cls,
        start_time: str = DEFAULT_START_TIME,
        end_time: str = DEFAULT_END_TIME,
        enabled_week_days: Iterable[int] = DEFAULT_ENABLED_WEEK_DAYS,
    ) -> "WeeklyAvailability":
        """Build the initial form state: weekdays enabled, weekend disabled."""
        enabled = set(enabled_week_days)
        return cls(intervals=[
            WeekdayInterval(
                week_day=day,
                enabled=day in enabled,
                start_time=start_time,
                end_time=end_time,
            )
            for day in WEEK_DAYS
        ])

    def update_day(
        self,
        week_day: int,
        *,
        enabled: Optional[bool] = None,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
    ) -> None:
        """Apply a user change to a single weekday row."""
        if week_day not in WEEK_DAYS:
            raise ValueError(f"week_day must be between 0 and 6, got {week_day}")

        changes: Dict[str, Any] = {}
        if enabled is not None:
            changes["enabled"] = enabled
        if start_time is not None:
            changes["start_time"] = start_time
        if end_time is not None:
            changes["end_time"] = end_time

        self.intervals[week_day] = replace(self.intervals[week_day], **changes)

    def __getitem__(self, week_day: int) -> WeekdayInterval:
        return self.intervals[week_day]

    def __iter__(self):
        return iter(self.intervals)

    def __len__(self) -> int:
        return len(self.intervals)


@dataclass
class ConfirmFormData:
    """Validated values of the booking confirmation form."""
    name: str
    email: str
    observations: Optional[str] = None


@dataclass
class BookingRequest:
    """
    A booking to be sent to the scheduling API.
    """
    name: str
    email: str
    observations: Optional[str]
    scheduling_date: datetime  # timezone-aware

    def __post_init__(self):
        if self.scheduling_date.tzinfo is None or self.scheduling_date.utcoffset() is None:
            raise ValueError(f"scheduling_date must be timezone-aware, got {self.scheduling_date!r}")

    def to_payload(self) -> Dict[str, Any]:
        """
        Build the JSON body for ``POST /users/{username}/schedule``.

        The date is sent as an ISO-8601 timestamp in UTC.
        """
        date = pendulum.instance(self.scheduling_date).in_timezone("UTC")
        return {
            "name": self.name,
            "email": self.email,
            "observations": self.observations,
            "date": date.to_iso8601_string(),
        }
