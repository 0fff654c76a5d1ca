"""
Validation and normalization of the weekly availability form.

Pipeline:
1. Keep only enabled days
2. Require at least one enabled day
3. Convert HH:MM strings to minute offsets
4. Require each interval to span the minimum duration
"""

from typing import List

from .exceptions import EmptySelectionError, MinimumDurationError
from .models import NormalizedInterval, WeekdayInterval, WeeklyAvailability
from .time_conversion import convert_time_string_to_minutes
from .validation import ValidationPipeline

INTERVALS_PATH = "intervals"
MIN_INTERVAL_MINUTES = 60


class WeeklyAvailabilityValidator:
    """
    Turns the 7-row availability form into normalized intervals.
    """

    def __init__(self, min_interval_minutes: int = MIN_INTERVAL_MINUTES):
        self.min_interval_minutes = min_interval_minutes
        self._pipeline = (
            ValidationPipeline()
            .then(self._keep_enabled)
            .then(self._require_selection)
            .then(self._normalize)
            .then(self._require_minimum_duration)
        )

    def validate(self, availability: WeeklyAvailability) -> List[NormalizedInterval]:
        """
        Validate the form and return the enabled intervals in weekday order.

        Raises:
            FormValidationError: With an ``EmptySelectionError`` or
                ``MinimumDurationError`` failure
        """
        return self._pipeline.run(list(availability))

    @staticmethod
    def _keep_enabled(intervals: List[WeekdayInterval]) -> List[WeekdayInterval]:
        return [interval for interval in intervals if interval.enabled]

    @staticmethod
    def _require_selection(intervals: List[WeekdayInterval]) -> List[WeekdayInterval]:
        if not intervals:
            raise EmptySelectionError(INTERVALS_PATH)
        return intervals

    @staticmethod
    def _normalize(intervals: List[WeekdayInterval]) -> List[NormalizedInterval]:
        return [
            NormalizedInterval(
                week_day=interval.week_day,
                start_time_in_minutes=convert_time_string_to_minutes(interval.start_time),
                end_time_in_minutes=convert_time_string_to_minutes(interval.end_time),
            )
            for interval in intervals
        ]

    def _require_minimum_duration(self, intervals: List[NormalizedInterval]) -> List[NormalizedInterval]:
        too_short = [
            interval.week_day
            for interval in intervals
            if interval.duration_minutes() < self.min_interval_minutes
        ]
        if too_short:
            raise MinimumDurationError(INTERVALS_PATH, week_days=too_short)
        return intervals
