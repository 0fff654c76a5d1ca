"""
Application service for the weekly availability step.
"""

from __future__ import annotations

import logging
from typing import List, Protocol

from ..domain.availability import WeeklyAvailabilityValidator
from ..domain.models import NormalizedInterval, WeeklyAvailability

logger = logging.getLogger(__name__)


class IntervalsSink(Protocol):
    """Anything that can persist normalized intervals."""

    def save_time_intervals(self, intervals: List[NormalizedInterval]) -> None:
        """Store the weekly availability."""


class LoggingIntervalsSink:
    """Sink that only logs the intervals it receives."""

    def save_time_intervals(self, intervals: List[NormalizedInterval]) -> None:
        logger.info("Time intervals: %s", [interval.to_payload() for interval in intervals])


class TimeIntervalsService:
    """
    Validates the availability form and hands the result to a sink.
    """

    def __init__(
        self,
        sink: IntervalsSink | None = None,
        validator: WeeklyAvailabilityValidator | None = None,
    ) -> None:
        self._sink = sink or LoggingIntervalsSink()
        self._validator = validator or WeeklyAvailabilityValidator()

    def submit(self, availability: WeeklyAvailability) -> List[NormalizedInterval]:
        """
        Validate and store the weekly availability.

        Raises:
            FormValidationError: If the form is invalid; nothing is stored
            SchedulingAPIError: If the sink is a remote API and the call fails
        """
        intervals = self._validator.validate(availability)
        logger.debug("Normalized %d interval(s)", len(intervals))
        self._sink.save_time_intervals(intervals)
        return intervals
