"""
Application service for the booking confirmation step.

The service validates the form, sends the booking through a scheduling
client and tells the hosting flow when the step is done. The client is
typed as a protocol so tests and the ``--mock`` mode can plug in an
in-memory implementation.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

from ..domain.booking import BookingConfirmationValidator
from ..domain.exceptions import SchedulingAPIError, SubmissionInProgressError
from ..domain.formatting import DEFAULT_LOCALE, describe_date, describe_time
from ..domain.models import BookingRequest

logger = logging.getLogger(__name__)

FAILURE_NOTICE = "Could not confirm your booking. Please try again."


class BookingClientProtocol(Protocol):
    """Protocol describing the client behaviour needed to book a slot."""

    def create_scheduling(self, username: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Send the booking to the API."""


class ConfirmStep:
    """
    Confirms a booking for ``scheduling_date`` with the user ``username``.

    ``on_complete`` is called once the booking was accepted, or when the
    visitor cancels, so the caller can leave the confirmation step.
    """

    def __init__(
        self,
        client: BookingClientProtocol,
        username: str,
        scheduling_date: datetime,
        on_complete: Callable[[], None],
        validator: BookingConfirmationValidator | None = None,
        locale: str = DEFAULT_LOCALE,
        timezone: str | None = None,
    ) -> None:
        self._client = client
        self._validator = validator or BookingConfirmationValidator()
        self._on_complete = on_complete
        self.username = username
        self.scheduling_date = scheduling_date
        self.locale = locale
        self.timezone = timezone
        self.is_submitting = False
        self.failure_notice: Optional[str] = None

    def describe(self) -> Tuple[str, str]:
        """Return the (date, time) labels shown above the form."""
        return (
            describe_date(self.scheduling_date, self.locale, self.timezone),
            describe_time(self.scheduling_date, self.locale, self.timezone),
        )

    async def confirm(self, name: str, email: str, observations: Optional[str] = None) -> BookingRequest:
        """
        Validate the form and book the slot.

        Raises:
            FormValidationError: If the form is invalid; nothing is sent
            SubmissionInProgressError: If a previous submission is still pending
            SchedulingAPIError: If the API call fails; ``failure_notice`` is set
                and the step stays open for another attempt
        """
        if self.is_submitting:
            raise SubmissionInProgressError("A booking is already being confirmed")

        data = self._validator.validate(name=name, email=email, observations=observations)
        booking = BookingRequest(
            name=data.name,
            email=data.email,
            observations=data.observations,
            scheduling_date=self.scheduling_date,
        )

        self.is_submitting = True
        self.failure_notice = None
        try:
            await asyncio.to_thread(self._client.create_scheduling, self.username, booking.to_payload())
        except SchedulingAPIError:
            logger.exception("Booking for %s failed", self.username)
            self.failure_notice = FAILURE_NOTICE
            raise
        finally:
            self.is_submitting = False

        logger.info("Booked %s with %s", booking.to_payload()["date"], self.username)
        self._on_complete()
        return booking

    def cancel(self) -> None:
        """Leave the step without booking."""
        self._on_complete()
