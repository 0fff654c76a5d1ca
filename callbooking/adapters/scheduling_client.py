"""
HTTP client for the scheduling API.
"""

import logging
from typing import Any, Dict, List

import requests

from ..domain.exceptions import SchedulingAPIError
from ..domain.models import NormalizedInterval

logger = logging.getLogger(__name__)


class SchedulingClient:
    """
    Client for the scheduling API.

    Bookings go to ``/users/{username}/schedule``; weekly availability goes to
    ``/users/time-intervals``.
    """

    def __init__(self, base_url: str, timeout: float = 30, session: requests.Session | None = None):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. ``http://localhost:3000/api``
            timeout: Request timeout in seconds
            session: Optional pre-configured requests session
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {"Content-Type": "application/json"}

    def create_scheduling(self, username: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Book a time slot with a user.

        Args:
            username: Identifier of the user being booked, used verbatim in the path
            payload: Body with ``name``, ``email``, ``observations`` and ``date``

        Returns:
            Decoded JSON response body, or an empty dict when there is none

        Raises:
            SchedulingAPIError: If the request fails or returns a non-2xx status
        """
        return self._post(f"/users/{username}/schedule", payload)

    def save_time_intervals(self, intervals: List[NormalizedInterval]) -> None:
        """Persist the weekly availability of the current user."""
        self._post(
            "/users/time-intervals",
            {"intervals": [interval.to_payload() for interval in intervals]},
        )

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.debug("POST %s", url)

        try:
            response = self.session.post(
                url,
                headers=self.headers,
                json=payload,
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise SchedulingAPIError(f"Request to {url} failed: {e}") from e

        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError:
            logger.warning("Non-JSON response from %s", url)
            return {}
