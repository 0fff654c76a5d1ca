"""
Mock scheduling API client for running without a backend.
"""

from typing import Any, Dict, List

from ..domain.exceptions import SchedulingAPIError
from ..domain.models import NormalizedInterval


class MockSchedulingClient:
    """
    Records requests in memory instead of sending them.

    Set ``fail_with`` to make every call raise ``SchedulingAPIError``.
    """

    def __init__(self, fail_with: str | None = None):
        self.fail_with = fail_with
        self.requests: List[Dict[str, Any]] = []

    def create_scheduling(self, username: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        self._record(f"/users/{username}/schedule", payload)
        return {}

    def save_time_intervals(self, intervals: List[NormalizedInterval]) -> None:
        self._record(
            "/users/time-intervals",
            {"intervals": [interval.to_payload() for interval in intervals]},
        )

    def _record(self, path: str, payload: Dict[str, Any]) -> None:
        self.requests.append({"method": "POST", "path": path, "json": payload})
        if self.fail_with:
            raise SchedulingAPIError(self.fail_with)
