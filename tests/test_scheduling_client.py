"""
Tests for the scheduling API client.
"""

import json

import pytest
import requests

from callbooking.adapters.scheduling_client import SchedulingClient
from callbooking.domain.exceptions import SchedulingAPIError
from callbooking.domain.models import NormalizedInterval


class FakeResponse:
    def __init__(self, status_code=201, body=b""):
        self.status_code = status_code
        self.content = body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def json(self):
        return json.loads(self.content)


class FakeSession:
    """Records POST calls instead of sending them."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def post(self, url, headers=None, json=None, timeout=None):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if self.error:
            raise self.error
        return self.response


def test_create_scheduling_posts_to_user_path():
    """The username is substituted into the path verbatim."""
    session = FakeSession()
    client = SchedulingClient("http://api.test/api/", timeout=5, session=session)
    payload = {"name": "John", "email": "a@b.com", "observations": None, "date": "2024-03-15T17:00:00Z"}

    result = client.create_scheduling("jane-doe", payload)

    assert result == {}
    assert session.calls == [
        {"url": "http://api.test/api/users/jane-doe/schedule", "json": payload, "timeout": 5}
    ]


def test_create_scheduling_returns_json_body():
    session = FakeSession(response=FakeResponse(body=b'{"id": "abc"}'))
    client = SchedulingClient("http://api.test", session=session)

    assert client.create_scheduling("jane", {}) == {"id": "abc"}


def test_http_error_raises_scheduling_api_error():
    session = FakeSession(response=FakeResponse(status_code=500))
    client = SchedulingClient("http://api.test", session=session)

    with pytest.raises(SchedulingAPIError, match="500"):
        client.create_scheduling("jane", {})


def test_connection_error_raises_scheduling_api_error():
    session = FakeSession(error=requests.exceptions.ConnectionError("refused"))
    client = SchedulingClient("http://api.test", session=session)

    with pytest.raises(SchedulingAPIError, match="refused"):
        client.create_scheduling("jane", {})


def test_save_time_intervals():
    session = FakeSession()
    client = SchedulingClient("http://api.test", session=session)

    client.save_time_intervals([
        NormalizedInterval(week_day=1, start_time_in_minutes=480, end_time_in_minutes=1080)
    ])

    assert session.calls[0]["url"] == "http://api.test/users/time-intervals"
    assert session.calls[0]["json"] == {
        "intervals": [{"weekDay": 1, "startTimeInMinutes": 480, "endTimeInMinutes": 1080}]
    }
