"""
Human-readable date and weekday labels.
"""

from datetime import datetime
from typing import List

import pendulum

DEFAULT_LOCALE = "pt-br"
DATE_FORMAT = "DD [de] MMMM [de] YYYY"
TIME_FORMAT = "HH:mm[h]"


def describe_date(scheduling_date: datetime, locale: str = DEFAULT_LOCALE, timezone: str | None = None) -> str:
    """Format a date like ``15 de março de 2024``."""
    return _to_pendulum(scheduling_date, timezone).format(DATE_FORMAT, locale=locale)


def describe_time(scheduling_date: datetime, locale: str = DEFAULT_LOCALE, timezone: str | None = None) -> str:
    """Format a time of day like ``14:00h``."""
    return _to_pendulum(scheduling_date, timezone).format(TIME_FORMAT, locale=locale)


def get_week_days(locale: str = DEFAULT_LOCALE) -> List[str]:
    """
    Return capitalized weekday names indexed by week day (0=Sunday).
    """
    sunday = pendulum.datetime(2023, 1, 1)
    names = [sunday.add(days=offset).format("dddd", locale=locale) for offset in range(7)]
    return [name[:1].upper() + name[1:] for name in names]


def _to_pendulum(value: datetime, timezone: str | None):
    dt = pendulum.instance(value)
    if timezone:
        dt = dt.in_timezone(timezone)
    return dt
