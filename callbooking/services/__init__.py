"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .confirm_step import BookingClientProtocol, ConfirmStep
from .time_intervals import IntervalsSink, LoggingIntervalsSink, TimeIntervalsService

__all__ = [
    "BookingClientProtocol",
    "ConfirmStep",
    "IntervalsSink",
    "LoggingIntervalsSink",
    "TimeIntervalsService",
]
