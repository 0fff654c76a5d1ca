"""
Domain layer - Form validation and normalization without external I/O.
"""

from .availability import WeeklyAvailabilityValidator
from .booking import BookingConfirmationValidator
from .models import BookingRequest, ConfirmFormData, NormalizedInterval, WeekdayInterval, WeeklyAvailability

__all__ = [
    "WeeklyAvailabilityValidator",
    "BookingConfirmationValidator",
    "BookingRequest",
    "ConfirmFormData",
    "NormalizedInterval",
    "WeekdayInterval",
    "WeeklyAvailability",
]
