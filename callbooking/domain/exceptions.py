"""
Domain-specific exception hierarchy for the call booking application.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Type


class SchedulingError(Exception):
    """Base class for all application-level errors."""


class FieldValidationError(SchedulingError):
    """
    A single failed validation rule, tagged with the field path it belongs to.

    Subclasses fix the user-facing message; the path says where a form
    should display it.
    """

    default_message = "Invalid value"

    def __init__(self, path: str, message: str | None = None):
        self.path = path
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptySelectionError(FieldValidationError):
    default_message = "You must select at least one day of the week"


class MinimumDurationError(FieldValidationError):
    default_message = "End time must be at least 1 hour after start time"

    def __init__(self, path: str, week_days: Sequence[int] = (), message: str | None = None):
        super().__init__(path, message)
        self.week_days = list(week_days)


class NameTooShortError(FieldValidationError):
    default_message = "Name must have at least 3 characters"


class InvalidEmailError(FieldValidationError):
    default_message = "Enter a valid email"


class FormValidationError(SchedulingError):
    """Raised when a form submission fails one or more validation rules."""

    def __init__(self, failures: Iterable[FieldValidationError], extra_errors: Dict[str, str] | None = None):
        self.failures: List[FieldValidationError] = list(failures)
        self.errors: Dict[str, str] = {failure.path: failure.message for failure in self.failures}
        for path, message in (extra_errors or {}).items():
            self.errors.setdefault(path, message)
        super().__init__("; ".join(failure.message for failure in self.failures))

    def has(self, error_type: Type[FieldValidationError]) -> bool:
        """Check whether any failure is of the given type."""
        return any(isinstance(failure, error_type) for failure in self.failures)


class SchedulingAPIError(SchedulingError):
    """Raised when the remote scheduling API cannot be reached or rejects a request."""


class SubmissionInProgressError(SchedulingError):
    """Raised when a form is submitted again while a submission is still pending."""
