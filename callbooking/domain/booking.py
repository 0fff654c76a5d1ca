"""
Validation of the booking confirmation form.
"""

from typing import Optional

from email_validator import EmailNotValidError, validate_email

from .exceptions import InvalidEmailError, NameTooShortError
from .models import ConfirmFormData
from .validation import collect_field_errors

MIN_NAME_LENGTH = 3


class BookingConfirmationValidator:
    """
    Checks the name, email and observations entered on the confirm step.

    Every field is checked so the form can show all problems at once.
    """

    def validate(self, name: str, email: str, observations: Optional[str] = None) -> ConfirmFormData:
        """
        Validate the confirmation form.

        Raises:
            FormValidationError: With ``NameTooShortError`` and/or
                ``InvalidEmailError`` failures keyed by ``name`` / ``email``
        """
        collect_field_errors([
            lambda: self._check_name(name),
            lambda: self._check_email(email),
        ])
        return ConfirmFormData(name=name, email=email, observations=observations)

    @staticmethod
    def _check_name(name: str) -> None:
        if len(name) < MIN_NAME_LENGTH:
            raise NameTooShortError("name")

    @staticmethod
    def _check_email(email: str) -> None:
        # Bare addresses only: no display names, no surrounding whitespace.
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError as exc:
            raise InvalidEmailError("email") from exc
