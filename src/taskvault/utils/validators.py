"""Input checks applied by the CLI before calling the stores.

The stores only reject empty values and unparsable deadlines; the stricter
rules for interactive input (email shape, password length, no past
deadlines) live here.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from taskvault.exceptions import ValidationError
from taskvault.utils.dates import is_past, parse_deadline

MIN_PASSWORD_LENGTH = 6

_EMAIL = TypeAdapter(EmailStr)


def validate_email(email: str) -> str:
    """Return the email if it looks like an address, else raise ValidationError."""
    try:
        _EMAIL.validate_python(email)
    except PydanticValidationError as e:
        raise ValidationError("Please enter a valid email address") from e
    return email


def validate_password(password: str) -> str:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    return password


def validate_future_deadline(value: str | datetime, now: datetime | None = None) -> datetime:
    """Parse a deadline and refuse points in the past."""
    deadline = parse_deadline(value)
    if is_past(deadline, now):
        raise ValidationError("Deadline cannot be in the past")
    return deadline
