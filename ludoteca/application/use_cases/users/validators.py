"""Common validation helpers for user use cases."""

import re

from ludoteca.domain.errors import ValidationError

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def ensure_valid_name(name: str) -> str:
    """Return the stripped member name or raise ``ValidationError``."""

    normalized = (name or "").strip()
    if not normalized:
        raise ValidationError("name is required")
    if len(normalized) < NAME_MIN_LENGTH:
        raise ValidationError(
            f"name must be at least {NAME_MIN_LENGTH} characters long"
        )
    if len(normalized) > NAME_MAX_LENGTH:
        raise ValidationError(f"name must be less than {NAME_MAX_LENGTH} characters")
    return normalized


def ensure_valid_email(email: str) -> str:
    """Return a normalized (lower-cased) email address or raise ``ValidationError``."""

    normalized = (email or "").strip()
    if not normalized:
        raise ValidationError("email is required")
    if len(normalized) > EMAIL_MAX_LENGTH:
        raise ValidationError(f"email must be less than {EMAIL_MAX_LENGTH} characters")
    if not _EMAIL_PATTERN.match(normalized):
        raise ValidationError("invalid email format")
    return normalized.lower()


__all__ = ["ensure_valid_email", "ensure_valid_name"]
