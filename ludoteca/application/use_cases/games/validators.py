"""Validation helpers for game use cases."""

from ludoteca.domain.errors import ValidationError

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
CATEGORY_MAX_LENGTH = 100


def ensure_valid_game_name(name: str) -> str:
    normalized = (name or "").strip()
    if not normalized:
        raise ValidationError("game name is required")
    if len(normalized) < NAME_MIN_LENGTH:
        raise ValidationError(
            f"game name must be at least {NAME_MIN_LENGTH} characters long"
        )
    if len(normalized) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"game name must be less than {NAME_MAX_LENGTH} characters"
        )
    return normalized


def ensure_valid_description(description: str | None) -> str:
    normalized = (description or "").strip()
    if len(normalized) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"game description must be less than {DESCRIPTION_MAX_LENGTH} characters"
        )
    return normalized


def ensure_valid_category(category: str | None) -> str:
    normalized = (category or "").strip()
    if len(normalized) > CATEGORY_MAX_LENGTH:
        raise ValidationError(
            f"game category must be less than {CATEGORY_MAX_LENGTH} characters"
        )
    return normalized


__all__ = [
    "ensure_valid_category",
    "ensure_valid_description",
    "ensure_valid_game_name",
]
