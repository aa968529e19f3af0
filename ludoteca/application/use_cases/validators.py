"""Argument checks shared by every use case."""

from ludoteca.domain.errors import InvalidArgumentError


def ensure_positive_id(value: int, label: str) -> int:
    """Return ``value`` or raise when it is not a positive integer identifier."""

    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(f"invalid {label} ID: {value}")
    return value


__all__ = ["ensure_positive_id"]
