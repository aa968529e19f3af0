"""Domain entity representing a library member."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Core attributes describing a registered member."""

    id: int | None
    name: str
    email: str
    registered_at: datetime | None
    is_active: bool = True


__all__ = ["User"]
