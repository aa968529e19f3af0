"""Domain entity representing a board game in the catalog."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ludoteca.domain.errors import ValidationError


class GameCondition(str, Enum):
    """Physical condition of a catalogued game."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def from_wire(cls, value: "str | GameCondition") -> "GameCondition":
        """Return the member matching ``value`` ignoring case and padding."""

        if isinstance(value, cls):
            return value
        normalized = str(value or "").strip().lower()
        if not normalized:
            raise ValidationError("game condition is required")
        try:
            return cls(normalized)
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise ValidationError(
                f"invalid game condition: must be one of {allowed}"
            ) from None


@dataclass
class Game:
    """Catalog entry for a board game.

    ``is_available`` mirrors the borrowing state: it is only flipped by the
    borrowing use cases, never edited on its own.
    """

    id: int | None
    name: str
    description: str
    category: str
    condition: GameCondition
    entry_date: datetime | None
    is_available: bool = True


__all__ = ["Game", "GameCondition"]
