"""Domain entity representing a game lent to a member."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass
class Borrowing:
    """A single loan of one game to one user.

    ``is_overdue`` is a cached flag written by operators or batch jobs. The
    authoritative answer always comes from :meth:`is_currently_overdue`.
    """

    id: int | None
    user_id: int
    game_id: int
    borrowed_at: datetime
    due_date: datetime
    returned_at: datetime | None = None
    is_overdue: bool = False

    @property
    def is_returned(self) -> bool:
        """Return ``True`` once the borrowing reached its terminal state."""

        return self.returned_at is not None

    def is_currently_overdue(self, now: datetime) -> bool:
        """Return ``True`` when the game is still out and the due date passed."""

        return self.returned_at is None and now > self.due_date

    def days_overdue(self, now: datetime) -> int:
        """Return the number of whole days past the due date (0 when not overdue)."""

        if not self.is_currently_overdue(now):
            return 0
        return int((now - self.due_date).total_seconds() // SECONDS_PER_DAY)

    def days_until_due(self, now: datetime) -> int:
        """Return the number of whole days left before the due date."""

        remaining = self.due_date - now
        if remaining <= timedelta(0):
            return 0
        return int(remaining.total_seconds() // SECONDS_PER_DAY)


__all__ = ["Borrowing"]
