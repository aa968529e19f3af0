"""Date rules shared by the borrowing use cases."""

from datetime import datetime, timedelta

from ludoteca.config import MAX_LOOKAHEAD_DAYS
from ludoteca.domain.errors import ValidationError


def ensure_due_date_in_future(due_date: datetime, now: datetime) -> None:
    if due_date <= now:
        raise ValidationError("due date must be in the future")


def ensure_within_loan_cap(
    due_date: datetime, borrowed_at: datetime, max_loan_days: int
) -> None:
    """Reject due dates further than ``max_loan_days`` from the borrow date."""

    if due_date - borrowed_at > timedelta(days=max_loan_days):
        raise ValidationError(
            f"due date cannot be more than {max_loan_days} days from the borrow date"
        )


def ensure_lookahead_days(days: int) -> None:
    """Accept look-ahead windows from zero up to ``MAX_LOOKAHEAD_DAYS``."""

    if days < 0:
        raise ValidationError("days ahead must be zero or positive")
    if days > MAX_LOOKAHEAD_DAYS:
        raise ValidationError(f"days ahead cannot exceed {MAX_LOOKAHEAD_DAYS}")


__all__ = [
    "ensure_due_date_in_future",
    "ensure_lookahead_days",
    "ensure_within_loan_cap",
]
