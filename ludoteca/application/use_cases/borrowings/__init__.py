"""Use cases implementing the borrowing lifecycle."""

from .borrow_game import borrow_game
from .eligibility import Eligibility, can_user_borrow, ensure_user_can_borrow
from .extend_due_date import extend_due_date
from .get_borrowing import get_borrowing
from .list_borrowings import (
    list_active_borrowings_by_user,
    list_borrowings,
    list_borrowings_by_game,
    list_borrowings_due_soon,
    list_overdue_borrowings,
)
from .return_game import return_game
from .update_overdue_status import update_overdue_status

__all__ = [
    "Eligibility",
    "borrow_game",
    "can_user_borrow",
    "ensure_user_can_borrow",
    "extend_due_date",
    "get_borrowing",
    "list_active_borrowings_by_user",
    "list_borrowings",
    "list_borrowings_by_game",
    "list_borrowings_due_soon",
    "list_overdue_borrowings",
    "return_game",
    "update_overdue_status",
]
