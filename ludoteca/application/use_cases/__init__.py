"""Aggregate application use cases."""

from .alerts import (
    cleanup_resolved_alerts,
    create_custom_alert,
    generate_overdue_alerts,
    generate_reminder_alerts,
    run_alert_jobs,
)
from .borrowings import borrow_game, can_user_borrow, extend_due_date, return_game
from .games import add_game
from .users import register_user

__all__ = [
    "add_game",
    "borrow_game",
    "can_user_borrow",
    "cleanup_resolved_alerts",
    "create_custom_alert",
    "extend_due_date",
    "generate_overdue_alerts",
    "generate_reminder_alerts",
    "register_user",
    "return_game",
    "run_alert_jobs",
]
