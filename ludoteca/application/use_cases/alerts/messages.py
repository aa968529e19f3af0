"""Message templates for automatically generated alerts."""

from datetime import datetime

_DEADLINE_FORMAT = "%Y-%m-%d %H:%M"


def _deadline(due_date: datetime) -> str:
    return due_date.strftime(_DEADLINE_FORMAT)


def overdue_message(game_name: str, due_date: datetime, days_overdue: int) -> str:
    if days_overdue < 1:
        return (
            f"Game '{game_name}' was due on {_deadline(due_date)} and is now overdue. "
            "Please return it as soon as possible."
        )
    return (
        f"Game '{game_name}' is overdue by {days_overdue} day(s) "
        f"(due {_deadline(due_date)}). Please return it as soon as possible."
    )


def reminder_message(game_name: str, due_date: datetime, days_until_due: int) -> str:
    if days_until_due < 1:
        return (
            f"Game '{game_name}' is due today ({_deadline(due_date)}). "
            "Please return it by the end of the day."
        )
    return (
        f"Game '{game_name}' is due in {days_until_due} day(s) "
        f"({_deadline(due_date)}). Please plan to return it soon."
    )


__all__ = ["overdue_message", "reminder_message"]
