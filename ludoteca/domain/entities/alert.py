"""Domain entities describing member alerts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ludoteca.domain.errors import ValidationError


class AlertType(str, Enum):
    """Kinds of alert a member can receive."""

    OVERDUE = "overdue"
    REMINDER = "reminder"
    CUSTOM = "custom"

    @classmethod
    def from_wire(cls, value: "str | AlertType") -> "AlertType":
        """Return the member matching ``value`` ignoring case and padding."""

        if isinstance(value, cls):
            return value
        normalized = str(value or "").strip().lower()
        if not normalized:
            raise ValidationError("alert type is required")
        try:
            return cls(normalized)
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise ValidationError(
                f"invalid alert type: must be one of {allowed}"
            ) from None

    @property
    def is_generated(self) -> bool:
        """Return ``True`` for types derived automatically from borrowings."""

        return self in (AlertType.OVERDUE, AlertType.REMINDER)


@dataclass
class Alert:
    """Notification addressed to a member about a specific game."""

    id: int | None
    user_id: int
    game_id: int
    type: AlertType
    message: str
    created_at: datetime | None = None
    is_read: bool = False


@dataclass
class AlertSummary:
    """Unread alerts of one member grouped for reporting."""

    user_id: int
    total_alerts: int = 0
    overdue_count: int = 0
    reminder_count: int = 0
    alerts: list[Alert] = field(default_factory=list)

    def add(self, alert: Alert) -> None:
        self.alerts.append(alert)
        self.total_alerts += 1
        if alert.type is AlertType.OVERDUE:
            self.overdue_count += 1
        elif alert.type is AlertType.REMINDER:
            self.reminder_count += 1


@dataclass
class AlertDashboard:
    """Totals computed over every member's alert summary."""

    total_alerts: int
    total_overdue: int
    total_reminders: int
    users_with_alerts: int
    user_summaries: dict[int, AlertSummary] = field(default_factory=dict)


__all__ = ["Alert", "AlertDashboard", "AlertSummary", "AlertType"]
