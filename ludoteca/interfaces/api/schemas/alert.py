"""Alert schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ludoteca.domain.entities import AlertType


class AlertCreate(BaseModel):
    user_id: int
    game_id: int
    type: str = Field(default=AlertType.CUSTOM.value)
    message: str


class AlertRead(BaseModel):
    id: int
    user_id: int
    game_id: int
    type: AlertType
    message: str
    created_at: datetime
    is_read: bool

    model_config = ConfigDict(from_attributes=True)


class AlertSummaryRead(BaseModel):
    user_id: int
    total_alerts: int
    overdue_count: int
    reminder_count: int
    alerts: list[AlertRead]

    model_config = ConfigDict(from_attributes=True)


class AlertDashboardRead(BaseModel):
    total_alerts: int
    total_overdue: int
    total_reminders: int
    users_with_alerts: int
    user_summaries: list[AlertSummaryRead]


class AlertCountRead(BaseModel):
    """Number of alerts touched by a bulk operation."""

    count: int


__all__ = [
    "AlertCountRead",
    "AlertCreate",
    "AlertDashboardRead",
    "AlertRead",
    "AlertSummaryRead",
]
