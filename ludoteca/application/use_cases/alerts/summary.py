"""Reporting views over unread alerts."""

from sqlalchemy.orm import Session

from ludoteca.domain.entities import AlertDashboard, AlertSummary
from ludoteca.infrastructure.database import storage_guard
from ludoteca.infrastructure.repositories import AlertRepository


def get_alerts_summary_by_user(session: Session) -> dict[int, AlertSummary]:
    """Group the unread alerts by member."""

    with storage_guard(session):
        unread = AlertRepository(session).list_unread()

    summaries: dict[int, AlertSummary] = {}
    for alert in unread:
        summary = summaries.setdefault(alert.user_id, AlertSummary(user_id=alert.user_id))
        summary.add(alert)
    return summaries


def get_alerts_dashboard(session: Session) -> AlertDashboard:
    """Return library wide totals computed from the per-member summaries."""

    summaries = get_alerts_summary_by_user(session)
    return AlertDashboard(
        total_alerts=sum(summary.total_alerts for summary in summaries.values()),
        total_overdue=sum(summary.overdue_count for summary in summaries.values()),
        total_reminders=sum(summary.reminder_count for summary in summaries.values()),
        users_with_alerts=len(summaries),
        user_summaries=summaries,
    )


__all__ = ["get_alerts_dashboard", "get_alerts_summary_by_user"]
