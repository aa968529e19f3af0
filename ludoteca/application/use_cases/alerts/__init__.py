"""Use cases implementing the alert policy."""

from .cleanup_resolved_alerts import cleanup_resolved_alerts
from .create_custom_alert import create_custom_alert
from .delete_alert import delete_alert
from .generate_alerts import generate_overdue_alerts, generate_reminder_alerts
from .list_alerts import get_alert, list_alerts, list_alerts_by_user, list_unread_alerts
from .mark_alert_as_read import mark_alert_as_read, mark_all_user_alerts_as_read
from .run_alert_jobs import AlertJobReport, run_alert_jobs
from .summary import get_alerts_dashboard, get_alerts_summary_by_user

__all__ = [
    "AlertJobReport",
    "cleanup_resolved_alerts",
    "create_custom_alert",
    "delete_alert",
    "generate_overdue_alerts",
    "generate_reminder_alerts",
    "get_alert",
    "get_alerts_dashboard",
    "get_alerts_summary_by_user",
    "list_alerts",
    "list_alerts_by_user",
    "list_unread_alerts",
    "mark_alert_as_read",
    "mark_all_user_alerts_as_read",
    "run_alert_jobs",
]
