"""One complete alert sweep, as run by the scheduler and the CLI script."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from ludoteca.config import Settings, get_settings
from ludoteca.utils import ensure_app_timezone, now_in_app_timezone

from .cleanup_resolved_alerts import cleanup_resolved_alerts
from .generate_alerts import generate_overdue_alerts, generate_reminder_alerts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlertJobReport:
    overdue_created: int = 0
    reminders_created: int = 0
    alerts_cleaned: int = 0


def run_alert_jobs(
    session: Session,
    settings: Settings | None = None,
    *,
    now: datetime | None = None,
) -> AlertJobReport:
    """Generate overdue and reminder alerts, then drop the resolved ones.

    Generators disabled in ``settings`` are skipped; cleanup always runs.
    """

    settings = settings or get_settings()
    now = ensure_app_timezone(now) or now_in_app_timezone()

    overdue_created = 0
    if settings.enable_overdue_alerts:
        overdue_created = len(generate_overdue_alerts(session, now=now))

    reminders_created = 0
    if settings.enable_reminder_alerts:
        reminders_created = len(
            generate_reminder_alerts(
                session, now=now, window_days=settings.reminder_window_days
            )
        )

    report = AlertJobReport(
        overdue_created=overdue_created,
        reminders_created=reminders_created,
        alerts_cleaned=cleanup_resolved_alerts(session),
    )
    logger.info(
        "Alert jobs finished: %s overdue, %s reminder(s), %s cleaned",
        report.overdue_created,
        report.reminders_created,
        report.alerts_cleaned,
    )
    return report
