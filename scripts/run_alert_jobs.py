"""Run one alert sweep (overdue, reminders, cleanup) from the command line."""

from __future__ import annotations

import argparse

from ludoteca.application.use_cases.alerts import run_alert_jobs
from ludoteca.application.use_cases.borrowings import update_overdue_status
from ludoteca.config import get_settings
from ludoteca.domain.errors import StorageError
from ludoteca.infrastructure.database import SessionLocal, initialize_database
from ludoteca.infrastructure.log_config import configure_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate overdue and reminder alerts and clean up resolved ones.",
    )
    parser.add_argument(
        "--update-overdue",
        action="store_true",
        help="Also refresh the stored overdue flag of every open borrowing.",
    )
    return parser.parse_args()


def main() -> None:
    """Run the sweep once using the configured database."""

    args = parse_args()
    settings = get_settings()
    configure_logging(settings)
    initialize_database()

    session = SessionLocal()
    try:
        flagged = update_overdue_status(session) if args.update_overdue else None
        report = run_alert_jobs(session, settings)
    except StorageError as exc:
        raise SystemExit(f"Alert sweep failed: {exc}") from exc
    finally:
        session.close()

    print(
        "Alert sweep finished:\n"
        f"  Overdue alerts created: {report.overdue_created}\n"
        f"  Reminder alerts created: {report.reminders_created}\n"
        f"  Resolved alerts removed: {report.alerts_cleaned}"
    )
    if flagged is not None:
        print(f"  Overdue flags changed: {flagged}")


if __name__ == "__main__":
    main()
