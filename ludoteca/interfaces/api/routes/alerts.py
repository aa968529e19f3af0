"""Routes exposing the alert policy."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ludoteca.application.use_cases.alerts import (
    cleanup_resolved_alerts as cleanup_resolved_alerts_uc,
    create_custom_alert as create_custom_alert_uc,
    delete_alert as delete_alert_uc,
    generate_overdue_alerts as generate_overdue_alerts_uc,
    generate_reminder_alerts as generate_reminder_alerts_uc,
    get_alerts_dashboard as get_alerts_dashboard_uc,
    get_alerts_summary_by_user as get_alerts_summary_by_user_uc,
    list_alerts_by_user as list_alerts_by_user_uc,
    list_unread_alerts as list_unread_alerts_uc,
    mark_alert_as_read as mark_alert_as_read_uc,
    mark_all_user_alerts_as_read as mark_all_user_alerts_as_read_uc,
)
from ludoteca.domain.entities import Alert, AlertSummary
from ludoteca.domain.errors import LibraryError, StorageError
from ludoteca.infrastructure.database import get_db
from ludoteca.interfaces.api.routes_helpers import http_exception_from
from ludoteca.interfaces.api.schemas import (
    AlertCountRead,
    AlertCreate,
    AlertDashboardRead,
    AlertRead,
    AlertSummaryRead,
)

router = APIRouter(prefix="/alerts", tags=["alerts"])


def _to_read_model(alert: Alert) -> AlertRead:
    return AlertRead.model_validate(alert)


def _summary_to_read_model(summary: AlertSummary) -> AlertSummaryRead:
    return AlertSummaryRead.model_validate(summary)


@router.get("/", response_model=list[AlertRead])
def list_unread_alerts(db: Session = Depends(get_db)):
    """Return every unread alert, newest first."""

    try:
        alerts = list_unread_alerts_uc(db)
    except StorageError as exc:
        raise http_exception_from(exc) from exc
    return [_to_read_model(alert) for alert in alerts]


@router.post("/", response_model=AlertRead, status_code=status.HTTP_201_CREATED)
def create_custom_alert(alert_in: AlertCreate, db: Session = Depends(get_db)):
    try:
        alert = create_custom_alert_uc(
            db,
            user_id=alert_in.user_id,
            game_id=alert_in.game_id,
            alert_type=alert_in.type,
            message=alert_in.message,
        )
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return _to_read_model(alert)


@router.get("/summary", response_model=list[AlertSummaryRead])
def read_alerts_summary(db: Session = Depends(get_db)):
    """Return unread alerts grouped by member."""

    try:
        summaries = get_alerts_summary_by_user_uc(db)
    except StorageError as exc:
        raise http_exception_from(exc) from exc
    return [_summary_to_read_model(summaries[user_id]) for user_id in sorted(summaries)]


@router.get("/dashboard", response_model=AlertDashboardRead)
def read_alerts_dashboard(db: Session = Depends(get_db)):
    try:
        dashboard = get_alerts_dashboard_uc(db)
    except StorageError as exc:
        raise http_exception_from(exc) from exc
    return AlertDashboardRead(
        total_alerts=dashboard.total_alerts,
        total_overdue=dashboard.total_overdue,
        total_reminders=dashboard.total_reminders,
        users_with_alerts=dashboard.users_with_alerts,
        user_summaries=[
            _summary_to_read_model(dashboard.user_summaries[user_id])
            for user_id in sorted(dashboard.user_summaries)
        ],
    )


@router.post("/generate-overdue", response_model=list[AlertRead])
def generate_overdue_alerts(db: Session = Depends(get_db)):
    """Run the overdue alert generator once and return the new alerts."""

    try:
        alerts = generate_overdue_alerts_uc(db)
    except StorageError as exc:
        raise http_exception_from(exc) from exc
    return [_to_read_model(alert) for alert in alerts]


@router.post("/generate-reminders", response_model=list[AlertRead])
def generate_reminder_alerts(db: Session = Depends(get_db)):
    try:
        alerts = generate_reminder_alerts_uc(db)
    except StorageError as exc:
        raise http_exception_from(exc) from exc
    return [_to_read_model(alert) for alert in alerts]


@router.post("/cleanup", response_model=AlertCountRead)
def cleanup_resolved_alerts(db: Session = Depends(get_db)):
    """Delete overdue and reminder alerts whose borrowing was returned."""

    try:
        deleted = cleanup_resolved_alerts_uc(db)
    except StorageError as exc:
        raise http_exception_from(exc) from exc
    return AlertCountRead(count=deleted)


@router.get("/user/{user_id}", response_model=list[AlertRead])
def list_user_alerts(
    user_id: int,
    unread_only: bool = False,
    db: Session = Depends(get_db),
):
    try:
        alerts = list_alerts_by_user_uc(db, user_id, unread_only=unread_only)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return [_to_read_model(alert) for alert in alerts]


@router.put("/user/{user_id}/read-all", response_model=AlertCountRead)
def mark_all_user_alerts_as_read(user_id: int, db: Session = Depends(get_db)):
    try:
        updated = mark_all_user_alerts_as_read_uc(db, user_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return AlertCountRead(count=updated)


@router.put("/{alert_id}/read", response_model=AlertRead)
def mark_alert_as_read(alert_id: int, db: Session = Depends(get_db)):
    try:
        alert = mark_alert_as_read_uc(db, alert_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return _to_read_model(alert)


@router.delete("/{alert_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_alert(alert_id: int, db: Session = Depends(get_db)) -> Response:
    try:
        delete_alert_uc(db, alert_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
