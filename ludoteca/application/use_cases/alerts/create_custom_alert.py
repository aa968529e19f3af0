"""Use case for alerts written by library staff."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from ludoteca.domain.entities import Alert, AlertType
from ludoteca.domain.errors import NotFoundError, ValidationError
from ludoteca.infrastructure.database import unit_of_work
from ludoteca.infrastructure.repositories import (
    AlertRepository,
    GameRepository,
    UserRepository,
)
from ludoteca.utils import now_in_app_timezone

from ..validators import ensure_positive_id

logger = logging.getLogger(__name__)

MESSAGE_MIN_LENGTH = 5
MESSAGE_MAX_LENGTH = 500


def _ensure_valid_message(message: str | None) -> str:
    normalized = (message or "").strip()
    if not normalized:
        raise ValidationError("alert message is required")
    if len(normalized) < MESSAGE_MIN_LENGTH:
        raise ValidationError(
            f"alert message must be at least {MESSAGE_MIN_LENGTH} characters long"
        )
    if len(normalized) > MESSAGE_MAX_LENGTH:
        raise ValidationError(
            f"alert message must be less than {MESSAGE_MAX_LENGTH} characters"
        )
    return normalized


def create_custom_alert(
    session: Session,
    *,
    user_id: int,
    game_id: int,
    alert_type: str | AlertType,
    message: str,
) -> Alert:
    """Insert an alert for ``user_id`` about ``game_id``.

    Duplicates are allowed: staff may send the same note more than once.
    """

    ensure_positive_id(user_id, "user")
    ensure_positive_id(game_id, "game")
    resolved_type = AlertType.from_wire(alert_type)
    normalized_message = _ensure_valid_message(message)

    with unit_of_work(session):
        if UserRepository(session).get(user_id) is None:
            raise NotFoundError("user not found")
        if GameRepository(session).get(game_id) is None:
            raise NotFoundError("game not found")

        alert = AlertRepository(session).create(
            Alert(
                id=None,
                user_id=user_id,
                game_id=game_id,
                type=resolved_type,
                message=normalized_message,
                created_at=now_in_app_timezone(),
                is_read=False,
            )
        )

    logger.info(
        "Created %s alert %s for user %s", alert.type.value, alert.id, user_id
    )
    return alert
