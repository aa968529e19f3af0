"""Use case for registering library members."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ludoteca.domain.entities import User
from ludoteca.domain.errors import ConflictError
from ludoteca.infrastructure.database import unit_of_work
from ludoteca.infrastructure.repositories import UserRepository
from ludoteca.utils import ensure_app_timezone, now_in_app_timezone

from .validators import ensure_valid_email, ensure_valid_name

logger = logging.getLogger(__name__)


def register_user(
    session: Session,
    *,
    name: str,
    email: str,
    now: datetime | None = None,
) -> User:
    """Create a new member ensuring unique email addresses."""

    normalized_name = ensure_valid_name(name)
    normalized_email = ensure_valid_email(email)
    registered_at = ensure_app_timezone(now) or now_in_app_timezone()

    with unit_of_work(session):
        repository = UserRepository(session)
        if repository.get_by_email(normalized_email):
            raise ConflictError(f"user with email {normalized_email} already exists")

        try:
            user = repository.create(
                User(
                    id=None,
                    name=normalized_name,
                    email=normalized_email,
                    registered_at=registered_at,
                    is_active=True,
                )
            )
        except IntegrityError as exc:
            raise ConflictError(
                f"user with email {normalized_email} already exists"
            ) from exc

    logger.info("Registered user %s <%s>", user.id, user.email)
    return user
