"""Use case for updating member information."""

from dataclasses import replace

from sqlalchemy.orm import Session

from ludoteca.domain.entities import User
from ludoteca.domain.errors import ConflictError, NotFoundError
from ludoteca.infrastructure.database import unit_of_work
from ludoteca.infrastructure.repositories import UserRepository

from ..validators import ensure_positive_id
from .validators import ensure_valid_email, ensure_valid_name


def update_user(
    session: Session,
    *,
    user_id: int,
    name: str | None = None,
    email: str | None = None,
    is_active: bool | None = None,
) -> User:
    """Update the provided user with the new values."""

    ensure_positive_id(user_id, "user")

    with unit_of_work(session):
        repository = UserRepository(session)
        current_user = repository.get(user_id)
        if current_user is None:
            raise NotFoundError("user not found")

        new_email = current_user.email
        if email is not None:
            normalized_email = ensure_valid_email(email)
            if normalized_email != current_user.email:
                existing_with_email = repository.get_by_email(normalized_email)
                if existing_with_email and existing_with_email.id != user_id:
                    raise ConflictError(
                        f"user with email {normalized_email} already exists"
                    )
                new_email = normalized_email

        updated_user = replace(
            current_user,
            name=ensure_valid_name(name) if name is not None else current_user.name,
            email=new_email,
            is_active=is_active if is_active is not None else current_user.is_active,
        )
        return repository.update(updated_user)
