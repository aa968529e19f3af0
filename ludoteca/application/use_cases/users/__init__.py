"""Use cases for managing members."""

from .delete_user import delete_user
from .get_user import get_user
from .list_user_borrowings import list_user_borrowings
from .list_users import list_users
from .register_user import register_user
from .update_user import update_user

__all__ = [
    "delete_user",
    "get_user",
    "list_user_borrowings",
    "list_users",
    "register_user",
    "update_user",
]
