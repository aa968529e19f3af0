"""ORM models used by the application infrastructure."""

from .alert import AlertModel
from .borrowing import BorrowingModel
from .game import GameModel
from .user import UserModel

__all__ = [
    "AlertModel",
    "BorrowingModel",
    "GameModel",
    "UserModel",
]
