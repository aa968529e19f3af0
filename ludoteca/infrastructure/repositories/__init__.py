"""Repository implementations for infrastructure layer."""

from .alert_repository import AlertRepository
from .borrowing_repository import BorrowingRepository
from .game_repository import GameRepository
from .user_repository import UserRepository

__all__ = [
    "AlertRepository",
    "BorrowingRepository",
    "GameRepository",
    "UserRepository",
]
