"""Domain entities exposed by the application."""

from .alert import Alert, AlertDashboard, AlertSummary, AlertType
from .borrowing import Borrowing
from .game import Game, GameCondition
from .user import User

__all__ = [
    "Alert",
    "AlertDashboard",
    "AlertSummary",
    "AlertType",
    "Borrowing",
    "Game",
    "GameCondition",
    "User",
]
