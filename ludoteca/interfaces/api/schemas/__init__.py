from .alert import (
    AlertCountRead,
    AlertCreate,
    AlertDashboardRead,
    AlertRead,
    AlertSummaryRead,
)
from .borrowing import BorrowingCreate, BorrowingExtend, BorrowingRead, OverdueUpdateRead
from .game import GameAvailabilityRead, GameCreate, GameRead, GameUpdate
from .user import EligibilityRead, UserCreate, UserRead, UserUpdate

__all__ = [
    "AlertCountRead",
    "AlertCreate",
    "AlertDashboardRead",
    "AlertRead",
    "AlertSummaryRead",
    "BorrowingCreate",
    "BorrowingExtend",
    "BorrowingRead",
    "EligibilityRead",
    "GameAvailabilityRead",
    "GameCreate",
    "GameRead",
    "GameUpdate",
    "OverdueUpdateRead",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
