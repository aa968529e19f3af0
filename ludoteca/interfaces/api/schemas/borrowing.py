"""Borrowing schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BorrowingCreate(BaseModel):
    user_id: int
    game_id: int
    due_date: datetime | None = Field(
        default=None,
        description="Defaults to the configured loan length when omitted",
    )


class BorrowingExtend(BaseModel):
    new_due_date: datetime


class BorrowingRead(BaseModel):
    """A borrowing as stored, plus the overdue state recomputed at read time."""

    id: int
    user_id: int
    game_id: int
    borrowed_at: datetime
    due_date: datetime
    returned_at: datetime | None = None
    is_overdue: bool
    currently_overdue: bool = False
    days_overdue: int = 0

    model_config = ConfigDict(from_attributes=True)


class OverdueUpdateRead(BaseModel):
    updated: int


__all__ = ["BorrowingCreate", "BorrowingExtend", "BorrowingRead", "OverdueUpdateRead"]
