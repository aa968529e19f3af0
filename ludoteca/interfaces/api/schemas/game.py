"""Game catalog schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ludoteca.domain.entities import GameCondition

from .borrowing import BorrowingRead


class GameCreate(BaseModel):
    name: str = Field(..., max_length=200)
    description: str = Field(default="", max_length=1000)
    category: str = Field(default="", max_length=100)
    condition: str = Field(..., description="excellent, good, fair or poor")


class GameUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    category: str | None = Field(default=None, max_length=100)
    condition: str | None = None

    model_config = ConfigDict(extra="forbid")


class GameRead(BaseModel):
    id: int
    name: str
    description: str
    category: str
    condition: GameCondition
    entry_date: datetime
    is_available: bool

    model_config = ConfigDict(from_attributes=True)


class GameAvailabilityRead(BaseModel):
    game_id: int
    is_available: bool
    current_borrowing: BorrowingRead | None = None


__all__ = ["GameAvailabilityRead", "GameCreate", "GameRead", "GameUpdate"]
