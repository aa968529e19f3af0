"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    name: str = Field(..., max_length=100)
    email: EmailStr


class UserUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=100)
    email: EmailStr | None = None
    is_active: bool | None = None

    model_config = ConfigDict(extra="forbid")


class UserRead(BaseModel):
    id: int
    name: str
    email: EmailStr
    registered_at: datetime
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class EligibilityRead(BaseModel):
    """Whether a member may start a new borrowing."""

    user_id: int
    can_borrow: bool
    reason: str | None = None


__all__ = ["EligibilityRead", "UserCreate", "UserRead", "UserUpdate"]
