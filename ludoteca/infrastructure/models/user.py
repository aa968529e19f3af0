"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from ludoteca.infrastructure.database import Base
from ludoteca.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of a library member."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    registered_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    is_active = Column(Boolean, nullable=False, default=True)

    borrowings = relationship("BorrowingModel", back_populates="user", lazy="select")


__all__ = ["UserModel"]
