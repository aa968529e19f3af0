"""SQLAlchemy model for the game catalog."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from ludoteca.infrastructure.database import Base
from ludoteca.utils import now_in_app_naive_datetime


class GameModel(Base):
    """Database representation of a board game."""

    __tablename__ = "game"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    category = Column(String(100), nullable=False, default="")
    entry_date = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    condition = Column(String(20), nullable=False)
    is_available = Column(Boolean, nullable=False, default=True, index=True)

    borrowings = relationship("BorrowingModel", back_populates="game", lazy="select")


__all__ = ["GameModel"]
