"""SQLAlchemy model for game borrowings."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, text
from sqlalchemy.orm import relationship

from ludoteca.infrastructure.database import Base

_OPEN_BORROWING = text("returned_at IS NULL")


class BorrowingModel(Base):
    """Database representation of one loan of a game to a member."""

    __tablename__ = "borrowing"
    __table_args__ = (
        # At most one open borrowing per game.
        Index(
            "ux_borrowing_open_game",
            "game_id",
            unique=True,
            sqlite_where=_OPEN_BORROWING,
            postgresql_where=_OPEN_BORROWING,
        ),
        Index("ix_borrowing_user_returned", "user_id", "returned_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    game_id = Column(Integer, ForeignKey("game.id"), nullable=False, index=True)
    borrowed_at = Column(DateTime, nullable=False)
    due_date = Column(DateTime, nullable=False, index=True)
    returned_at = Column(DateTime, nullable=True)
    is_overdue = Column(Boolean, nullable=False, default=False)

    user = relationship("UserModel", back_populates="borrowings")
    game = relationship("GameModel", back_populates="borrowings")


__all__ = ["BorrowingModel"]
