"""SQLAlchemy model for persisted alerts."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Text

from ludoteca.infrastructure.database import Base
from ludoteca.utils import now_in_app_naive_datetime


class AlertModel(Base):
    """Database representation for member alerts."""

    __tablename__ = "alert"
    __table_args__ = (
        Index("ix_alert_user_game_type", "user_id", "game_id", "type"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    game_id = Column(
        Integer, ForeignKey("game.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type = Column(String(20), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    is_read = Column(Boolean, nullable=False, default=False, index=True)


__all__ = ["AlertModel"]
