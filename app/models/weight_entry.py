"""
Smart Fitness Planner API - WeightEntry ORM Model.

Body weight measurements, at most one per user per calendar date.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, Float, Date, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from app.database import Base


class WeightEntry(Base):
    """
    WeightEntry model for weight tracking.

    Attributes:
        id: Auto-increment identifier.
        user_id: Foreign key to User.
        weight: Measured weight in kg.
        recorded_date: Measurement date; unique per user (upsert key).
        notes: Optional free text.
    """

    __tablename__ = "weight_tracking"
    __table_args__ = (
        UniqueConstraint("user_id", "recorded_date", name="uq_weight_tracking_user_date"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    weight = Column(Float, nullable=False)
    recorded_date = Column(Date, nullable=False)
    notes = Column(Text, nullable=True)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc)
    )

    user = relationship("User", back_populates="weight_entries")

    def __repr__(self) -> str:
        return f"<WeightEntry(user_id={self.user_id}, date={self.recorded_date}, weight={self.weight})>"
