"""
Smart Fitness Planner API - User ORM Model.

User model holding the fitness profile and relationships to plans and weight entries.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Float, DateTime
from sqlalchemy.orm import relationship

from app.database import Base


class User(Base):
    """
    User model representing a fitness profile.

    The app assumes one "current" profile: the latest created one wins when no
    id is supplied.

    Attributes:
        id: Auto-increment identifier.
        name: Display name.
        age: Age in years (10-100).
        gender: male/female/other, optional.
        height: Height in cm.
        weight: Current weight in kg.
        goal: weight_loss/muscle_gain/maintenance.
        created_at: Profile creation timestamp.
        updated_at: Last profile update timestamp.
    """

    __tablename__ = "users"

    # Primary key
    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True
    )

    # Profile
    name = Column(
        String(255),
        nullable=False
    )
    age = Column(
        Integer,
        nullable=False
    )
    gender = Column(
        String(10),
        nullable=True
    )  # male, female, other
    height = Column(
        Float,
        nullable=False
    )  # cm
    weight = Column(
        Float,
        nullable=False
    )  # kg
    goal = Column(
        String(20),
        nullable=False
    )  # weight_loss, muscle_gain, maintenance

    # Timestamps
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

    # Relationships
    plans = relationship(
        "WorkoutMealPlan",
        back_populates="user",
        cascade="all, delete-orphan"
    )
    weight_entries = relationship(
        "WeightEntry",
        back_populates="user",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, name={self.name}, goal={self.goal})>"
