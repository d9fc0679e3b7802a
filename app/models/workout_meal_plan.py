"""
Smart Fitness Planner API - WorkoutMealPlan ORM Model.

One row per (user, weekday): the day's exercises, meals and completion state.
The three structured fields are stored as JSON text and decoded leniently.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import relationship

from app.database import Base
from app.enums import MealType

logger = logging.getLogger(__name__)


def empty_completed_status() -> Dict[str, list]:
    return {"exercises": [], "meals": []}


def safe_json_loads(raw: Optional[str], default: Any, field: str = "json") -> Any:
    """
    Decode a stored JSON column, degrading to ``default`` when it is missing or malformed.

    Args:
        raw: Stored text (or an already-decoded value).
        default: Value returned when ``raw`` is empty or not valid JSON.
        field: Column name, used in the warning log.

    Returns:
        Any: The decoded value or ``default``.
    """
    if raw is None or raw == "":
        return default
    if not isinstance(raw, (str, bytes)):
        return raw
    try:
        return json.loads(raw)
    except ValueError as e:
        logger.warning(f"Malformed JSON in {field}, using default: {e}")
        return default


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_exercise(item: Any) -> bool:
    """True when ``item`` has the fields every stored exercise carries."""
    if not isinstance(item, dict):
        return False
    return (
        isinstance(item.get("name"), str)
        and _is_int(item.get("sets"))
        and _is_int(item.get("reps"))
        and isinstance(item.get("instructions"), str)
        and all(
            item.get(key) is None or _is_int(item.get(key))
            for key in ("duration_minutes", "duration_seconds")
        )
    )


def _is_valid_meal_option(item: Any) -> bool:
    return (
        isinstance(item, dict)
        and isinstance(item.get("name"), str)
        and _is_int(item.get("calories"))
        and isinstance(item.get("description"), str)
    )


def is_valid_meal_set(value: Any) -> bool:
    """True for ``{breakfast, lunch, dinner, snacks[1..2], totalCalories}`` with well-formed options."""
    if not isinstance(value, dict):
        return False
    snacks = value.get("snacks")
    return (
        all(_is_valid_meal_option(value.get(slot)) for slot in ("breakfast", "lunch", "dinner"))
        and isinstance(snacks, list)
        and 1 <= len(snacks) <= 2
        and all(_is_valid_meal_option(snack) for snack in snacks)
        and _is_int(value.get("totalCalories"))
    )


def normalize_completed_status(value: Any) -> Dict[str, list]:
    """
    Coerce a decoded completion object into ``{"exercises": [...], "meals": [...]}``.

    Keeps only integer exercise indices and known meal slots, without duplicates.
    """
    if not isinstance(value, dict):
        return empty_completed_status()
    exercises = value.get("exercises")
    meals = value.get("meals")
    meal_tokens = {meal_type.value for meal_type in MealType}
    return {
        "exercises": list(dict.fromkeys(
            index for index in (exercises if isinstance(exercises, list) else []) if _is_int(index)
        )),
        "meals": list(dict.fromkeys(
            meal for meal in (meals if isinstance(meals, list) else [])
            if isinstance(meal, str) and meal in meal_tokens
        )),
    }


class WorkoutMealPlan(Base):
    """
    WorkoutMealPlan model: one day of a user's weekly plan.

    Attributes:
        id: Auto-increment identifier.
        user_id: Foreign key to User.
        day: Weekday name (Monday..Sunday).
        exercises: List of exercise dicts (JSON text column).
        meals: Daily meal set dict (JSON text column).
        completed_status: Completed exercise indices and meal slots (JSON text column).
        version: Incremented on every completion write; used for compare-and-swap.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    __tablename__ = "workout_meal_plans"
    __table_args__ = (
        UniqueConstraint("user_id", "day", name="uq_workout_meal_plans_user_day"),
        Index("ix_workout_meal_plans_user_id", "user_id"),
    )

    # Primary key
    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True
    )

    # Foreign key
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    day = Column(
        String(10),
        nullable=False
    )

    # JSON payloads
    exercises_json = Column("exercises", Text, nullable=True)
    meals_json = Column("meals", Text, nullable=True)
    completed_status_json = Column("completed_status", Text, nullable=True)

    version = Column(
        Integer,
        nullable=False,
        default=1
    )

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
    user = relationship("User", back_populates="plans")

    @property
    def exercises(self) -> List[Dict[str, Any]]:
        value = safe_json_loads(self.exercises_json, [], "exercises")
        if not isinstance(value, list):
            logger.warning(f"Stored exercises for plan {self.id} are not a list, using default")
            return []
        exercises = [item for item in value if is_valid_exercise(item)]
        if len(exercises) != len(value):
            logger.warning(f"Dropped {len(value) - len(exercises)} malformed exercises from plan {self.id}")
        return exercises

    @exercises.setter
    def exercises(self, value: List[Dict[str, Any]]) -> None:
        self.exercises_json = json.dumps(value)

    @property
    def meals(self) -> Optional[Dict[str, Any]]:
        value = safe_json_loads(self.meals_json, None, "meals")
        if value is None:
            return None
        if not is_valid_meal_set(value):
            logger.warning(f"Stored meals for plan {self.id} have an unexpected shape, using default")
            return None
        return value

    @meals.setter
    def meals(self, value: Optional[Dict[str, Any]]) -> None:
        self.meals_json = json.dumps(value) if value is not None else None

    @property
    def completed_status(self) -> Dict[str, list]:
        return normalize_completed_status(
            safe_json_loads(self.completed_status_json, empty_completed_status(), "completed_status")
        )

    @completed_status.setter
    def completed_status(self, value: Dict[str, list]) -> None:
        self.completed_status_json = json.dumps(normalize_completed_status(value))

    def to_dict(self) -> Dict[str, Any]:
        """Decoded representation used by the API responses."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "day": self.day,
            "exercises": self.exercises,
            "meals": self.meals,
            "completed_status": self.completed_status,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    def __repr__(self) -> str:
        """String representation of WorkoutMealPlan."""
        return f"<WorkoutMealPlan(id={self.id}, user_id={self.user_id}, day={self.day})>"
