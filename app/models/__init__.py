"""
Smart Fitness Planner API - ORM Models Package.

Export all SQLAlchemy models so they register on the shared metadata.
"""

from app.models.user import User
from app.models.workout_meal_plan import WorkoutMealPlan
from app.models.weight_entry import WeightEntry

__all__ = [
    "User",
    "WorkoutMealPlan",
    "WeightEntry",
]
