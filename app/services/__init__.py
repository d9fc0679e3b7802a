"""Smart Fitness Planner API - Services Package."""

from .calorie_engine import calculate_bmr, calculate_daily_calories, calories_for_profile
from .workout_generator import WorkoutGenerator
from .meal_generator import MealGenerator
from .plan_generator import WeeklyPlanGenerator, weekly_plan_generator
from .completion_tracker import CompletionTracker
from .progress import ProgressService, progress_service

__all__ = [
    "calculate_bmr",
    "calculate_daily_calories",
    "calories_for_profile",
    "WorkoutGenerator",
    "MealGenerator",
    "WeeklyPlanGenerator",
    "weekly_plan_generator",
    "CompletionTracker",
    "ProgressService",
    "progress_service",
]
