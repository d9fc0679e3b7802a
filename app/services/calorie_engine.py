# app/services/calorie_engine.py
"""
Smart Fitness Planner API - Calorie Engine.

Daily calorie targets from the Mifflin-St Jeor BMR, a single activity
multiplier, and a goal adjustment.
"""

from typing import Optional

from settings import settings
from app.enums import Goal, Gender, parse_goal
from app.utils.rounding import round_half_up


GOAL_ADJUSTMENTS = {
    Goal.WEIGHT_LOSS: -500,   # deficit
    Goal.MUSCLE_GAIN: 300,    # surplus
    Goal.MAINTENANCE: 0,
}

# Share of the daily target assigned to each meal slot
MEAL_SPLIT = {
    "breakfast": 0.25,
    "lunch": 0.35,
    "dinner": 0.30,
    "snacks": 0.10,
}


def calculate_bmr(age: int, weight: float, height: float, gender: Optional[str] = None) -> float:
    """
    Basal metabolic rate (Mifflin-St Jeor).

    Args:
        age: Age in years.
        weight: Weight in kg.
        height: Height in cm.
        gender: Only "female" (case-insensitive) selects the -161 constant.

    Returns:
        float: Unrounded BMR in kcal/day.
    """
    base = 10 * weight + 6.25 * height - 5 * age
    if gender is not None and str(gender).lower() == Gender.FEMALE.value:
        return base - 161
    return base + 5


def calculate_daily_calories(
    age: int,
    weight: float,
    height: float,
    gender: Optional[str],
    goal: str,
    activity_multiplier: Optional[float] = None,
) -> int:
    """
    Daily calorie target for a profile.

    Args:
        age: Age in years.
        weight: Weight in kg.
        height: Height in cm.
        gender: Optional gender token.
        goal: weight_loss, muscle_gain or maintenance.
        activity_multiplier: Overrides settings.ACTIVITY_MULTIPLIER.

    Returns:
        int: Target rounded half-up.

    Raises:
        ValidationError: If the goal is not recognized.
    """
    multiplier = settings.ACTIVITY_MULTIPLIER if activity_multiplier is None else activity_multiplier
    maintenance = calculate_bmr(age, weight, height, gender) * multiplier
    return round_half_up(maintenance + GOAL_ADJUSTMENTS[parse_goal(goal)])


def calories_for_profile(user, activity_multiplier: Optional[float] = None) -> int:
    """Daily target for any object exposing age/weight/height/gender/goal."""
    return calculate_daily_calories(
        age=user.age,
        weight=user.weight,
        height=user.height,
        gender=user.gender,
        goal=user.goal,
        activity_multiplier=activity_multiplier,
    )


def split_calories(target: int) -> dict:
    """Per-slot calorie budget for a daily target, each rounded half-up."""
    return {slot: round_half_up(target * share) for slot, share in MEAL_SPLIT.items()}
