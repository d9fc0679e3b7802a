"""
Smart Fitness Planner API - Shared Enumerations.

Recognized goal, gender, weekday and meal-type tokens plus the parsers that
turn raw strings into them.
"""

from enum import Enum
from typing import Union

from app.utils.errors import ValidationError


class Goal(str, Enum):
    """Fitness goal; selects the catalog and the calorie adjustment."""
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    MAINTENANCE = "maintenance"


class Gender(str, Enum):
    """Optional profile gender. Only ``female`` changes the BMR constant."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class DayOfWeek(str, Enum):
    """Named weekday, Monday first."""
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @property
    def index(self) -> int:
        return WEEK_DAYS.index(self)


class MealType(str, Enum):
    """Meal slot token used by the completion tracker."""
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACKS = "snacks"


WEEK_DAYS = list(DayOfWeek)
MEAL_TYPES = list(MealType)


def _choices(enum_cls) -> str:
    return ", ".join(member.value for member in enum_cls)


def parse_goal(value: str) -> Goal:
    try:
        return Goal(value)
    except ValueError:
        raise ValidationError(f"Goal must be one of: {_choices(Goal)}")


def parse_meal_type(value: str) -> MealType:
    try:
        return MealType(value)
    except ValueError:
        raise ValidationError(f"mealType must be one of: {_choices(MealType)}")


def parse_day(value: Union[str, int]) -> DayOfWeek:
    """
    Resolve a weekday from its exact capitalized name or a 0-based index.

    Args:
        value: "Monday".."Sunday", or 0..6 (as int or digit string), 0 = Monday.

    Returns:
        DayOfWeek: The matching weekday.

    Raises:
        ValidationError: If the value names no weekday.
    """
    if isinstance(value, int) or (isinstance(value, str) and value.isdigit()):
        index = int(value)
        if 0 <= index < len(WEEK_DAYS):
            return WEEK_DAYS[index]
    else:
        try:
            return DayOfWeek(value)
        except ValueError:
            pass
    raise ValidationError(f"Day must be one of: {_choices(DayOfWeek)}")
