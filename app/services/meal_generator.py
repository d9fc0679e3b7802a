# app/services/meal_generator.py
"""
Smart Fitness Planner API - Meal Selector.

Builds a daily meal set (breakfast, lunch, dinner, 1-2 snacks) for a goal.
The calorie split only decides how many snacks to serve; catalog entries
keep their fixed calorie values.
"""

import random
from typing import Any, Dict, Mapping, Optional, Tuple

from app.enums import Goal, MealType, WEEK_DAYS, parse_goal
from app.services.catalog import MealOption, MEALS
from app.services.calorie_engine import split_calories

# Snack share above which a second snack is served
SNACK_SPLIT_THRESHOLD = 150


class MealGenerator:
    """Samples one option per main slot and 1-2 snacks from static catalogs."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        catalog: Mapping[Goal, Mapping[MealType, Tuple[MealOption, ...]]] = MEALS,
    ):
        self.rng = rng or random.Random()
        self.catalog = catalog

    def pick(self, goal: Goal, slot: MealType) -> MealOption:
        return self.rng.choice(self.catalog[goal][slot])

    @staticmethod
    def snack_count(snack_calories: int) -> int:
        return 2 if snack_calories > SNACK_SPLIT_THRESHOLD else 1

    def generate_daily_meals(self, goal: str, target_calories: int) -> Dict[str, Any]:
        """
        Daily meal set for a goal and calorie target.

        Args:
            goal: weight_loss, muscle_gain or maintenance.
            target_calories: Daily calorie target from the calorie engine.

        Returns:
            Dict[str, Any]: ``{breakfast, lunch, dinner, snacks, totalCalories}`` where
            totalCalories sums the selected entries, not the target.
        """
        goal_enum = parse_goal(goal)
        split = split_calories(target_calories)

        breakfast = self.pick(goal_enum, MealType.BREAKFAST)
        lunch = self.pick(goal_enum, MealType.LUNCH)
        dinner = self.pick(goal_enum, MealType.DINNER)
        # Drawn with replacement, the same snack may appear twice
        snacks = [
            self.pick(goal_enum, MealType.SNACKS)
            for _ in range(self.snack_count(split["snacks"]))
        ]

        total = breakfast.calories + lunch.calories + dinner.calories + sum(s.calories for s in snacks)
        return {
            "breakfast": breakfast.to_dict(),
            "lunch": lunch.to_dict(),
            "dinner": dinner.to_dict(),
            "snacks": [snack.to_dict() for snack in snacks],
            "totalCalories": total,
        }

    def generate_weekly_meals(self, goal: str, target_calories: int) -> Dict[str, Dict[str, Any]]:
        return {day.value: self.generate_daily_meals(goal, target_calories) for day in WEEK_DAYS}
