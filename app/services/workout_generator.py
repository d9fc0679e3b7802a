# app/services/workout_generator.py
"""
Smart Fitness Planner API - Workout Selector.

Picks a day-sized, duplicate-free subset of the goal's exercise catalog.
"""

import random
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from app.enums import Goal, DayOfWeek, WEEK_DAYS, parse_goal
from app.services.catalog import Exercise, EXERCISES, DAILY_EXERCISE_COUNTS


class WorkoutGenerator:
    """
    Samples exercises per day from static catalogs.

    Each call is independent: an exercise can show up on several days of the
    week but never twice in the same day.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        catalog: Mapping[Goal, Tuple[Exercise, ...]] = EXERCISES,
        daily_counts: Mapping[Goal, Mapping[DayOfWeek, int]] = DAILY_EXERCISE_COUNTS,
    ):
        self.rng = rng or random.Random()
        self.catalog = catalog
        self.daily_counts = daily_counts

    def select_exercises(self, exercises: Sequence[Exercise], count: int) -> List[Exercise]:
        """Uniform sample without replacement, truncated to the catalog size."""
        k = max(0, min(count, len(exercises)))
        return self.rng.sample(list(exercises), k)

    def exercise_count(self, goal: Goal, day: DayOfWeek) -> int:
        return self.daily_counts[goal][day]

    def generate_daily_workout(self, goal: str, day: DayOfWeek) -> List[Dict[str, Any]]:
        goal_enum = parse_goal(goal)
        selected = self.select_exercises(self.catalog[goal_enum], self.exercise_count(goal_enum, day))
        return [exercise.to_dict() for exercise in selected]

    def generate_weekly_workouts(self, goal: str) -> Dict[str, List[Dict[str, Any]]]:
        """
        Exercises for all seven days.

        Returns:
            Dict[str, List[Dict[str, Any]]]: Day name -> list of exercise dicts.
        """
        return {day.value: self.generate_daily_workout(goal, day) for day in WEEK_DAYS}
