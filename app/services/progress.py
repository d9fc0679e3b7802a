# app/services/progress.py
"""
Smart Fitness Planner API - Progress Aggregation Service.

Completion percentages, consumed and burned calorie estimates, the current
streak and achievements. Everything is recomputed on read from the stored
plan entries and weight history; nothing here is persisted.

Estimates:
- Burned per day: 50 kcal per planned exercise
- Burned per week: 30 minutes at 5 kcal/min per day that has exercises
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.enums import DayOfWeek, MealType, WEEK_DAYS
from app.models.user import User
from app.services.calorie_engine import calories_for_profile
from app.services.plan_generator import get_plans_for_user
from app.services.weight_tracking import get_starting_weight
from app.utils.rounding import round_half_up


@dataclass
class AchievementRule:
    """A milestone: earned when ``value >= target``."""
    key: str
    title: str
    target: float


class ProgressService:
    """
    Aggregates stored plans into dashboard figures.

    Works on decoded plan dicts (``WorkoutMealPlan.to_dict()``) so the
    arithmetic is independent of storage.
    """

    MEALS_PER_DAY = len(MealType)
    CALORIES_PER_EXERCISE = 50
    WORKOUT_MINUTES_PER_DAY = 30
    CALORIES_PER_MINUTE = 5

    ACHIEVEMENTS = (
        AchievementRule("first_week", "Complete your first week", 50),
        AchievementRule("ten_workouts", "Complete 10 exercises", 10),
        AchievementRule("weight_loss", "Lose 5 kg", 5),
        AchievementRule("streak", "Reach a 30-day streak", 30),
    )

    @staticmethod
    def _completed_exercises(plan: Dict[str, Any]) -> int:
        return len(set((plan.get("completed_status") or {}).get("exercises") or []))

    @staticmethod
    def _completed_meals(plan: Dict[str, Any]) -> List[str]:
        return list(dict.fromkeys((plan.get("completed_status") or {}).get("meals") or []))

    @staticmethod
    def _percent(part: float, whole: float) -> int:
        if whole <= 0:
            return 0
        return min(100, round_half_up(part / whole * 100))

    def workout_completion(self, plan: Dict[str, Any]) -> int:
        """Completed exercises as a percent of the day's exercises (capped at 100)."""
        return self._percent(self._completed_exercises(plan), len(plan.get("exercises") or []))

    def meal_completion(self, plan: Dict[str, Any]) -> int:
        return self._percent(len(self._completed_meals(plan)), self.MEALS_PER_DAY)

    def consumed_calories(self, plan: Dict[str, Any]) -> int:
        """Calories of the completed slots; "snacks" counts every snack of the day."""
        meals = plan.get("meals") or {}
        consumed = 0
        for slot in self._completed_meals(plan):
            if slot == MealType.SNACKS.value:
                consumed += sum(snack.get("calories", 0) for snack in meals.get("snacks") or [])
            elif isinstance(meals.get(slot), dict):
                consumed += meals[slot].get("calories", 0)
        return consumed

    def calorie_target(self, plan: Dict[str, Any]) -> int:
        return (plan.get("meals") or {}).get("totalCalories", 0)

    def burned_estimate(self, plan: Dict[str, Any]) -> int:
        return len(plan.get("exercises") or []) * self.CALORIES_PER_EXERCISE

    def day_progress(self, plan: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "day": plan["day"],
            "plan_id": plan["id"],
            "workout_completion": self.workout_completion(plan),
            "meal_completion": self.meal_completion(plan),
            "calories_consumed": self.consumed_calories(plan),
            "calories_target": self.calorie_target(plan),
            "calories_burned_estimate": self.burned_estimate(plan),
        }

    def weekly_stats(self, plans: List[Dict[str, Any]]) -> Dict[str, Any]:
        total_exercises = sum(len(p.get("exercises") or []) for p in plans)
        completed_exercises = sum(self._completed_exercises(p) for p in plans)
        total_meals = len(plans) * self.MEALS_PER_DAY
        completed_meals = sum(len(self._completed_meals(p)) for p in plans)

        workout_rate = completed_exercises / total_exercises * 100 if total_exercises else 0.0
        meal_rate = completed_meals / total_meals * 100 if total_meals else 0.0
        workout_days = sum(1 for p in plans if p.get("exercises"))

        return {
            "total_exercises": total_exercises,
            "completed_exercises": completed_exercises,
            "total_meals": total_meals,
            "completed_meals": completed_meals,
            "total_calories_target": sum(self.calorie_target(p) for p in plans),
            "total_calories_consumed": sum(self.consumed_calories(p) for p in plans),
            "workout_completion_rate": round(workout_rate, 2),
            "meal_completion_rate": round(meal_rate, 2),
            "average_completion": round_half_up((workout_rate + meal_rate) / 2),
            "workout_days": workout_days,
            "calories_burned_estimate": (
                workout_days * self.WORKOUT_MINUTES_PER_DAY * self.CALORIES_PER_MINUTE
            ),
        }

    def current_streak(self, plans: List[Dict[str, Any]], today: DayOfWeek) -> int:
        """
        Consecutive days, walking back from ``today``, with at least one completed exercise.

        Wraps from Monday to the stored Sunday; never exceeds seven.
        """
        by_day = {p["day"]: p for p in plans}
        streak = 0
        index = today.index
        for _ in range(len(WEEK_DAYS)):
            plan = by_day.get(WEEK_DAYS[index].value)
            if not plan or not plan.get("exercises") or self._completed_exercises(plan) == 0:
                break
            streak += 1
            index = (index - 1) % len(WEEK_DAYS)
        return streak

    def achievements(
        self,
        plans: List[Dict[str, Any]],
        weekly: Dict[str, Any],
        streak: int,
        weight_lost: float,
    ) -> List[Dict[str, Any]]:
        values = {
            "first_week": weekly["average_completion"] if plans else 0,
            "ten_workouts": weekly["completed_exercises"],
            "weight_loss": weight_lost,
            "streak": streak,
        }
        results = []
        for rule in self.ACHIEVEMENTS:
            value = values[rule.key]
            earned = value >= rule.target
            if rule.key == "first_week":
                earned = earned and len(plans) >= len(WEEK_DAYS)
            results.append({
                "key": rule.key,
                "title": rule.title,
                "earned": earned,
                "progress": self._percent(value, rule.target),
            })
        return results

    def summarize(
        self,
        plans: List[Dict[str, Any]],
        today: DayOfWeek,
        weight_lost: float = 0.0,
    ) -> Dict[str, Any]:
        weekly = self.weekly_stats(plans)
        streak = self.current_streak(plans, today)
        return {
            "today": today.value,
            "current_streak": streak,
            "weight_lost": weight_lost,
            "days": [self.day_progress(p) for p in plans],
            "weekly": weekly,
            "achievements": self.achievements(plans, weekly, streak, weight_lost),
        }

    def get_progress(self, db: Session, user: User, on_date: Optional[date] = None) -> Dict[str, Any]:
        """
        Progress view for a user.

        Args:
            db: Database session.
            user: Profile.
            on_date: Reference date for "today" (defaults to the current date).
        """
        today = WEEK_DAYS[(on_date or date.today()).weekday()]
        plans = [plan.to_dict() for plan in get_plans_for_user(db, user.id)]

        starting_weight = get_starting_weight(db, user.id)
        weight_lost = max(0.0, starting_weight - user.weight) if starting_weight else 0.0

        summary = self.summarize(plans, today, round(weight_lost, 2))
        summary["user_id"] = user.id
        summary["daily_calorie_target"] = calories_for_profile(user)
        return summary


progress_service = ProgressService()
