# app/services/plan_generator.py
"""
Smart Fitness Planner API - Weekly Plan Generator.

Creates or refreshes one WorkoutMealPlan per weekday for a user, and reads
stored plans back.

Regeneration replaces exercises and meals but keeps the stored completion
marks unless ``reset_completion`` is requested, so kept exercise indices may
point at different exercises afterwards. Each day is committed separately:
a failure on a later day leaves the earlier days written.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from sqlalchemy.orm import Session

from app.database import storage_operation
from app.enums import DayOfWeek, WEEK_DAYS, parse_day
from app.models.user import User
from app.models.workout_meal_plan import WorkoutMealPlan, empty_completed_status
from app.services.calorie_engine import calories_for_profile
from app.services.meal_generator import MealGenerator
from app.services.workout_generator import WorkoutGenerator
from app.utils.errors import NotFoundError

logger = logging.getLogger(__name__)

DAY_ORDER = {day.value: day.index for day in WEEK_DAYS}


class WeeklyPlanGenerator:
    """Orchestrates the workout and meal selectors across the seven weekdays."""

    def __init__(
        self,
        workout_generator: Optional[WorkoutGenerator] = None,
        meal_generator: Optional[MealGenerator] = None,
    ):
        self.workout_generator = workout_generator or WorkoutGenerator()
        self.meal_generator = meal_generator or MealGenerator()

    def build_week(self, user: User) -> Tuple[int, Dict[str, Dict[str, Any]]]:
        """
        Generate a week of content without touching storage.

        Returns:
            Tuple of (daily calorie target, day name -> {"exercises", "meals"}).
        """
        target = calories_for_profile(user)
        week = {
            day.value: {
                "exercises": self.workout_generator.generate_daily_workout(user.goal, day),
                "meals": self.meal_generator.generate_daily_meals(user.goal, target),
            }
            for day in WEEK_DAYS
        }
        return target, week

    def generate_weekly_plan(
        self,
        db: Session,
        user: User,
        reset_completion: bool = False,
    ) -> Tuple[int, List[Dict[str, Any]]]:
        """
        Create or update the seven plan entries for ``user``.

        Args:
            db: Database session.
            user: Profile to plan for.
            reset_completion: Clear completion marks on entries that already exist.

        Returns:
            Tuple of (daily calorie target, [{"day", "id", "updated"}] in weekday order).

        Raises:
            ValidationError: If the stored goal is not recognized.
            PersistenceError: On the first failing day; earlier days stay committed.
        """
        target, week = self.build_week(user)
        results = []

        for day_name, content in week.items():
            with storage_operation(db, f"save {day_name} plan"):
                existing = (
                    db.query(WorkoutMealPlan)
                    .filter(WorkoutMealPlan.user_id == user.id, WorkoutMealPlan.day == day_name)
                    .first()
                )
                if existing is not None:
                    existing.exercises = content["exercises"]
                    existing.meals = content["meals"]
                    if reset_completion:
                        existing.completed_status = empty_completed_status()
                    # In-flight completion toggles validated against the old list must retry
                    existing.version = WorkoutMealPlan.version + 1
                    plan, updated = existing, True
                else:
                    plan = WorkoutMealPlan(user_id=user.id, day=day_name, version=1)
                    plan.exercises = content["exercises"]
                    plan.meals = content["meals"]
                    plan.completed_status = empty_completed_status()
                    db.add(plan)
                    updated = False
                db.commit()
                db.refresh(plan)

            results.append({"day": day_name, "id": plan.id, "updated": updated})

        logger.info(
            f"Generated weekly plan for user {user.id}: target={target} kcal, "
            f"{sum(r['updated'] for r in results)} updated, "
            f"{sum(not r['updated'] for r in results)} created"
        )
        return target, results


def get_plans_for_user(db: Session, user_id: int) -> List[WorkoutMealPlan]:
    """All stored entries for a user, Monday first."""
    with storage_operation(db, "fetch weekly plan"):
        plans = db.query(WorkoutMealPlan).filter(WorkoutMealPlan.user_id == user_id).all()
    return sorted(plans, key=lambda p: DAY_ORDER.get(p.day, len(DAY_ORDER)))


def get_plan_for_day(db: Session, user_id: int, day: Union[str, int, DayOfWeek]) -> WorkoutMealPlan:
    """
    Entry for one weekday.

    Args:
        day: Weekday name or 0-based index (0 = Monday).

    Raises:
        ValidationError: If ``day`` names no weekday.
        NotFoundError: If the user has no plan for that day.
    """
    day_enum = day if isinstance(day, DayOfWeek) else parse_day(day)
    with storage_operation(db, "fetch day plan"):
        plan = (
            db.query(WorkoutMealPlan)
            .filter(WorkoutMealPlan.user_id == user_id, WorkoutMealPlan.day == day_enum.value)
            .first()
        )
    if plan is None:
        raise NotFoundError(f"No plan found for {day_enum.value}. Please generate a weekly plan first.")
    return plan


def get_plan_by_id(db: Session, user_id: int, plan_id: int) -> WorkoutMealPlan:
    """Entry by id, scoped to its owner."""
    with storage_operation(db, "fetch plan"):
        plan = (
            db.query(WorkoutMealPlan)
            .filter(WorkoutMealPlan.id == plan_id, WorkoutMealPlan.user_id == user_id)
            .first()
        )
    if plan is None:
        raise NotFoundError("Plan not found")
    return plan


weekly_plan_generator = WeeklyPlanGenerator()
