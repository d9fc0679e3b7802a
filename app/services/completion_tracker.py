# app/services/completion_tracker.py
"""
Smart Fitness Planner API - Completion Tracker.

Marks exercises and meal slots of a plan entry as done or not done.

Every write replaces the whole completed_status object, guarded by a
compare-and-swap on the plan's ``version`` column so two concurrent toggles
on the same plan cannot silently overwrite each other: the loser re-reads
and re-applies its toggle.
"""

import json
import logging
from typing import Callable, Dict, List, Optional

from sqlalchemy.orm import Session

from settings import settings
from app.database import storage_operation
from app.enums import parse_meal_type
from app.models.workout_meal_plan import WorkoutMealPlan, normalize_completed_status
from app.services.plan_generator import get_plan_by_id
from app.utils.errors import ConflictError, ValidationError

logger = logging.getLogger(__name__)


def toggle_member(items: list, item, completed: bool) -> list:
    """
    Add or remove ``item`` with set semantics, keeping insertion order.

    Adding a present item or removing an absent one returns an equal list.
    """
    if completed:
        return list(items) if item in items else list(items) + [item]
    return [existing for existing in items if existing != item]


class CompletionTracker:
    """Read-modify-write of completed_status with optimistic concurrency."""

    def __init__(self, max_attempts: Optional[int] = None):
        self.max_attempts = max_attempts or settings.COMPLETION_MAX_ATTEMPTS

    def _update(
        self,
        db: Session,
        user_id: int,
        plan_id: int,
        field: str,
        mutate: Callable[[WorkoutMealPlan, list], list],
    ) -> Dict[str, list]:
        for attempt in range(1, self.max_attempts + 1):
            # Drop cached state so every attempt reads the current row
            db.expire_all()
            plan = get_plan_by_id(db, user_id, plan_id)
            status = plan.completed_status
            new_items = mutate(plan, status[field])
            if new_items == status[field]:
                return status

            new_status = normalize_completed_status({**status, field: new_items})
            with storage_operation(db, "update completion status"):
                rows = (
                    db.query(WorkoutMealPlan)
                    .filter(WorkoutMealPlan.id == plan.id, WorkoutMealPlan.version == plan.version)
                    .update(
                        {
                            WorkoutMealPlan.completed_status_json: json.dumps(new_status),
                            WorkoutMealPlan.version: plan.version + 1,
                        },
                        synchronize_session=False,
                    )
                )
                db.commit()

            if rows == 1:
                return new_status
            logger.warning(
                f"Plan {plan_id} changed during completion update (attempt {attempt}/{self.max_attempts})"
            )

        raise ConflictError(
            "Plan was modified concurrently, please retry",
            detail=f"Gave up after {self.max_attempts} attempts on plan {plan_id}",
        )

    def set_exercise_completion(
        self,
        db: Session,
        user_id: int,
        plan_id: int,
        exercise_index: int,
        completed: bool,
    ) -> List[int]:
        """
        Mark or unmark one exercise of a plan.

        Args:
            db: Database session.
            user_id: Owner of the plan.
            plan_id: Plan entry id.
            exercise_index: 0-based index into the plan's current exercises.
            completed: True to mark, False to unmark.

        Returns:
            List[int]: The completed exercise indices after the change.

        Raises:
            NotFoundError: If the plan does not exist for this user.
            ValidationError: If the index is outside the exercise list.
            ConflictError: If the compare-and-swap keeps failing.
        """
        def mutate(plan: WorkoutMealPlan, items: list) -> list:
            count = len(plan.exercises)
            if not (0 <= exercise_index < count):
                raise ValidationError(
                    f"exerciseIndex must be between 0 and {count - 1}" if count
                    else "Plan has no exercises"
                )
            return toggle_member(items, exercise_index, completed)

        status = self._update(db, user_id, plan_id, "exercises", mutate)
        logger.info(f"Plan {plan_id}: exercise {exercise_index} completed={completed}")
        return status["exercises"]

    def set_meal_completion(
        self,
        db: Session,
        user_id: int,
        plan_id: int,
        meal_type: str,
        completed: bool,
    ) -> List[str]:
        """
        Mark or unmark a meal slot (breakfast, lunch, dinner or snacks).

        Returns:
            List[str]: The completed meal slots after the change.
        """
        token = parse_meal_type(meal_type).value
        status = self._update(
            db, user_id, plan_id, "meals",
            lambda plan, items: toggle_member(items, token, completed),
        )
        logger.info(f"Plan {plan_id}: meal {token} completed={completed}")
        return status["meals"]


completion_tracker = CompletionTracker()
