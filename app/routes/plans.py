"""
Smart Fitness Planner API - Weekly Plan Routes.

Generate the weekly workout/meal plan, read it back, and toggle completion.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_path_user
from app.models.user import User
from app.schemas.plan import (
    WorkoutMealPlanResponse,
    GeneratePlanResponse,
    GeneratedDay,
    ExerciseCompletionRequest,
    ExerciseCompletionResponse,
    MealCompletionRequest,
    MealCompletionResponse,
)
from app.services.completion_tracker import completion_tracker
from app.services.plan_generator import weekly_plan_generator, get_plans_for_user, get_plan_for_day
from app.utils.errors import NotFoundError

router = APIRouter()


@router.post(
    "/users/{user_id}/plans/generate",
    response_model=GeneratePlanResponse,
    status_code=status.HTTP_201_CREATED
)
def generate_weekly_plan(
    reset_completion: bool = Query(
        False,
        description="Clear completion marks on days that already have a plan"
    ),
    user: User = Depends(get_path_user),
    db: Session = Depends(get_db)
) -> GeneratePlanResponse:
    """
    Generate (or regenerate) the seven daily plans for a user.

    Existing days keep their completion marks unless ``reset_completion`` is set.
    """
    target, results = weekly_plan_generator.generate_weekly_plan(db, user, reset_completion)
    return GeneratePlanResponse(
        daily_calorie_target=target,
        plans=[GeneratedDay(**r) for r in results]
    )


@router.get("/users/{user_id}/plans", response_model=List[WorkoutMealPlanResponse])
def get_weekly_plan(user_id: int, db: Session = Depends(get_db)):
    """Get all daily plans for a user, Monday first."""
    plans = get_plans_for_user(db, user_id)
    if not plans:
        raise NotFoundError("No workout/meal plans found. Please generate a plan first.")
    return [plan.to_dict() for plan in plans]


@router.get("/users/{user_id}/plans/{day}", response_model=WorkoutMealPlanResponse)
def get_day_plan(user_id: int, day: str, db: Session = Depends(get_db)):
    """
    Get one day's plan.

    Args:
        day: Weekday name ("Monday".."Sunday") or 0-based index (0 = Monday).
    """
    return get_plan_for_day(db, user_id, day).to_dict()


@router.patch("/users/{user_id}/plans/{plan_id}/exercises", response_model=ExerciseCompletionResponse)
def update_exercise_completion(
    user_id: int,
    plan_id: int,
    request: ExerciseCompletionRequest,
    db: Session = Depends(get_db)
) -> ExerciseCompletionResponse:
    """Mark or unmark an exercise of a plan as completed."""
    completed = completion_tracker.set_exercise_completion(
        db, user_id, plan_id, request.exercise_index, request.completed
    )
    return ExerciseCompletionResponse(completedExercises=completed)


@router.patch("/users/{user_id}/plans/{plan_id}/meals", response_model=MealCompletionResponse)
def update_meal_completion(
    user_id: int,
    plan_id: int,
    request: MealCompletionRequest,
    db: Session = Depends(get_db)
) -> MealCompletionResponse:
    """Mark or unmark a meal slot of a plan as completed."""
    completed = completion_tracker.set_meal_completion(
        db, user_id, plan_id, request.meal_type, request.completed
    )
    return MealCompletionResponse(completedMeals=completed)
