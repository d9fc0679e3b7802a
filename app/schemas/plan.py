"""
Smart Fitness Planner API - Weekly Plan Schemas.

Pydantic schemas for plan entries, generation results and completion toggles.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict

from app.enums import MealType


class ExerciseSchema(BaseModel):
    """An exercise embedded in a day's plan."""

    name: str
    sets: int
    reps: int
    instructions: str
    duration_minutes: Optional[int] = None
    duration_seconds: Optional[int] = None


class MealOptionSchema(BaseModel):
    """A meal embedded in a day's meal set."""

    name: str
    calories: int
    description: str


class DailyMealSetSchema(BaseModel):
    """
    Schema for one day's meals.

    Attributes:
        total_calories: Sum of the selected entries (serialized as ``totalCalories``).
    """

    model_config = ConfigDict(populate_by_name=True)

    breakfast: MealOptionSchema
    lunch: MealOptionSchema
    dinner: MealOptionSchema
    snacks: List[MealOptionSchema] = Field(..., min_length=1, max_length=2)
    total_calories: int = Field(..., alias="totalCalories")


class CompletedStatusSchema(BaseModel):
    """Completed exercise indices and meal slots for a plan."""

    exercises: List[int] = Field(default_factory=list)
    meals: List[str] = Field(default_factory=list)


class WorkoutMealPlanResponse(BaseModel):
    """
    Schema for a stored weekly plan entry.

    Attributes:
        id: Plan ID.
        user_id: Owner's profile ID.
        day: Weekday name.
        exercises: The day's exercises.
        meals: The day's meal set, or null when stored meals are unreadable.
        completed_status: Completion state.
    """

    id: int
    user_id: int
    day: str
    exercises: List[ExerciseSchema]
    meals: Optional[DailyMealSetSchema] = None
    completed_status: CompletedStatusSchema
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class GeneratedDay(BaseModel):
    """One day's outcome of a generation run."""

    day: str
    id: int
    updated: bool


class GeneratePlanResponse(BaseModel):
    """Response for weekly plan generation."""

    message: str = "Weekly plan generated successfully"
    daily_calorie_target: int
    plans: List[GeneratedDay]


class ExerciseCompletionRequest(BaseModel):
    """
    Schema for toggling an exercise.

    Attributes:
        exercise_index: 0-based index into the plan's exercises (``exerciseIndex``).
        completed: Mark (true) or unmark (false).
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"exerciseIndex": 2, "completed": True}}
    )

    exercise_index: int = Field(..., alias="exerciseIndex", description="Exercise index")
    completed: bool = Field(..., strict=True, description="Completion flag")


class MealCompletionRequest(BaseModel):
    """Schema for toggling a meal slot."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"mealType": "lunch", "completed": True}}
    )

    meal_type: MealType = Field(..., alias="mealType", description="breakfast/lunch/dinner/snacks")
    completed: bool = Field(..., strict=True, description="Completion flag")


class ExerciseCompletionResponse(BaseModel):
    message: str = "Exercise completion updated"
    completedExercises: List[int]


class MealCompletionResponse(BaseModel):
    message: str = "Meal completion updated"
    completedMeals: List[str]
