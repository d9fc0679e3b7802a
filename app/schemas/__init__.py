"""Smart Fitness Planner API - Pydantic Schemas Package."""

from app.schemas.user import (
    ProfileCreate,
    ProfileUpdate,
    ProfileResponse,
    ProfileSavedResponse,
    ProfileUpdatedResponse,
)
from app.schemas.plan import (
    ExerciseSchema,
    MealOptionSchema,
    DailyMealSetSchema,
    CompletedStatusSchema,
    WorkoutMealPlanResponse,
    GeneratedDay,
    GeneratePlanResponse,
    ExerciseCompletionRequest,
    MealCompletionRequest,
    ExerciseCompletionResponse,
    MealCompletionResponse,
)
from app.schemas.weight import (
    WeightEntryCreate,
    WeightEntryResponse,
    WeightEntrySavedResponse,
    WeightHistoryResponse,
    LatestWeightResponse,
)
from app.schemas.progress import (
    DayProgress,
    WeeklyStats,
    Achievement,
    ProgressResponse,
)

__all__ = [
    # Profile
    "ProfileCreate",
    "ProfileUpdate",
    "ProfileResponse",
    "ProfileSavedResponse",
    "ProfileUpdatedResponse",
    # Plans
    "ExerciseSchema",
    "MealOptionSchema",
    "DailyMealSetSchema",
    "CompletedStatusSchema",
    "WorkoutMealPlanResponse",
    "GeneratedDay",
    "GeneratePlanResponse",
    "ExerciseCompletionRequest",
    "MealCompletionRequest",
    "ExerciseCompletionResponse",
    "MealCompletionResponse",
    # Weight
    "WeightEntryCreate",
    "WeightEntryResponse",
    "WeightEntrySavedResponse",
    "WeightHistoryResponse",
    "LatestWeightResponse",
    # Progress
    "DayProgress",
    "WeeklyStats",
    "Achievement",
    "ProgressResponse",
]
