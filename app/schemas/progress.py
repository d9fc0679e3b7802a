"""
Smart Fitness Planner API - Progress Schemas.

Aggregated completion, calorie, streak and achievement figures.
"""

from typing import List

from pydantic import BaseModel, Field


class DayProgress(BaseModel):
    """Per-day completion and calorie figures."""

    day: str
    plan_id: int
    workout_completion: int = Field(..., description="Completed exercises, percent")
    meal_completion: int = Field(..., description="Completed meal slots, percent")
    calories_consumed: int
    calories_target: int
    calories_burned_estimate: int


class WeeklyStats(BaseModel):
    """Totals across all stored plan entries."""

    total_exercises: int
    completed_exercises: int
    total_meals: int
    completed_meals: int
    total_calories_target: int
    total_calories_consumed: int
    workout_completion_rate: float
    meal_completion_rate: float
    average_completion: int
    workout_days: int
    calories_burned_estimate: int


class Achievement(BaseModel):
    """A milestone with its progress toward being earned."""

    key: str
    title: str
    earned: bool
    progress: int = Field(..., ge=0, le=100, description="Percent toward the milestone")


class ProgressResponse(BaseModel):
    """Schema for the aggregated progress view."""

    user_id: int
    today: str
    daily_calorie_target: int
    current_streak: int
    weight_lost: float
    days: List[DayProgress]
    weekly: WeeklyStats
    achievements: List[Achievement]
