"""
Smart Fitness Planner API - User Schemas.

Pydantic schemas for profile operations.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict

from app.enums import Goal, Gender


class ProfileCreate(BaseModel):
    """
    Schema for creating a profile.

    Attributes:
        name: Display name.
        age: Age in years (10-100).
        gender: Optional gender (male/female/other).
        height: Height in cm.
        weight: Weight in kg.
        goal: Fitness goal.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "age": 30,
                "gender": "female",
                "height": 165,
                "weight": 65,
                "goal": "weight_loss"
            }
        }
    )

    name: str = Field(..., min_length=1, description="Display name")
    age: int = Field(..., ge=10, le=100, description="Age in years (10-100)")
    gender: Optional[Gender] = Field(None, description="Gender (male/female/other)")
    height: float = Field(..., gt=0, description="Height in cm")
    weight: float = Field(..., gt=0, description="Weight in kg")
    goal: Goal = Field(..., description="Goal (weight_loss/muscle_gain/maintenance)")


class ProfileUpdate(BaseModel):
    """
    Schema for updating a profile.

    All fields are optional for partial updates.
    """

    name: Optional[str] = Field(None, min_length=1, description="Display name")
    age: Optional[int] = Field(None, ge=10, le=100, description="Age in years (10-100)")
    gender: Optional[Gender] = Field(None, description="Gender (male/female/other)")
    height: Optional[float] = Field(None, gt=0, description="Height in cm")
    weight: Optional[float] = Field(None, gt=0, description="Weight in kg")
    goal: Optional[Goal] = Field(None, description="Goal (weight_loss/muscle_gain/maintenance)")


class ProfileResponse(BaseModel):
    """
    Schema for a full profile, including the derived calorie figures.

    Attributes:
        bmr: Mifflin-St Jeor basal metabolic rate.
        daily_calorie_target: Target used for meal generation.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Profile ID")
    name: str
    age: int
    gender: Optional[str] = None
    height: float
    weight: float
    goal: str
    bmr: float = Field(..., description="Basal metabolic rate (kcal/day)")
    daily_calorie_target: int = Field(..., description="Daily calorie target (kcal)")
    created_at: datetime
    updated_at: datetime


class ProfileSavedResponse(BaseModel):
    """Response for a newly created profile."""

    message: str = "Profile saved successfully"
    userId: int


class ProfileUpdatedResponse(BaseModel):
    """Response for a profile update."""

    message: str = "Profile updated successfully"
    user: ProfileResponse
