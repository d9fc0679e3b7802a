"""
Smart Fitness Planner API - Weight Tracking Schemas.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict


class WeightEntryCreate(BaseModel):
    """
    Schema for recording a weight measurement.

    Attributes:
        weight: Weight in kg.
        recorded_date: Date of measurement (YYYY-MM-DD); one entry per date.
        notes: Optional note.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "weight": 64.2,
                "recorded_date": "2024-01-15",
                "notes": "Morning, before breakfast"
            }
        }
    )

    weight: float = Field(..., gt=0, description="Weight in kg")
    recorded_date: date = Field(..., description="Date in YYYY-MM-DD format")
    notes: Optional[str] = Field(None, description="Optional note")


class WeightEntryResponse(BaseModel):
    """Schema for a stored weight entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    weight: float
    recorded_date: date
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class WeightEntrySavedResponse(BaseModel):
    message: str = "Weight entry added successfully"
    entry: WeightEntryResponse


class WeightHistoryResponse(BaseModel):
    message: str = "Weight history retrieved successfully"
    history: List[WeightEntryResponse]


class LatestWeightResponse(BaseModel):
    message: str = "Latest weight retrieved successfully"
    weight: WeightEntryResponse
