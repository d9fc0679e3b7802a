"""
Smart Fitness Planner API - Weight Tracking Routes.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_path_user
from app.models.user import User
from app.schemas.weight import (
    WeightEntryCreate,
    WeightEntryResponse,
    WeightEntrySavedResponse,
    WeightHistoryResponse,
    LatestWeightResponse,
)
from app.services import weight_tracking

router = APIRouter()


@router.post(
    "/users/{user_id}/weight",
    response_model=WeightEntrySavedResponse,
    status_code=status.HTTP_201_CREATED
)
def add_weight_entry(
    entry: WeightEntryCreate,
    user: User = Depends(get_path_user),
    db: Session = Depends(get_db)
) -> WeightEntrySavedResponse:
    """Record a weight; an existing entry for the same date is replaced."""
    saved = weight_tracking.add_weight_entry(
        db, user.id, entry.weight, entry.recorded_date, entry.notes
    )
    return WeightEntrySavedResponse(entry=WeightEntryResponse.model_validate(saved))


@router.get("/users/{user_id}/weight/history", response_model=WeightHistoryResponse)
def get_weight_history(
    user_id: int,
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of entries"),
    db: Session = Depends(get_db)
) -> WeightHistoryResponse:
    """Weight entries, newest first."""
    history = weight_tracking.get_weight_history(db, user_id, limit)
    return WeightHistoryResponse(history=[WeightEntryResponse.model_validate(e) for e in history])


@router.get("/users/{user_id}/weight/latest", response_model=LatestWeightResponse)
def get_latest_weight(user_id: int, db: Session = Depends(get_db)) -> LatestWeightResponse:
    """Most recent weight entry."""
    latest = weight_tracking.get_latest_weight(db, user_id)
    return LatestWeightResponse(weight=WeightEntryResponse.model_validate(latest))


@router.delete("/users/{user_id}/weight/{entry_id}")
def delete_weight_entry(user_id: int, entry_id: int, db: Session = Depends(get_db)):
    """Delete one weight entry."""
    weight_tracking.delete_weight_entry(db, user_id, entry_id)
    return {"message": "Weight entry deleted successfully"}
