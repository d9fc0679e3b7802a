"""
Smart Fitness Planner API - Profile Routes.

Endpoints for creating, reading and updating the fitness profile.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.user import (
    ProfileCreate,
    ProfileUpdate,
    ProfileResponse,
    ProfileSavedResponse,
    ProfileUpdatedResponse,
)
from app.services import profile_service

router = APIRouter()


@router.post("/profile", response_model=ProfileSavedResponse, status_code=status.HTTP_201_CREATED)
def save_profile(
    profile: ProfileCreate,
    db: Session = Depends(get_db)
) -> ProfileSavedResponse:
    """
    Create a new profile.

    Args:
        profile: ProfileCreate with name, age, gender, height, weight and goal.
        db: Database session.

    Returns:
        ProfileSavedResponse with the new profile ID.
    """
    user = profile_service.create_profile(db, profile)
    return ProfileSavedResponse(userId=user.id)


@router.get("/profile", response_model=ProfileResponse)
def fetch_profile(
    user_id: Optional[int] = Query(None, alias="userId", description="Profile ID; latest profile if omitted"),
    db: Session = Depends(get_db)
) -> ProfileResponse:
    """
    Get a profile by ID, or the most recently created one.

    Raises:
        NotFoundError: 404 if no matching profile exists.
    """
    user = profile_service.get_profile(db, user_id)
    return profile_service.to_profile_response(user)


@router.put("/users/{user_id}", response_model=ProfileUpdatedResponse)
def update_profile(
    user_id: int,
    profile: ProfileUpdate,
    db: Session = Depends(get_db)
) -> ProfileUpdatedResponse:
    """
    Update the provided profile fields.

    Raises:
        ValidationError: 400 if nothing to update or a value is out of range.
        NotFoundError: 404 if the profile does not exist.
    """
    user = profile_service.update_profile(db, user_id, profile)
    return ProfileUpdatedResponse(user=profile_service.to_profile_response(user))
