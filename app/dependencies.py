"""
Smart Fitness Planner API - FastAPI Dependencies.

Dependency injection helpers for routes.
"""

from fastapi import Depends, Path
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.services.profile_service import get_user


def get_path_user(
    user_id: int = Path(..., description="Profile ID"),
    db: Session = Depends(get_db)
) -> User:
    """
    Resolve the ``{user_id}`` path parameter to a profile.

    Args:
        user_id: Profile ID from the URL.
        db: Database session.

    Returns:
        User: The profile.

    Raises:
        NotFoundError: 404 if the profile does not exist.
    """
    return get_user(db, user_id)
