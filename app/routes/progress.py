"""Smart Fitness Planner API - Progress Routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_path_user
from app.models.user import User
from app.schemas.progress import ProgressResponse
from app.services.progress import progress_service

router = APIRouter()


@router.get("/users/{user_id}/progress", response_model=ProgressResponse)
def get_progress(
    user: User = Depends(get_path_user),
    db: Session = Depends(get_db)
):
    """Completion rates, calories, streak and achievements, recomputed from stored plans."""
    return progress_service.get_progress(db, user)
