# app/services/profile_service.py
"""
Smart Fitness Planner API - Profile Service.

Create, read and update the user's fitness profile.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.database import storage_operation
from app.enums import Gender, parse_goal
from app.models.user import User
from app.schemas.user import ProfileCreate, ProfileUpdate, ProfileResponse
from app.services.calorie_engine import calculate_bmr, calories_for_profile
from app.utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

MIN_AGE = 10
MAX_AGE = 100
NULLABLE_FIELDS = {"gender"}


def validate_profile_values(values: Dict[str, Any]) -> None:
    """
    Check profile fields present in ``values``.

    Raises:
        ValidationError: Naming the first violated constraint.
    """
    age = values.get("age")
    if age is not None and not (MIN_AGE <= age <= MAX_AGE):
        raise ValidationError(f"Age must be between {MIN_AGE} and {MAX_AGE}")
    for field in ("height", "weight"):
        value = values.get(field)
        if value is not None and value <= 0:
            raise ValidationError(f"{field.capitalize()} must be a positive number")
    if values.get("goal") is not None:
        parse_goal(values["goal"])
    gender = values.get("gender")
    if gender is not None and gender not in {g.value for g in Gender}:
        raise ValidationError("Gender must be one of: male, female, other")


def _plain(data) -> Dict[str, Any]:
    # Enum members are stored by value
    return {
        key: (value.value if hasattr(value, "value") else value)
        for key, value in data.model_dump(exclude_unset=True).items()
    }


def create_profile(db: Session, data: ProfileCreate) -> User:
    values = _plain(data)
    validate_profile_values(values)

    user = User(**values)
    with storage_operation(db, "save profile"):
        db.add(user)
        db.commit()
        db.refresh(user)

    logger.info(f"Created profile {user.id} ({user.goal})")
    return user


def get_user(db: Session, user_id: int) -> User:
    """Profile by id, or NotFoundError."""
    with storage_operation(db, "fetch profile"):
        user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def get_profile(db: Session, user_id: Optional[int] = None) -> User:
    """
    Profile by id, or the latest created profile when no id is given.

    Raises:
        NotFoundError: "User not found" for an unknown id, "No profile found"
            when there are no profiles at all.
    """
    if user_id is not None:
        return get_user(db, user_id)

    with storage_operation(db, "fetch profile"):
        user = db.query(User).order_by(User.id.desc()).first()
    if user is None:
        raise NotFoundError("No profile found")
    return user


def update_profile(db: Session, user_id: int, data: ProfileUpdate) -> User:
    """
    Apply the provided fields to an existing profile.

    An explicit ``null`` clears ``gender``; the other fields cannot be cleared.

    Raises:
        ValidationError: If no field is provided, a required field is null,
            or a value is out of range.
        NotFoundError: If the profile does not exist.
    """
    values = _plain(data)
    if not values:
        raise ValidationError("No updates provided")
    for field, value in values.items():
        if value is None and field not in NULLABLE_FIELDS:
            raise ValidationError(f"{field.capitalize()} cannot be null")
    validate_profile_values(values)

    user = get_user(db, user_id)
    for field, value in values.items():
        setattr(user, field, value)

    with storage_operation(db, "update profile"):
        db.commit()
        db.refresh(user)

    logger.info(f"Updated profile {user.id}: {sorted(values)}")
    return user


def to_profile_response(user: User) -> ProfileResponse:
    """Profile plus the derived BMR and daily calorie target."""
    return ProfileResponse(
        id=user.id,
        name=user.name,
        age=user.age,
        gender=user.gender,
        height=user.height,
        weight=user.weight,
        goal=user.goal,
        bmr=calculate_bmr(user.age, user.weight, user.height, user.gender),
        daily_calorie_target=calories_for_profile(user),
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
