"""Smart Fitness Planner API - Utilities Package."""

from app.utils.errors import (
    FitnessPlannerException,
    NotFoundError,
    ValidationError,
    ConflictError,
    PersistenceError,
)
from app.utils.rounding import round_half_up

__all__ = [
    "FitnessPlannerException",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "PersistenceError",
    "round_half_up",
]
