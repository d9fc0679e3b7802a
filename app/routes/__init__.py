"""Smart Fitness Planner API - Routes Package."""

from app.routes import (
    profile,
    plans,
    weight,
    progress,
)

__all__ = [
    "profile",
    "plans",
    "weight",
    "progress",
]
