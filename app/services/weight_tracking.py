# app/services/weight_tracking.py
"""
Smart Fitness Planner API - Weight Tracking Service.

One weight entry per user per date; writing the same date again replaces it.
"""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from app.database import storage_operation
from app.models.weight_entry import WeightEntry
from app.utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def add_weight_entry(
    db: Session,
    user_id: int,
    weight: float,
    recorded_date: date,
    notes: Optional[str] = None,
) -> WeightEntry:
    """
    Upsert the entry keyed on (user_id, recorded_date).

    Raises:
        ValidationError: If weight is not positive.
    """
    if weight is None or weight <= 0:
        raise ValidationError("Valid weight is required")

    with storage_operation(db, "save weight entry"):
        entry = (
            db.query(WeightEntry)
            .filter(WeightEntry.user_id == user_id, WeightEntry.recorded_date == recorded_date)
            .first()
        )
        if entry is None:
            entry = WeightEntry(user_id=user_id, recorded_date=recorded_date)
            db.add(entry)
        entry.weight = weight
        entry.notes = notes or None
        db.commit()
        db.refresh(entry)

    logger.info(f"Recorded weight {weight} kg for user {user_id} on {recorded_date}")
    return entry


def get_weight_history(db: Session, user_id: int, limit: Optional[int] = None) -> List[WeightEntry]:
    """Entries newest first, optionally limited."""
    with storage_operation(db, "fetch weight history"):
        query = (
            db.query(WeightEntry)
            .filter(WeightEntry.user_id == user_id)
            .order_by(WeightEntry.recorded_date.desc())
        )
        if limit:
            query = query.limit(limit)
        return query.all()


def get_latest_weight(db: Session, user_id: int) -> WeightEntry:
    history = get_weight_history(db, user_id, limit=1)
    if not history:
        raise NotFoundError("No weight entries found")
    return history[0]


def get_starting_weight(db: Session, user_id: int) -> Optional[float]:
    """Earliest recorded weight, or None without history."""
    with storage_operation(db, "fetch weight history"):
        entry = (
            db.query(WeightEntry)
            .filter(WeightEntry.user_id == user_id)
            .order_by(WeightEntry.recorded_date.asc())
            .first()
        )
    return entry.weight if entry is not None else None


def delete_weight_entry(db: Session, user_id: int, entry_id: int) -> None:
    with storage_operation(db, "delete weight entry"):
        entry = (
            db.query(WeightEntry)
            .filter(WeightEntry.id == entry_id, WeightEntry.user_id == user_id)
            .first()
        )
        if entry is None:
            raise NotFoundError("Weight entry not found")
        db.delete(entry)
        db.commit()

    logger.info(f"Deleted weight entry {entry_id} for user {user_id}")
