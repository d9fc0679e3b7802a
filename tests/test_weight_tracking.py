from datetime import date

import pytest

from app.services.weight_tracking import (
    add_weight_entry,
    delete_weight_entry,
    get_latest_weight,
    get_starting_weight,
    get_weight_history,
)
from app.utils.errors import NotFoundError, ValidationError


def test_same_date_is_replaced(db, user) -> None:
    first = add_weight_entry(db, user.id, 65.0, date(2024, 1, 1), "morning")
    second = add_weight_entry(db, user.id, 64.4, date(2024, 1, 1))

    assert first.id == second.id
    history = get_weight_history(db, user.id)
    assert len(history) == 1
    assert history[0].weight == 64.4
    assert history[0].notes is None


def test_history_newest_first_with_limit(db, user) -> None:
    for day, weight in ((1, 65.0), (3, 64.0), (2, 64.5)):
        add_weight_entry(db, user.id, weight, date(2024, 1, day))

    assert [e.recorded_date.day for e in get_weight_history(db, user.id)] == [3, 2, 1]
    assert [e.weight for e in get_weight_history(db, user.id, limit=2)] == [64.0, 64.5]
    assert get_latest_weight(db, user.id).weight == 64.0
    assert get_starting_weight(db, user.id) == 65.0


def test_invalid_weight(db, user) -> None:
    with pytest.raises(ValidationError):
        add_weight_entry(db, user.id, 0, date(2024, 1, 1))


def test_latest_without_entries(db, user) -> None:
    with pytest.raises(NotFoundError):
        get_latest_weight(db, user.id)
    assert get_starting_weight(db, user.id) is None


def test_delete_is_scoped_to_owner(db, user, other_user) -> None:
    entry = add_weight_entry(db, user.id, 65.0, date(2024, 1, 1))

    with pytest.raises(NotFoundError):
        delete_weight_entry(db, other_user.id, entry.id)

    delete_weight_entry(db, user.id, entry.id)
    assert get_weight_history(db, user.id) == []
