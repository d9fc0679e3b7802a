import pytest
from sqlalchemy.exc import OperationalError

from app.enums import DayOfWeek, parse_day
from app.models.workout_meal_plan import WorkoutMealPlan
from app.services.completion_tracker import completion_tracker
from app.services.plan_generator import get_plan_by_id, get_plan_for_day, get_plans_for_user
from app.utils.errors import NotFoundError, PersistenceError, ValidationError


def test_first_generation_creates_seven_entries(db, user, plan_generator) -> None:
    target, results = plan_generator.generate_weekly_plan(db, user)

    assert target == 1555
    assert [r["day"] for r in results] == [
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
    ]
    assert not any(r["updated"] for r in results)
    assert db.query(WorkoutMealPlan).filter(WorkoutMealPlan.user_id == user.id).count() == 7

    for plan in get_plans_for_user(db, user.id):
        assert plan.completed_status == {"exercises": [], "meals": []}
        assert plan.meals["totalCalories"] > 0
        assert plan.version == 1


def test_regeneration_updates_in_place_and_keeps_completion(db, user, plan_generator) -> None:
    _, first = plan_generator.generate_weekly_plan(db, user)
    monday_id = first[0]["id"]
    completion_tracker.set_exercise_completion(db, user.id, monday_id, 0, True)
    completion_tracker.set_meal_completion(db, user.id, monday_id, "lunch", True)

    _, second = plan_generator.generate_weekly_plan(db, user)

    assert [r["id"] for r in second] == [r["id"] for r in first]
    assert all(r["updated"] for r in second)
    db.expire_all()
    monday = get_plan_by_id(db, user.id, monday_id)
    assert monday.completed_status == {"exercises": [0], "meals": ["lunch"]}


def test_regeneration_can_reset_completion(db, user, plan_generator) -> None:
    _, first = plan_generator.generate_weekly_plan(db, user)
    monday_id = first[0]["id"]
    completion_tracker.set_exercise_completion(db, user.id, monday_id, 1, True)

    plan_generator.generate_weekly_plan(db, user, reset_completion=True)

    db.expire_all()
    assert get_plan_by_id(db, user.id, monday_id).completed_status == {"exercises": [], "meals": []}


def test_regeneration_bumps_version(db, user, plan_generator) -> None:
    _, results = plan_generator.generate_weekly_plan(db, user)
    plan_generator.generate_weekly_plan(db, user)
    db.expire_all()
    assert get_plan_by_id(db, user.id, results[0]["id"]).version == 2


def test_plans_are_ordered_by_weekday(db, user, plan_generator) -> None:
    plan_generator.generate_weekly_plan(db, user)
    assert [p.day for p in get_plans_for_user(db, user.id)][0] == "Monday"
    assert [p.day for p in get_plans_for_user(db, user.id)][-1] == "Sunday"


def test_day_lookup_by_name_or_index(db, user, plan_generator) -> None:
    plan_generator.generate_weekly_plan(db, user)
    by_name = get_plan_for_day(db, user.id, "Wednesday")
    by_index = get_plan_for_day(db, user.id, 2)
    by_digit = get_plan_for_day(db, user.id, "2")
    assert by_name.id == by_index.id == by_digit.id


def test_day_lookup_without_plan(db, user) -> None:
    with pytest.raises(NotFoundError):
        get_plan_for_day(db, user.id, "Monday")


def test_plan_lookup_is_scoped_to_owner(db, user, other_user, plan_generator) -> None:
    _, results = plan_generator.generate_weekly_plan(db, user)
    with pytest.raises(NotFoundError):
        get_plan_by_id(db, other_user.id, results[0]["id"])


def test_parse_day() -> None:
    assert parse_day("Monday") is DayOfWeek.MONDAY
    assert parse_day(6) is DayOfWeek.SUNDAY
    assert DayOfWeek.FRIDAY.index == 4
    for bad in ("monday", "Funday", 7, "-1", ""):
        with pytest.raises(ValidationError):
            parse_day(bad)


def test_storage_failure_keeps_earlier_days(db, user, plan_generator, monkeypatch) -> None:
    real_commit = db.commit
    calls = {"count": 0}

    def flaky_commit():
        calls["count"] += 1
        if calls["count"] == 4:
            raise OperationalError("INSERT INTO workout_meal_plans", {}, Exception("disk I/O error"))
        real_commit()

    monkeypatch.setattr(db, "commit", flaky_commit)

    with pytest.raises(PersistenceError) as exc_info:
        plan_generator.generate_weekly_plan(db, user)

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Failed to save Thursday plan"
    assert "disk I/O error" in exc_info.value.detail
    assert [p.day for p in get_plans_for_user(db, user.id)] == ["Monday", "Tuesday", "Wednesday"]
