import pytest

from app.models.workout_meal_plan import WorkoutMealPlan
from app.services import completion_tracker as tracker_module
from app.services.completion_tracker import CompletionTracker, completion_tracker, toggle_member
from app.services.plan_generator import get_plan_by_id
from app.utils.errors import ConflictError, NotFoundError, ValidationError


@pytest.fixture
def monday_id(db, user, plan_generator) -> int:
    _, results = plan_generator.generate_weekly_plan(db, user)
    return results[0]["id"]


def test_toggle_member() -> None:
    assert toggle_member([0, 1], 2, True) == [0, 1, 2]
    assert toggle_member([0, 1], 1, True) == [0, 1]
    assert toggle_member([0, 1], 0, False) == [1]
    assert toggle_member([0, 1], 5, False) == [0, 1]


def test_adds_exercise_index(db, user, monday_id) -> None:
    completion_tracker.set_exercise_completion(db, user.id, monday_id, 0, True)
    completion_tracker.set_exercise_completion(db, user.id, monday_id, 1, True)
    assert completion_tracker.set_exercise_completion(db, user.id, monday_id, 2, True) == [0, 1, 2]


def test_marking_twice_is_idempotent(db, user, monday_id) -> None:
    first = completion_tracker.set_exercise_completion(db, user.id, monday_id, 3, True)
    second = completion_tracker.set_exercise_completion(db, user.id, monday_id, 3, True)
    assert first == second == [3]


def test_mark_then_unmark_restores_state(db, user, monday_id) -> None:
    completion_tracker.set_meal_completion(db, user.id, monday_id, "breakfast", True)
    completion_tracker.set_meal_completion(db, user.id, monday_id, "snacks", True)
    assert completion_tracker.set_meal_completion(db, user.id, monday_id, "snacks", False) == ["breakfast"]

    completion_tracker.set_exercise_completion(db, user.id, monday_id, 1, True)
    assert completion_tracker.set_exercise_completion(db, user.id, monday_id, 1, False) == []


def test_unchanged_toggle_does_not_write(db, user, monday_id) -> None:
    completion_tracker.set_exercise_completion(db, user.id, monday_id, 0, False)
    db.expire_all()
    assert get_plan_by_id(db, user.id, monday_id).version == 1


def test_exercise_index_out_of_range(db, user, monday_id) -> None:
    count = len(get_plan_by_id(db, user.id, monday_id).exercises)
    for index in (-1, count):
        with pytest.raises(ValidationError):
            completion_tracker.set_exercise_completion(db, user.id, monday_id, index, True)


def test_unknown_meal_type(db, user, monday_id) -> None:
    with pytest.raises(ValidationError) as exc_info:
        completion_tracker.set_meal_completion(db, user.id, monday_id, "brunch", True)
    assert "mealType must be one of" in exc_info.value.message


def test_other_users_plan_not_found(db, other_user, monday_id) -> None:
    with pytest.raises(NotFoundError):
        completion_tracker.set_exercise_completion(db, other_user.id, monday_id, 0, True)


def _race_on(monkeypatch, races: int):
    """Make the plan's version move under the tracker ``races`` times."""
    real_get_plan = tracker_module.get_plan_by_id
    calls = {"count": 0}

    def racing_get_plan(db, user_id, plan_id):
        plan = real_get_plan(db, user_id, plan_id)
        if calls["count"] < races:
            calls["count"] += 1
            db.query(WorkoutMealPlan).filter(WorkoutMealPlan.id == plan_id).update(
                {WorkoutMealPlan.version: WorkoutMealPlan.version + 1},
                synchronize_session=False,
            )
            db.commit()
        return plan

    monkeypatch.setattr(tracker_module, "get_plan_by_id", racing_get_plan)
    return calls


def test_lost_race_is_retried(db, user, monday_id, monkeypatch) -> None:
    calls = _race_on(monkeypatch, races=1)
    assert CompletionTracker(max_attempts=3).set_exercise_completion(db, user.id, monday_id, 0, True) == [0]
    assert calls["count"] == 1

    db.expire_all()
    plan = get_plan_by_id(db, user.id, monday_id)
    assert plan.completed_status["exercises"] == [0]
    assert plan.version == 3


def test_conflict_after_max_attempts(db, user, monday_id, monkeypatch) -> None:
    _race_on(monkeypatch, races=10)
    with pytest.raises(ConflictError) as exc_info:
        CompletionTracker(max_attempts=2).set_exercise_completion(db, user.id, monday_id, 0, True)
    assert exc_info.value.status_code == 409

    db.expire_all()
    assert get_plan_by_id(db, user.id, monday_id).completed_status["exercises"] == []
