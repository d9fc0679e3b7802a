from datetime import date

from app.enums import DayOfWeek, WEEK_DAYS
from app.services.progress import ProgressService
from app.services.weight_tracking import add_weight_entry


def make_plan(day: str, exercises: int = 4, done=(), meals=(), plan_id: int = 1) -> dict:
    return {
        "id": plan_id,
        "day": day,
        "exercises": [{"name": f"Exercise {i}"} for i in range(exercises)],
        "meals": {
            "breakfast": {"calories": 300},
            "lunch": {"calories": 500},
            "dinner": {"calories": 600},
            "snacks": [{"calories": 100}, {"calories": 150}],
            "totalCalories": 1650,
        },
        "completed_status": {"exercises": list(done), "meals": list(meals)},
    }


def test_day_percentages() -> None:
    service = ProgressService()
    plan = make_plan("Monday", exercises=4, done=[0, 2], meals=["breakfast"])
    assert service.workout_completion(plan) == 50
    assert service.meal_completion(plan) == 25


def test_percentages_capped_and_distinct() -> None:
    service = ProgressService()
    plan = make_plan("Monday", exercises=2, done=[0, 0, 1, 5])
    assert service.workout_completion(plan) == 100
    assert service.workout_completion(make_plan("Monday", exercises=0)) == 0


def test_consumed_calories_counts_all_snacks() -> None:
    service = ProgressService()
    plan = make_plan("Monday", meals=["lunch", "snacks"])
    assert service.consumed_calories(plan) == 750
    assert service.calorie_target(plan) == 1650


def test_weekly_stats() -> None:
    service = ProgressService()
    plans = [
        make_plan("Monday", exercises=4, done=[0, 1], meals=["breakfast", "lunch"]),
        make_plan("Tuesday", exercises=4, done=[], meals=[]),
        make_plan("Sunday", exercises=0),
    ]
    weekly = service.weekly_stats(plans)

    assert weekly["total_exercises"] == 8
    assert weekly["completed_exercises"] == 2
    assert weekly["total_meals"] == 12
    assert weekly["completed_meals"] == 2
    assert weekly["workout_completion_rate"] == 25.0
    assert weekly["meal_completion_rate"] == 16.67
    assert weekly["average_completion"] == 21
    assert weekly["workout_days"] == 2
    assert weekly["calories_burned_estimate"] == 300
    assert weekly["total_calories_target"] == 4950


def test_streak_walks_back_and_wraps() -> None:
    service = ProgressService()
    plans = [make_plan(day.value) for day in WEEK_DAYS]
    plans[0]["completed_status"]["exercises"] = [0]   # Monday
    plans[6]["completed_status"]["exercises"] = [1]   # Sunday
    plans[5]["completed_status"]["exercises"] = [2]   # Saturday

    assert service.current_streak(plans, DayOfWeek.MONDAY) == 3
    assert service.current_streak(plans, DayOfWeek.TUESDAY) == 0


def test_streak_never_exceeds_week() -> None:
    service = ProgressService()
    plans = [make_plan(day.value, done=[0]) for day in WEEK_DAYS]
    assert service.current_streak(plans, DayOfWeek.THURSDAY) == 7


def test_achievements() -> None:
    service = ProgressService()
    plans = [make_plan(day.value, exercises=2, done=[0, 1], meals=["breakfast", "lunch", "dinner", "snacks"])
             for day in WEEK_DAYS]
    summary = service.summarize(plans, DayOfWeek.SUNDAY, weight_lost=2.5)
    achievements = {a["key"]: a for a in summary["achievements"]}

    assert achievements["first_week"]["earned"] is True
    assert achievements["ten_workouts"]["earned"] is True
    assert achievements["weight_loss"] == {
        "key": "weight_loss", "title": "Lose 5 kg", "earned": False, "progress": 50
    }
    assert achievements["streak"]["progress"] == 23


def test_first_week_needs_all_days() -> None:
    service = ProgressService()
    plans = [make_plan("Monday", exercises=1, done=[0], meals=["breakfast", "lunch", "dinner", "snacks"])]
    achievements = {a["key"]: a for a in service.summarize(plans, DayOfWeek.MONDAY)["achievements"]}
    assert achievements["first_week"]["earned"] is False
    assert achievements["first_week"]["progress"] == 100


def test_get_progress_from_storage(db, user, plan_generator) -> None:
    plan_generator.generate_weekly_plan(db, user)
    add_weight_entry(db, user.id, 68.0, date(2024, 1, 1))

    progress = ProgressService().get_progress(db, user, on_date=date(2024, 1, 1))

    assert progress["user_id"] == user.id
    assert progress["today"] == "Monday"
    assert progress["daily_calorie_target"] == 1555
    assert progress["weight_lost"] == 3.0
    assert len(progress["days"]) == 7
    assert progress["current_streak"] == 0
