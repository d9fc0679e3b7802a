import random

import pytest

from app.enums import DayOfWeek, Goal, MealType, WEEK_DAYS
from app.services.catalog import EXERCISES, MEALS, DAILY_EXERCISE_COUNTS
from app.services.meal_generator import MealGenerator
from app.services.workout_generator import WorkoutGenerator
from app.utils.errors import ValidationError


@pytest.mark.parametrize("goal", list(Goal))
def test_daily_workout_has_no_duplicates(goal: Goal) -> None:
    generator = WorkoutGenerator(rng=random.Random(3))
    for _ in range(25):
        for day in WEEK_DAYS:
            names = [e["name"] for e in generator.generate_daily_workout(goal.value, day)]
            assert len(names) == len(set(names))
            assert len(names) == DAILY_EXERCISE_COUNTS[goal][day]


def test_daily_counts() -> None:
    generator = WorkoutGenerator()
    assert len(generator.generate_daily_workout("weight_loss", DayOfWeek.MONDAY)) == 5
    assert len(generator.generate_daily_workout("weight_loss", DayOfWeek.SUNDAY)) == 3
    assert len(generator.generate_daily_workout("muscle_gain", DayOfWeek.MONDAY)) == 6
    assert len(generator.generate_daily_workout("maintenance", DayOfWeek.SATURDAY)) == 5


def test_selection_truncated_to_catalog_size() -> None:
    generator = WorkoutGenerator(rng=random.Random(1))
    catalog = EXERCISES[Goal.MAINTENANCE]
    assert len(generator.select_exercises(catalog, 50)) == len(catalog)


def test_seeded_generators_are_reproducible() -> None:
    first = WorkoutGenerator(rng=random.Random(42)).generate_weekly_workouts("muscle_gain")
    second = WorkoutGenerator(rng=random.Random(42)).generate_weekly_workouts("muscle_gain")
    assert first == second
    assert list(first) == [day.value for day in WEEK_DAYS]


def test_exercise_duration_only_when_set() -> None:
    running = next(e for e in EXERCISES[Goal.WEIGHT_LOSS] if e.duration_minutes)
    strength = next(e for e in EXERCISES[Goal.MUSCLE_GAIN] if e.duration_minutes is None)
    assert running.to_dict()["duration_minutes"] == running.duration_minutes
    assert "duration_minutes" not in strength.to_dict()


def test_unknown_goal_rejected() -> None:
    with pytest.raises(ValidationError):
        WorkoutGenerator().generate_daily_workout("cardio", DayOfWeek.MONDAY)
    with pytest.raises(ValidationError):
        MealGenerator().generate_daily_meals("cardio", 2000)


def test_snack_count_threshold() -> None:
    assert MealGenerator.snack_count(150) == 1
    assert MealGenerator.snack_count(151) == 2


@pytest.mark.parametrize("target, snacks", [(1555, 2), (1000, 1), (1500, 1), (1504, 1), (1505, 2)])
def test_snack_count_follows_target(target: int, snacks: int) -> None:
    meals = MealGenerator(rng=random.Random(5)).generate_daily_meals("maintenance", target)
    assert len(meals["snacks"]) == snacks


def test_total_calories_sums_selected_entries() -> None:
    meals = MealGenerator(rng=random.Random(9)).generate_daily_meals("weight_loss", 1555)
    expected = (
        meals["breakfast"]["calories"]
        + meals["lunch"]["calories"]
        + meals["dinner"]["calories"]
        + sum(s["calories"] for s in meals["snacks"])
    )
    assert meals["totalCalories"] == expected


def test_meals_come_from_goal_catalog() -> None:
    meals = MealGenerator(rng=random.Random(11)).generate_daily_meals("muscle_gain", 3000)
    for slot in ("breakfast", "lunch", "dinner"):
        names = {option.name for option in MEALS[Goal.MUSCLE_GAIN][MealType(slot)]}
        assert meals[slot]["name"] in names


def test_weekly_meals_cover_every_day() -> None:
    week = MealGenerator(rng=random.Random(2)).generate_weekly_meals("maintenance", 2200)
    assert list(week) == [day.value for day in WEEK_DAYS]


def test_plank_holds_are_timed_in_seconds() -> None:
    planks = {
        goal: next(e for e in EXERCISES[goal] if e.name == "Plank")
        for goal in Goal
    }
    assert planks[Goal.WEIGHT_LOSS].to_dict()["duration_seconds"] == 60
    assert planks[Goal.MUSCLE_GAIN].duration_seconds == 45
    assert planks[Goal.MAINTENANCE].duration_seconds == 45
    assert all("duration_minutes" not in plank.to_dict() for plank in planks.values())
