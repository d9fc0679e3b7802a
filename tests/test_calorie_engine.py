import pytest

from app.services.calorie_engine import (
    calculate_bmr,
    calculate_daily_calories,
    calories_for_profile,
    split_calories,
)
from app.utils.errors import ValidationError
from app.utils.rounding import round_half_up


def test_female_weight_loss_target() -> None:
    assert calculate_bmr(30, 65, 165, "female") == pytest.approx(1370.25)
    assert calculate_daily_calories(30, 65, 165, "female", "weight_loss") == 1555


def test_target_is_deterministic() -> None:
    results = {calculate_daily_calories(30, 65, 165, "female", "weight_loss") for _ in range(20)}
    assert results == {1555}


def test_gender_defaults_to_male_constant() -> None:
    male = calculate_bmr(30, 80, 180, "male")
    assert male == pytest.approx(1780)
    assert calculate_bmr(30, 80, 180, None) == male
    assert calculate_bmr(30, 80, 180, "other") == male
    assert calculate_bmr(30, 80, 180, "Female") == pytest.approx(1614)


def test_goal_adjustments() -> None:
    assert calculate_daily_calories(30, 80, 180, "male", "maintenance") == 2670
    assert calculate_daily_calories(30, 80, 180, "male", "muscle_gain") == 2970
    assert calculate_daily_calories(30, 80, 180, "male", "weight_loss") == 2170


def test_activity_multiplier_override() -> None:
    assert calculate_daily_calories(30, 80, 180, "male", "maintenance", activity_multiplier=1.2) == 2136


def test_unknown_goal_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        calculate_daily_calories(30, 80, 180, "male", "bulk")
    assert exc_info.value.status_code == 400


def test_calories_for_profile(user) -> None:
    assert calories_for_profile(user) == 1555


def test_split_calories_rounds_half_up() -> None:
    assert split_calories(1555) == {"breakfast": 389, "lunch": 544, "dinner": 467, "snacks": 156}


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2
    assert round_half_up(-2.5) == -2
