import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENV"] = "test"
os.environ["SENTRY_DSN"] = ""

import random

import pytest
from fastapi.testclient import TestClient

import app.models  # noqa: F401
from app.database import Base, get_engine, get_session_factory
from app.schemas.user import ProfileCreate
from app.services.meal_generator import MealGenerator
from app.services.plan_generator import WeeklyPlanGenerator
from app.services.profile_service import create_profile
from app.services.workout_generator import WorkoutGenerator


SCENARIO_PROFILE = {
    "name": "Jane Doe",
    "age": 30,
    "gender": "female",
    "height": 165,
    "weight": 65,
    "goal": "weight_loss",
}


@pytest.fixture(autouse=True)
def reset_database():
    engine = get_engine()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user(db):
    return create_profile(db, ProfileCreate(**SCENARIO_PROFILE))


@pytest.fixture
def other_user(db):
    return create_profile(db, ProfileCreate(**{**SCENARIO_PROFILE, "name": "John Roe", "gender": "male"}))


@pytest.fixture
def plan_generator() -> WeeklyPlanGenerator:
    return WeeklyPlanGenerator(
        workout_generator=WorkoutGenerator(rng=random.Random(7)),
        meal_generator=MealGenerator(rng=random.Random(7)),
    )
