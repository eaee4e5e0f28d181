"""Shared fixtures: an in-memory database, a seeded user and an API client."""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from core.auth import Principal, get_current_principal
from database import Database, models
from main import create_app


@pytest.fixture
def database():
    """Fresh in-memory SQLite database per test."""
    db = Database("sqlite://")
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    session = database.WriteSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user(db_session):
    """An onboarded user with a complete profile."""
    u = models.User(
        email="alex@example.com",
        name="Alex Doe",
        age=29,
        sex="male",
        height=180.0,
        weight=82.5,
        target_weight=76.0,
        starting_weight=85.0,
        goal_type="weight_loss",
        experience_level="intermediate",
        preferred_workout_days=["monday", "wednesday", "friday"],
        weak_points=["legs"],
        favorite_foods=["rice", "chicken"],
        allergies=["peanuts"],
        target_date=datetime(2027, 3, 1),
        has_completed_onboarding=True,
    )
    db_session.add(u)
    db_session.commit()
    db_session.refresh(u)
    return u


@pytest.fixture
def session_token(db_session, user):
    token = "session-token-alex"
    db_session.add(models.Session(
        session_token=token,
        user_id=user.id,
        expires=datetime.utcnow() + timedelta(days=1),
    ))
    db_session.commit()
    return token


@pytest.fixture
def auth_headers(session_token):
    return {"Authorization": f"Bearer {session_token}"}


@pytest.fixture
def app(database):
    application = create_app(database)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def ghost_principal(app):
    """Authenticate as a principal whose user row does not exist."""
    principal = Principal(id=9999, email="ghost@example.com")
    app.dependency_overrides[get_current_principal] = lambda: principal
    return principal


def add_plan(session, model, user_id, document, created_at=None, plan_name="Plan"):
    """Insert a plan row directly, bypassing the API."""
    row = model(
        user_id=user_id,
        plan_name=plan_name,
        plan=document,
        start_date=datetime.utcnow(),
        created_at=created_at or datetime.utcnow(),
    )
    session.add(row)
    session.commit()
    session.refresh(row)
    return row


def user_columns(session, user_id, exclude=()):
    """Snapshot every column of a user row, read fresh from the database."""
    session.expire_all()
    u = session.get(models.User, user_id)
    return {
        column.key: getattr(u, column.key)
        for column in models.User.__table__.columns
        if column.key not in exclude
    }
