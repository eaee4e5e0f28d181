"""Tests for the shallow progress reset and the transactional full reset."""

import pytest
from sqlalchemy.exc import SQLAlchemyError

import services.reset_service as reset_module
from core.exceptions import DatabaseError
from core.repository import workout_plans, nutrition_plans
from database import models
from services.reset_service import reset_service
from conftest import add_plan


def _seed_plans(session, user_id):
    add_plan(session, models.WorkoutPlan, user_id, {"days": ["push", "pull"]})
    add_plan(session, models.WorkoutPlan, user_id, {"days": ["legs"]})
    add_plan(session, models.NutritionPlan, user_id, {"dailyTargets": {"calories": 2100}})


def _plan_counts(session, user_id):
    return (
        workout_plans(session).count_for_user(user_id),
        nutrition_plans(session).count_for_user(user_id),
    )


def test_reset_progress_clears_progress_fields(client, auth_headers, db_session, user):
    _seed_plans(db_session, user.id)

    res = client.post("/api/user/reset-progress", headers=auth_headers)

    assert res.status_code == 200
    assert res.json() == {"success": True}
    db_session.expire_all()
    stored = db_session.get(models.User, user.id)
    assert stored.weight is None
    assert stored.height is None
    assert stored.goal_type is None
    assert stored.experience_level is None
    assert stored.target_date is None
    assert stored.weak_points == []
    assert stored.favorite_foods == []
    assert stored.allergies == []
    assert stored.has_completed_onboarding is False
    # the shallow reset leaves these alone
    assert stored.age == 29
    assert stored.sex == "male"
    assert stored.preferred_workout_days == ["monday", "wednesday", "friday"]
    assert _plan_counts(db_session, user.id) == (0, 0)


def test_reset_progress_unknown_user_returns_500(client, ghost_principal):
    res = client.post("/api/user/reset-progress")
    assert res.status_code == 500
    assert res.json()["error"] == "Failed to reset progress"


def test_full_reset_clears_profile_and_plans(client, auth_headers, db_session, user):
    _seed_plans(db_session, user.id)

    res = client.post("/api/user/reset", headers=auth_headers)

    assert res.status_code == 200
    assert res.json() == {"message": "User progress and onboarding status reset successfully."}
    db_session.expire_all()
    stored = db_session.get(models.User, user.id)
    for field in ("age", "sex", "height", "weight", "target_weight", "starting_weight",
                  "goal_type", "experience_level", "target_date"):
        assert getattr(stored, field) is None, field
    for field in ("preferred_workout_days", "weak_points", "favorite_foods", "allergies"):
        assert getattr(stored, field) == [], field
    assert stored.has_completed_onboarding is False
    assert stored.email == "alex@example.com"
    assert stored.name == "Alex Doe"
    assert _plan_counts(db_session, user.id) == (0, 0)

    res = client.get("/api/user/workout/plan", headers=auth_headers)
    assert res.status_code == 404


def test_full_reset_keeps_other_users_plans(db_session, user):
    other = models.User(email="sam@example.com", has_completed_onboarding=True)
    db_session.add(other)
    db_session.commit()
    _seed_plans(db_session, user.id)
    add_plan(db_session, models.WorkoutPlan, other.id, {"days": ["run"]})

    reset_service.full_reset(db_session, user.id)

    assert _plan_counts(db_session, user.id) == (0, 0)
    assert _plan_counts(db_session, other.id) == (1, 0)


def test_full_reset_is_all_or_nothing(db_session, user, monkeypatch):
    _seed_plans(db_session, user.id)

    def failing_clear(*args, **kwargs):
        raise SQLAlchemyError("simulated failure while clearing profile")

    monkeypatch.setattr(reset_module, "clear_profile", failing_clear)

    with pytest.raises(DatabaseError) as exc_info:
        reset_service.full_reset(db_session, user.id)
    assert exc_info.value.status_code == 500

    db_session.expire_all()
    assert _plan_counts(db_session, user.id) == (2, 1)
    stored = db_session.get(models.User, user.id)
    assert stored.has_completed_onboarding is True
    assert stored.weight == 82.5


def test_full_reset_missing_user_returns_500(client, ghost_principal):
    res = client.post("/api/user/reset")
    assert res.status_code == 500
    assert "error" in res.json()
