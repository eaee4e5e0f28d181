"""Tests for the status and dashboard aggregations."""

from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest

from database import models
from services.status_service import (
    KG_TO_LB,
    daily_calories,
    days_to_goal,
    weight_progress,
    workout_completion,
)
from conftest import add_plan


def test_status_without_plans(client, auth_headers, user):
    res = client.get("/api/user/status", headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == {
        "hasCompletedOnboarding": True,
        "hasWorkoutPlan": False,
        "hasNutritionPlan": False,
        "workoutPlan": None,
        "nutritionPlan": None,
    }


def test_status_reports_latest_documents(client, auth_headers, db_session, user):
    add_plan(db_session, models.WorkoutPlan, user.id, {"split": "PPL"})
    add_plan(db_session, models.NutritionPlan, user.id, {"dailyTargets": {"calories": 2000}})

    body = client.get("/api/user/status", headers=auth_headers).json()

    assert body["hasWorkoutPlan"] is True
    assert body["hasNutritionPlan"] is True
    assert body["workoutPlan"] == {"split": "PPL"}
    assert body["nutritionPlan"] == {"dailyTargets": {"calories": 2000}}


def test_status_treats_null_latest_plan_as_absent(client, auth_headers, db_session, user):
    now = datetime.utcnow()
    add_plan(db_session, models.WorkoutPlan, user.id, {"split": "old"}, created_at=now - timedelta(days=1))
    add_plan(db_session, models.WorkoutPlan, user.id, None, created_at=now)

    body = client.get("/api/user/status", headers=auth_headers).json()

    assert body["hasWorkoutPlan"] is False
    assert body["workoutPlan"] is None


def test_status_treats_empty_document_as_absent(client, auth_headers, db_session, user):
    add_plan(db_session, models.NutritionPlan, user.id, {})
    body = client.get("/api/user/status", headers=auth_headers).json()
    assert body["hasNutritionPlan"] is False


def test_status_unknown_user_returns_404(client, ghost_principal):
    res = client.get("/api/user/status")
    assert res.status_code == 404
    assert res.json() == {"error": "User not found"}


def test_dashboard_figures(client, auth_headers, db_session, user):
    add_plan(db_session, models.WorkoutPlan, user.id, {"completedWorkouts": 3, "totalWorkouts": 12})
    add_plan(db_session, models.NutritionPlan, user.id, {"dailyTargets": {"calories": 2200}})

    res = client.get("/api/user/dashboard", headers=auth_headers)

    assert res.status_code == 200
    body = res.json()
    assert body["hasWorkoutPlan"] is True
    assert body["dailyCalories"] == 2200
    assert body["workoutCompletion"] == pytest.approx(25.0)
    assert body["weightProgress"]["current"] == pytest.approx(82.5 * KG_TO_LB)
    assert body["weightProgress"]["start"] == pytest.approx(85.0 * KG_TO_LB)
    assert body["weightProgress"]["goal"] == pytest.approx(76.0 * KG_TO_LB)
    assert body["user"]["email"] == "alex@example.com"
    assert body["user"]["targetWeight"] == pytest.approx(76.0 * KG_TO_LB)


def test_dashboard_unknown_user_returns_404(client, ghost_principal):
    assert client.get("/api/user/dashboard").status_code == 404


def test_days_to_goal_rounds_up():
    now = datetime(2026, 1, 1, 12, 0)
    assert days_to_goal(datetime(2026, 1, 3, 0, 0), now) == 2
    assert days_to_goal(datetime(2026, 1, 11, 12, 0), now) == 10
    assert days_to_goal(None, now) == 0


def test_weight_progress_defaults_goal_from_goal_type():
    losing = SimpleNamespace(weight=100.0, starting_weight=None, target_weight=None,
                             goal_type="weight_loss", target_date=None)
    gaining = SimpleNamespace(weight=100.0, starting_weight=None, target_weight=None,
                              goal_type="muscle_gain", target_date=None)
    assert weight_progress(losing).goal == pytest.approx(90.0 * KG_TO_LB)
    assert weight_progress(gaining).goal == pytest.approx(110.0 * KG_TO_LB)
    assert weight_progress(losing).start == pytest.approx(100.0 * KG_TO_LB)
    assert weight_progress(SimpleNamespace(weight=None)) is None


def test_document_figures_tolerate_missing_keys():
    assert daily_calories(None) == 0
    assert daily_calories({"dailyTargets": "n/a"}) == 0
    assert workout_completion({"completedWorkouts": 2}) == 0
    assert workout_completion({"completedWorkouts": 2, "totalWorkouts": 0}) == 0
    assert workout_completion({"completedWorkouts": "3", "totalWorkouts": 12}) == 0
    assert workout_completion({"completedWorkouts": 3, "totalWorkouts": "12"}) == 0
    assert workout_completion({"completedWorkouts": True, "totalWorkouts": 4}) == 0
    assert daily_calories({"dailyTargets": {"calories": "2000"}}) == 0


def test_dashboard_tolerates_non_numeric_plan_counts(client, auth_headers, db_session, user):
    add_plan(db_session, models.WorkoutPlan, user.id, {"completedWorkouts": "3", "totalWorkouts": 12})

    res = client.get("/api/user/dashboard", headers=auth_headers)

    assert res.status_code == 200
    assert res.json()["hasWorkoutPlan"] is True
    assert res.json()["workoutCompletion"] == 0
