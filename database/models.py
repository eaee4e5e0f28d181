"""SQLAlchemy ORM models for the coaching service.

This module defines the database schema used throughout the application:
User, WorkoutPlan, NutritionPlan and Session. Models are plain declarative
classes and intentionally keep behavior-free (no business logic).
"""

from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, Boolean, JSON
from sqlalchemy.orm import declarative_base, declared_attr, relationship
from datetime import datetime

Base = declarative_base()


class User(Base):
    """ORM model representing an application user.

    Height is stored in centimeters and every weight in kilograms. List
    attributes are JSON arrays that default to empty.
    """

    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=True)
    image = Column(String, nullable=True)
    age = Column(Integer, nullable=True)
    sex = Column(String, nullable=True)
    height = Column(Float, nullable=True)
    weight = Column(Float, nullable=True)
    target_weight = Column(Float, nullable=True)
    starting_weight = Column(Float, nullable=True)
    goal_type = Column(String, nullable=True)
    experience_level = Column(String, nullable=True)
    preferred_workout_days = Column(JSON, nullable=False, default=list)
    weak_points = Column(JSON, nullable=False, default=list)
    favorite_foods = Column(JSON, nullable=False, default=list)
    allergies = Column(JSON, nullable=False, default=list)
    target_date = Column(DateTime, nullable=True)
    has_completed_onboarding = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    workout_plans = relationship("WorkoutPlan", back_populates="user", passive_deletes=True)
    nutrition_plans = relationship("NutritionPlan", back_populates="user", passive_deletes=True)


class PlanMixin:
    """Columns shared by both plan tables.

    `plan` is an opaque JSON document; rows are never updated in place, a new
    submission inserts a new row and the latest `created_at` wins.
    """

    id = Column(Integer, primary_key=True, index=True)
    plan_name = Column(String, nullable=True)
    plan = Column(JSON, nullable=True)
    start_date = Column(DateTime, nullable=False, default=datetime.utcnow)
    end_date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @declared_attr
    def user_id(cls):
        return Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)


class WorkoutPlan(PlanMixin, Base):
    """ORM model storing one submitted workout plan document."""

    __tablename__ = "workout_plans"
    user = relationship("User", back_populates="workout_plans")


class NutritionPlan(PlanMixin, Base):
    """ORM model storing one submitted nutrition plan document."""

    __tablename__ = "nutrition_plans"
    user = relationship("User", back_populates="nutrition_plans")


class Session(Base):
    """Server-side session row written by the identity provider's adapter."""

    __tablename__ = "sessions"
    id = Column(Integer, primary_key=True, index=True)
    session_token = Column(String, unique=True, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    expires = Column(DateTime, nullable=False)
