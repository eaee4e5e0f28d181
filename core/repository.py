"""Repository classes for database access.

Services go through these instead of building queries themselves. Plan
tables share one repository type since their columns are identical.
"""

from sqlalchemy.orm import Session
from typing import TypeVar, Generic, Type, Optional, Any
from database.models import Base, User, WorkoutPlan, NutritionPlan

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Primary-key access and persistence for one model.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Session the queries run in.
    """

    def __init__(self, model: Type[T], session: Session):
        self.model = model
        self.session = session

    def create(self, obj: T) -> T:
        """Insert `obj`, commit and return it with server defaults loaded."""
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def get_by_id(self, id: Any) -> Optional[T]:
        return self.session.get(self.model, id)

    def update(self, obj: T) -> T:
        """Commit pending attribute changes on `obj` and reload it."""
        self.session.commit()
        self.session.refresh(obj)
        return obj


class UserRepository(BaseRepository[User]):
    """User lookups by session identity."""

    def __init__(self, session: Session):
        super().__init__(User, session)

    def get_by_email(self, email: str) -> Optional[User]:
        """Return the user registered under `email`, or None."""
        return self.session.query(User).filter(User.email == email).first()


class PlanRepository(BaseRepository[T]):
    """Queries shared by the workout and nutrition plan tables.

    There is no "active" flag: the current plan is the row with the latest
    `created_at`, ties broken by the higher id.
    """

    def latest_for_user(self, user_id: int) -> Optional[T]:
        """Return the most recently created plan row for a user."""
        return (
            self.session.query(self.model)
            .filter(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .first()
        )

    def count_for_user(self, user_id: int) -> int:
        return self.session.query(self.model).filter(self.model.user_id == user_id).count()

    def delete_for_user(self, user_id: int, commit: bool = True) -> int:
        """Bulk delete a user's plans.

        Args:
            user_id: Owner of the rows to delete.
            commit: Commit immediately. Pass False to leave the delete in
                the caller's open transaction.

        Returns:
            Number of rows deleted.
        """
        deleted = (
            self.session.query(self.model)
            .filter(self.model.user_id == user_id)
            .delete(synchronize_session=False)
        )
        if commit:
            self.session.commit()
        return deleted


def workout_plans(session: Session) -> PlanRepository[WorkoutPlan]:
    return PlanRepository(WorkoutPlan, session)


def nutrition_plans(session: Session) -> PlanRepository[NutritionPlan]:
    return PlanRepository(NutritionPlan, session)
