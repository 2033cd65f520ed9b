"""User preferences repository for database operations."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from learnflow import models


class UserPreferencesRepository:
    """Repository for UserPreferences database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_by_user_id(self, user_id: int) -> models.UserPreferences | None:
        stmt = select(models.UserPreferences).where(models.UserPreferences.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def create(self, user_id: int, name: str = "") -> models.UserPreferences:
        preferences = models.UserPreferences(user_id=user_id, name=name)
        self.db.add(preferences)
        self.db.flush()
        self.db.refresh(preferences)
        return preferences
