"""Service layer for per-user data: search history, uploads and preferences."""

import logging

from sqlalchemy.orm import Session

from learnflow import models, repositories, schemas
from learnflow.constants import SEARCH_HISTORY_LIMIT

logger = logging.getLogger(__name__)


class UserService:
    """Service for the signed-in user's own records."""

    def __init__(
        self,
        db: Session,
        search_history_repository: repositories.SearchHistoryRepository,
        resource_repository: repositories.ResourceRepository,
        preferences_repository: repositories.UserPreferencesRepository,
    ) -> None:
        self.db = db
        self.search_history_repository = search_history_repository
        self.resource_repository = resource_repository
        self.preferences_repository = preferences_repository

    def record_search(self, user_id: int, request: schemas.SearchHistoryCreate) -> None:
        self.search_history_repository.create(
            user_id=user_id,
            search_query=request.search_query,
            department=request.department,
            resource_type=request.resource_type,
            semester=request.semester,
            year=request.year,
        )
        self.db.commit()

    def get_search_history(self, user_id: int) -> list[schemas.SearchHistory]:
        """The user's most recent searches, newest first."""
        entries = self.search_history_repository.get_recent_for_user(user_id, SEARCH_HISTORY_LIMIT)
        return [schemas.SearchHistory.model_validate(e) for e in entries]

    def get_uploads(self, user_id: int) -> list[schemas.Upload]:
        return [
            schemas.Upload.model_validate(u) for u in self.resource_repository.list_by_user(user_id)
        ]

    def get_preferences(self, user: models.User) -> schemas.UserPreferences:
        """Get preferences, creating defaults (named after the user) on first read."""
        preferences = self._get_or_create_preferences(user)
        self.db.commit()
        return schemas.UserPreferences.model_validate(preferences)

    def update_preferences(
        self, user: models.User, update: schemas.UserPreferencesUpdate
    ) -> schemas.UserPreferences:
        """Apply the fields present in ``update``; everything else is left as is."""
        preferences = self._get_or_create_preferences(user)
        for field, value in update.model_dump(exclude_unset=True).items():
            setattr(preferences, field, value)
        self.db.commit()
        self.db.refresh(preferences)
        logger.info(f"Updated preferences for user {user.id}")
        return schemas.UserPreferences.model_validate(preferences)

    def _get_or_create_preferences(self, user: models.User) -> models.UserPreferences:
        preferences = self.preferences_repository.get_by_user_id(user.id)
        if preferences is None:
            preferences = self.preferences_repository.create(user.id, name=user.first_name)
        return preferences
