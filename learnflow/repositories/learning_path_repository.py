"""Learning path repository for database operations."""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from learnflow import models

logger = logging.getLogger(__name__)


class LearningPathRepository:
    """Repository for LearningPath database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_by_id(self, path_id: int, user_id: int) -> models.LearningPath | None:
        """Get a learning path by its ID, verifying user ownership."""
        stmt = select(models.LearningPath).where(
            models.LearningPath.id == path_id,
            models.LearningPath.user_id == user_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_for_user(self, user_id: int) -> list[models.LearningPath]:
        """Most recently updated first."""
        stmt = (
            select(models.LearningPath)
            .where(models.LearningPath.user_id == user_id)
            .order_by(models.LearningPath.updated_at.desc(), models.LearningPath.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def create(self, user_id: int, **fields: Any) -> models.LearningPath:  # noqa: ANN401
        path = models.LearningPath(user_id=user_id, **fields)
        self.db.add(path)
        self.db.flush()
        self.db.refresh(path)
        logger.info(f"Created learning path {path.id} for user {user_id}")
        return path

    def delete(self, path: models.LearningPath) -> None:
        self.db.delete(path)
        self.db.flush()
