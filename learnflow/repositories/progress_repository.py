"""Progress and achievement repositories."""

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from learnflow import models

logger = logging.getLogger(__name__)


class UserProgressRepository:
    """Repository for UserProgress database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_by_user_id(self, user_id: int) -> models.UserProgress | None:
        stmt = select(models.UserProgress).where(models.UserProgress.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_or_create(self, user_id: int) -> models.UserProgress:
        """Get the progress row for a user, creating one with defaults."""
        progress = self.get_by_user_id(user_id)
        if progress is None:
            progress = models.UserProgress(user_id=user_id)
            self.db.add(progress)
            self.db.flush()
            self.db.refresh(progress)
            logger.info(f"Created progress for user {user_id}")
        return progress

    def get_leaderboard(self, limit: int) -> list[tuple[models.UserProgress, models.User]]:
        """Progress rows joined with their users, highest XP first."""
        stmt = (
            select(models.UserProgress, models.User)
            .join(models.User, models.User.id == models.UserProgress.user_id)
            .order_by(models.UserProgress.total_xp.desc(), models.UserProgress.user_id)
            .limit(limit)
        )
        return [(progress, user) for progress, user in self.db.execute(stmt).all()]


class AchievementRepository:
    """Repository for Achievement and UserAchievement database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_all(self) -> list[models.Achievement]:
        stmt = select(models.Achievement).order_by(models.Achievement.id)
        return list(self.db.execute(stmt).scalars().all())

    def get_by_name(self, name: str) -> models.Achievement | None:
        stmt = select(models.Achievement).where(models.Achievement.name == name)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_for_user(self, user_id: int) -> list[models.UserAchievement]:
        stmt = (
            select(models.UserAchievement)
            .where(models.UserAchievement.user_id == user_id)
            .order_by(models.UserAchievement.earned_at.desc(), models.UserAchievement.id.desc())
        )
        return list(self.db.execute(stmt).unique().scalars().all())

    def has_achievement(self, user_id: int, achievement_id: int) -> bool:
        stmt = select(models.UserAchievement.id).where(
            models.UserAchievement.user_id == user_id,
            models.UserAchievement.achievement_id == achievement_id,
        )
        return self.db.execute(stmt).first() is not None

    def award(self, user_id: int, achievement_id: int) -> models.UserAchievement:
        user_achievement = models.UserAchievement(user_id=user_id, achievement_id=achievement_id)
        self.db.add(user_achievement)
        self.db.flush()
        return user_achievement

    def create(self, **fields: Any) -> models.Achievement:  # noqa: ANN401
        achievement = models.Achievement(**fields)
        self.db.add(achievement)
        self.db.flush()
        return achievement

    def count(self) -> int:
        return self.db.execute(select(func.count(models.Achievement.id))).scalar_one()
