"""Daily challenge repository for database operations."""

from datetime import date
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from learnflow import models


class DailyChallengeRepository:
    """Repository for DailyChallenge and UserDailyChallenge database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_active_since(self, day: date) -> list[models.DailyChallenge]:
        """Active challenges dated ``day`` or later."""
        stmt = (
            select(models.DailyChallenge)
            .where(models.DailyChallenge.date >= day, models.DailyChallenge.is_active.is_(True))
            .order_by(models.DailyChallenge.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_by_id(self, challenge_id: int) -> models.DailyChallenge | None:
        return self.db.get(models.DailyChallenge, challenge_id)

    def create(self, day: date, **fields: Any) -> models.DailyChallenge:  # noqa: ANN401
        challenge = models.DailyChallenge(date=day, **fields)
        self.db.add(challenge)
        self.db.flush()
        self.db.refresh(challenge)
        return challenge

    def get_user_progress(
        self, user_id: int, challenge_ids: list[int]
    ) -> dict[int, models.UserDailyChallenge]:
        """The user's progress rows keyed by challenge id."""
        if not challenge_ids:
            return {}
        stmt = select(models.UserDailyChallenge).where(
            models.UserDailyChallenge.user_id == user_id,
            models.UserDailyChallenge.challenge_id.in_(challenge_ids),
        )
        return {row.challenge_id: row for row in self.db.execute(stmt).scalars().all()}

    def get_or_create_user_progress(
        self, user_id: int, challenge_id: int
    ) -> models.UserDailyChallenge:
        row = self.get_user_progress(user_id, [challenge_id]).get(challenge_id)
        if row is None:
            row = models.UserDailyChallenge(user_id=user_id, challenge_id=challenge_id)
            self.db.add(row)
            self.db.flush()
        return row
