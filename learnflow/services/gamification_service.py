"""Service layer for XP, levels, streaks, achievements and daily challenges."""

import logging
import math
from datetime import date, timedelta

import structlog
from sqlalchemy.orm import Session

from learnflow import models, repositories, schemas
from learnflow.constants import (
    DEFAULT_DAILY_CHALLENGES,
    LEVEL_ACHIEVEMENTS,
    STREAK_ACHIEVEMENTS,
    XP_PER_LEVEL_UNIT,
)
from learnflow.exceptions import DailyChallengeNotFoundError
from learnflow.utils import utc_now, utc_today

logger = logging.getLogger(__name__)
structlog_logger = structlog.get_logger(__name__)


def calculate_level(total_xp: int) -> int:
    """
    Level for an XP total: ``floor(sqrt(total_xp / 100)) + 1``.

    Examples:
        >>> calculate_level(0)
        1
        >>> calculate_level(100)
        2
        >>> calculate_level(2500)
        6
    """
    return math.isqrt(max(total_xp, 0) // XP_PER_LEVEL_UNIT) + 1


def next_streak(current_streak: int, last_streak_date: date | None, today: date) -> int:
    """
    Streak length after activity on ``today``.

    Activity on the same day keeps the streak, activity on the following day
    extends it, anything else starts over at 1.
    """
    if last_streak_date == today:
        return max(current_streak, 1)
    if last_streak_date == today - timedelta(days=1):
        return current_streak + 1
    return 1


def challenge_target(requirement: dict[str, object] | None) -> int:
    """Goal of a daily challenge: the count, else the minutes, else 1."""
    requirement = requirement or {}
    for key in ("count", "minutes"):
        value = requirement.get(key)
        if isinstance(value, int | float) and value:
            return int(value)
    return 1


class GamificationService:
    """Service for handling progress and reward operations."""

    def __init__(
        self,
        db: Session,
        progress_repository: repositories.UserProgressRepository,
        achievement_repository: repositories.AchievementRepository,
        challenge_repository: repositories.DailyChallengeRepository,
    ) -> None:
        self.db = db
        self.progress_repository = progress_repository
        self.achievement_repository = achievement_repository
        self.challenge_repository = challenge_repository

    def get_progress(self, user_id: int) -> schemas.UserProgress:
        progress = self.progress_repository.get_or_create(user_id)
        self.db.commit()
        return schemas.UserProgress.model_validate(progress)

    def add_xp(self, user_id: int, xp_amount: int, reason: str | None = None) -> schemas.XPResponse:
        """
        Add XP to a user and recompute the level.

        Levels never go down. Level achievements are awarded the first time a
        threshold is reached.
        """
        progress = self._add_xp(user_id, xp_amount)
        old_level = progress.level
        progress.level = max(old_level, calculate_level(progress.total_xp))
        leveled_up = progress.level > old_level
        self._award_thresholds(user_id, progress.level, LEVEL_ACHIEVEMENTS)
        self.db.commit()

        structlog_logger.info(
            "xp_awarded",
            user_id=user_id,
            xp_amount=xp_amount,
            reason=reason,
            total_xp=progress.total_xp,
            level=progress.level,
            leveled_up=leveled_up,
        )
        return schemas.XPResponse(
            message="XP updated",
            total_xp=progress.total_xp,
            level=progress.level,
            leveled_up=leveled_up,
        )

    def update_streak(self, user_id: int) -> schemas.StreakResponse:
        """Record today's activity on the user's streak."""
        progress = self.progress_repository.get_or_create(user_id)
        today = utc_today()
        progress.current_streak = next_streak(
            progress.current_streak, progress.last_streak_date, today
        )
        progress.longest_streak = max(progress.longest_streak, progress.current_streak)
        progress.last_streak_date = today
        progress.last_activity_date = utc_now()
        self._award_thresholds(user_id, progress.current_streak, STREAK_ACHIEVEMENTS)
        self.db.commit()

        logger.info(f"Streak for user {user_id} is now {progress.current_streak}")
        return schemas.StreakResponse(
            current_streak=progress.current_streak,
            longest_streak=progress.longest_streak,
        )

    def get_achievements(self) -> list[schemas.Achievement]:
        achievements = self.achievement_repository.get_all()
        return [schemas.Achievement.model_validate(a) for a in achievements]

    def get_user_achievements(self, user_id: int) -> list[schemas.UserAchievement]:
        return [
            schemas.UserAchievement.model_validate(a)
            for a in self.achievement_repository.get_for_user(user_id)
        ]

    def award_achievement(self, user_id: int, name: str) -> bool:
        """
        Award an achievement by name unless the user already has it.

        Does not commit; callers own the transaction.

        Returns:
            True if the achievement was newly awarded
        """
        achievement = self.achievement_repository.get_by_name(name)
        if achievement is None:
            logger.warning(f"Achievement '{name}' is not seeded; skipping award")
            return False
        if self.achievement_repository.has_achievement(user_id, achievement.id):
            return False
        self.achievement_repository.award(user_id, achievement.id)
        structlog_logger.info("achievement_awarded", user_id=user_id, achievement=name)
        return True

    def get_leaderboard(self, limit: int) -> list[schemas.LeaderboardEntry]:
        entries = []
        for rank, (progress, user) in enumerate(
            self.progress_repository.get_leaderboard(limit), start=1
        ):
            entries.append(
                schemas.LeaderboardEntry(
                    user_id=user.id,
                    username=user.full_name or "Anonymous",
                    total_xp=progress.total_xp,
                    level=progress.level,
                    rank=rank,
                    weekly_xp=progress.weekly_xp,
                    monthly_xp=progress.monthly_xp,
                )
            )
        return entries

    def get_daily_challenges(self, user_id: int) -> list[schemas.DailyChallenge]:
        """Today's challenges with the user's progress; the defaults are created on demand."""
        today = utc_today()
        challenges = self.challenge_repository.get_active_since(today)
        if not challenges:
            challenges = [
                self.challenge_repository.create(today, **template)
                for template in DEFAULT_DAILY_CHALLENGES
            ]
            self.db.commit()
            logger.info(f"Created {len(challenges)} default daily challenges for {today}")

        user_progress = self.challenge_repository.get_user_progress(
            user_id, [c.id for c in challenges]
        )
        return [
            self._to_daily_challenge(challenge, user_progress.get(challenge.id))
            for challenge in challenges
        ]

    def record_challenge_progress(
        self, user_id: int, challenge_id: int, amount: float
    ) -> schemas.ChallengeProgressResponse:
        """
        Add progress towards a challenge.

        Reaching the target completes the challenge once and awards its XP.
        """
        challenge = self.challenge_repository.get_by_id(challenge_id)
        if challenge is None or not challenge.is_active:
            raise DailyChallengeNotFoundError(challenge_id)

        target = challenge_target(challenge.requirement)
        row = self.challenge_repository.get_or_create_user_progress(user_id, challenge_id)
        xp_awarded = 0
        if not row.is_completed:
            row.progress = min(float(target), row.progress + amount)
            if row.progress >= target:
                row.is_completed = True
                row.completed_at = utc_now()
                xp_awarded = challenge.xp_reward
        self.db.commit()

        if xp_awarded:
            self.add_xp(user_id, xp_awarded, reason=f"Daily challenge: {challenge.title}")

        return schemas.ChallengeProgressResponse(
            challenge_id=challenge.id,
            progress=row.progress,
            target=target,
            is_completed=row.is_completed,
            xp_awarded=xp_awarded,
        )

    def _add_xp(self, user_id: int, xp_amount: int) -> models.UserProgress:
        progress = self.progress_repository.get_or_create(user_id)
        progress.total_xp += xp_amount
        progress.weekly_xp += xp_amount
        progress.monthly_xp += xp_amount
        progress.last_activity_date = utc_now()
        return progress

    def _award_thresholds(self, user_id: int, value: int, thresholds: dict[int, str]) -> None:
        for threshold, name in sorted(thresholds.items()):
            if value >= threshold:
                self.award_achievement(user_id, name)

    @staticmethod
    def _to_daily_challenge(
        challenge: models.DailyChallenge, row: models.UserDailyChallenge | None
    ) -> schemas.DailyChallenge:
        return schemas.DailyChallenge(
            id=challenge.id,
            title=challenge.title,
            description=challenge.description,
            type=challenge.type,
            requirement=challenge.requirement,
            xp_reward=challenge.xp_reward,
            date=challenge.date,
            target=challenge_target(challenge.requirement),
            progress=row.progress if row else 0,
            is_completed=row.is_completed if row else False,
        )
