"""Pydantic schemas for achievements, leaderboard and daily challenges."""

from datetime import date as dt_date
from datetime import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Achievement(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    icon: str
    category: str
    requirement: str
    xp_reward: int
    rarity: str


class UserAchievement(BaseModel):
    """An earned achievement with its details embedded."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    achievement_id: int
    earned_at: dt
    progress: float
    achievement: Achievement


class LeaderboardEntry(BaseModel):
    user_id: int
    username: str
    total_xp: int
    level: int
    rank: int
    weekly_xp: int
    monthly_xp: int


class DailyChallenge(BaseModel):
    """Today's challenge merged with the caller's progress."""

    id: int
    title: str
    description: str
    type: str
    requirement: dict[str, Any]
    xp_reward: int
    date: dt_date
    target: int
    progress: float
    is_completed: bool


class ChallengeProgressRequest(BaseModel):
    amount: float = Field(1, gt=0)


class ChallengeProgressResponse(BaseModel):
    challenge_id: int
    progress: float
    target: int
    is_completed: bool
    xp_awarded: int
