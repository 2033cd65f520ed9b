"""API routes for achievements, the leaderboard and daily challenges."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from learnflow import schemas
from learnflow.constants import LEADERBOARD_DEFAULT_LIMIT
from learnflow.core import container
from learnflow.dependencies import CurrentUser
from learnflow.di import inject_service
from learnflow.exceptions import LearnFlowError
from learnflow.routers.errors import internal_error
from learnflow.services import GamificationService

router = APIRouter(tags=["gamification"])


@router.get("/achievements", response_model=list[schemas.Achievement])
def get_achievements(
    service: GamificationService = Depends(inject_service(container.gamification_service)),
) -> list[schemas.Achievement]:
    try:
        return service.get_achievements()
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch achievements", e) from e


@router.get("/leaderboard", response_model=list[schemas.LeaderboardEntry])
def get_leaderboard(
    limit: Annotated[int, Query(ge=1, le=500)] = LEADERBOARD_DEFAULT_LIMIT,
    service: GamificationService = Depends(inject_service(container.gamification_service)),
) -> list[schemas.LeaderboardEntry]:
    """Users ranked by total XP, rank 1 first."""
    try:
        return service.get_leaderboard(limit)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch leaderboard", e) from e


@router.get("/daily-challenges", response_model=list[schemas.DailyChallenge])
def get_daily_challenges(
    current_user: CurrentUser,
    service: GamificationService = Depends(inject_service(container.gamification_service)),
) -> list[schemas.DailyChallenge]:
    """
    Today's challenges with the caller's progress.

    The default challenges are created the first time a day's list is requested.
    """
    try:
        return service.get_daily_challenges(current_user.id)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch daily challenges", e) from e


@router.post(
    "/daily-challenges/{challenge_id}/progress",
    response_model=schemas.ChallengeProgressResponse,
)
def record_challenge_progress(
    challenge_id: int,
    current_user: CurrentUser,
    body: schemas.ChallengeProgressRequest | None = None,
    service: GamificationService = Depends(inject_service(container.gamification_service)),
) -> schemas.ChallengeProgressResponse:
    try:
        amount = body.amount if body else 1
        return service.record_challenge_progress(current_user.id, challenge_id, amount)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"record progress for challenge {challenge_id}", e) from e
