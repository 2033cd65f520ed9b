"""API routes for the signed-in user's own data."""

from fastapi import APIRouter, Depends, status

from learnflow import schemas
from learnflow.core import container
from learnflow.dependencies import CurrentUser
from learnflow.di import inject_service
from learnflow.exceptions import LearnFlowError
from learnflow.routers.errors import internal_error
from learnflow.services import GamificationService, UserService

router = APIRouter(prefix="/user", tags=["user"])


@router.post(
    "/history",
    response_model=schemas.MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def record_search(
    search: schemas.SearchHistoryCreate,
    current_user: CurrentUser,
    service: UserService = Depends(inject_service(container.user_service)),
) -> schemas.MessageResponse:
    try:
        service.record_search(current_user.id, search)
        return schemas.MessageResponse(message="Search history saved")
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("save search history", e) from e


@router.get("/history", response_model=list[schemas.SearchHistory])
def get_search_history(
    current_user: CurrentUser,
    service: UserService = Depends(inject_service(container.user_service)),
) -> list[schemas.SearchHistory]:
    """Get the caller's 50 most recent searches, newest first."""
    try:
        return service.get_search_history(current_user.id)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch search history", e) from e


@router.get("/uploads", response_model=list[schemas.Upload])
def get_uploads(
    current_user: CurrentUser,
    service: UserService = Depends(inject_service(container.user_service)),
) -> list[schemas.Upload]:
    """Get everything the caller uploaded, whatever its moderation status."""
    try:
        return service.get_uploads(current_user.id)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch user uploads", e) from e


@router.get("/progress", response_model=schemas.UserProgress)
def get_progress(
    current_user: CurrentUser,
    service: GamificationService = Depends(inject_service(container.gamification_service)),
) -> schemas.UserProgress:
    try:
        return service.get_progress(current_user.id)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch user progress", e) from e


@router.post("/xp", response_model=schemas.XPResponse)
def add_xp(
    xp: schemas.XPRequest,
    current_user: CurrentUser,
    service: GamificationService = Depends(inject_service(container.gamification_service)),
) -> schemas.XPResponse:
    try:
        return service.add_xp(current_user.id, xp.xp_amount, reason=xp.reason)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("add XP", e) from e


@router.post("/streak", response_model=schemas.StreakResponse)
def update_streak(
    current_user: CurrentUser,
    service: GamificationService = Depends(inject_service(container.gamification_service)),
) -> schemas.StreakResponse:
    try:
        return service.update_streak(current_user.id)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("update streak", e) from e


@router.get("/achievements", response_model=list[schemas.UserAchievement])
def get_user_achievements(
    current_user: CurrentUser,
    service: GamificationService = Depends(inject_service(container.gamification_service)),
) -> list[schemas.UserAchievement]:
    try:
        return service.get_user_achievements(current_user.id)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch user achievements", e) from e


@router.get("/preferences", response_model=schemas.UserPreferences)
def get_preferences(
    current_user: CurrentUser,
    service: UserService = Depends(inject_service(container.user_service)),
) -> schemas.UserPreferences:
    try:
        return service.get_preferences(current_user)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch preferences", e) from e


@router.put("/preferences", response_model=schemas.MessageResponse)
def update_preferences(
    update: schemas.UserPreferencesUpdate,
    current_user: CurrentUser,
    service: UserService = Depends(inject_service(container.user_service)),
) -> schemas.MessageResponse:
    """Save onboarding answers and settings; omitted fields are left unchanged."""
    try:
        service.update_preferences(current_user, update)
        return schemas.MessageResponse(message="Preferences saved successfully")
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("save preferences", e) from e
