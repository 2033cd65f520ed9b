"""API routes for saved learning paths."""

from fastapi import APIRouter, Depends, status

from learnflow import schemas
from learnflow.core import container
from learnflow.dependencies import CurrentUser
from learnflow.di import inject_service
from learnflow.exceptions import LearnFlowError
from learnflow.routers.errors import internal_error
from learnflow.services import LearningPathService

router = APIRouter(prefix="/learning-paths", tags=["learning-paths"])


@router.get("", response_model=list[schemas.LearningPath])
def get_learning_paths(
    current_user: CurrentUser,
    service: LearningPathService = Depends(inject_service(container.learning_path_service)),
) -> list[schemas.LearningPath]:
    try:
        return service.get_learning_paths(current_user.id)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch learning paths", e) from e


@router.post("", response_model=schemas.LearningPath, status_code=status.HTTP_201_CREATED)
def create_learning_path(
    path: schemas.LearningPathCreate,
    current_user: CurrentUser,
    service: LearningPathService = Depends(inject_service(container.learning_path_service)),
) -> schemas.LearningPath:
    try:
        return service.create_learning_path(current_user.id, path)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("create learning path", e) from e


@router.patch("/{path_id}", response_model=schemas.LearningPath)
def update_learning_path(
    path_id: int,
    update: schemas.LearningPathUpdate,
    current_user: CurrentUser,
    service: LearningPathService = Depends(inject_service(container.learning_path_service)),
) -> schemas.LearningPath:
    """
    Update progress on a learning path.

    Reaching 100% progress completes the path and issues a certificate the
    first time.
    """
    try:
        return service.update_learning_path(path_id, current_user.id, update)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"update learning path {path_id}", e) from e


@router.delete("/{path_id}", response_model=schemas.DeleteResponse)
def delete_learning_path(
    path_id: int,
    current_user: CurrentUser,
    service: LearningPathService = Depends(inject_service(container.learning_path_service)),
) -> schemas.DeleteResponse:
    try:
        service.delete_learning_path(path_id, current_user.id)
        return schemas.DeleteResponse(success=True, message="Learning path deleted successfully")
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"delete learning path {path_id}", e) from e
