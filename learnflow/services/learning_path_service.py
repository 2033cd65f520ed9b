"""Service layer for learning paths."""

import logging

from sqlalchemy.orm import Session

from learnflow import models, repositories, schemas
from learnflow.constants import CERTIFICATE_ACHIEVEMENT
from learnflow.exceptions import LearningPathNotFoundError
from learnflow.services.certificate_service import CertificateService
from learnflow.services.gamification_service import GamificationService

logger = logging.getLogger(__name__)

PATH_STATUS_ACTIVE = "active"
PATH_STATUS_COMPLETED = "completed"
PATH_COMPLETE_PROGRESS = 100
FIRST_PATH_ACHIEVEMENT = "Path Finder"


class LearningPathService:
    """Service for handling learning path operations."""

    def __init__(
        self,
        db: Session,
        learning_path_repository: repositories.LearningPathRepository,
        certificate_service: CertificateService,
        gamification_service: GamificationService,
    ) -> None:
        self.db = db
        self.learning_path_repository = learning_path_repository
        self.certificate_service = certificate_service
        self.gamification_service = gamification_service

    def get_learning_paths(self, user_id: int) -> list[schemas.LearningPath]:
        return [
            schemas.LearningPath.model_validate(p)
            for p in self.learning_path_repository.get_for_user(user_id)
        ]

    def create_learning_path(
        self, user_id: int, request: schemas.LearningPathCreate
    ) -> schemas.LearningPath:
        """Save a new path; ``total_modules`` defaults to the number of modules given."""
        data = request.model_dump()
        if data["total_modules"] is None:
            data["total_modules"] = len(request.modules)
        path = self.learning_path_repository.create(
            user_id=user_id,
            completed_modules=0,
            progress=0.0,
            status=PATH_STATUS_ACTIVE,
            **data,
        )
        self.db.commit()
        return schemas.LearningPath.model_validate(path)

    def update_learning_path(
        self, path_id: int, user_id: int, update: schemas.LearningPathUpdate
    ) -> schemas.LearningPath:
        """
        Update progress fields of a path.

        Progress of 100 or more is stored as 100 and marks the path completed;
        the first completion issues a certificate.

        Raises:
            LearningPathNotFoundError: If the path does not exist or belongs to another user
        """
        path = self.learning_path_repository.get_by_id(path_id, user_id)
        if path is None:
            raise LearningPathNotFoundError(path_id)

        was_completed = path.status == PATH_STATUS_COMPLETED
        for field, value in update.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(path, field, value)

        if update.progress is not None:
            if update.progress >= PATH_COMPLETE_PROGRESS:
                path.progress = PATH_COMPLETE_PROGRESS
                path.status = PATH_STATUS_COMPLETED
            else:
                path.status = PATH_STATUS_ACTIVE

        if path.status == PATH_STATUS_COMPLETED and not was_completed:
            self._complete(path)

        self.db.commit()
        self.db.refresh(path)
        return schemas.LearningPath.model_validate(path)

    def delete_learning_path(self, path_id: int, user_id: int) -> None:
        path = self.learning_path_repository.get_by_id(path_id, user_id)
        if path is None:
            raise LearningPathNotFoundError(path_id)
        self.learning_path_repository.delete(path)
        self.db.commit()
        logger.info(f"Deleted learning path {path_id} for user {user_id}")

    def _complete(self, path: models.LearningPath) -> None:
        if path.total_modules:
            path.completed_modules = max(path.completed_modules, path.total_modules)
        # One certificate per path, even if progress is reset and completed again
        if path.certificate_id is None:
            certificate = self.certificate_service.issue_for_learning_path(path)
            path.certificate_id = certificate.id
            self.gamification_service.award_achievement(path.user_id, FIRST_PATH_ACHIEVEMENT)
            self.gamification_service.award_achievement(path.user_id, CERTIFICATE_ACHIEVEMENT)
        logger.info(f"Learning path {path.id} completed by user {path.user_id}")
