"""Service layer for moderation and administration."""

import logging

import structlog
from sqlalchemy.orm import Session

from learnflow import models, repositories, schemas
from learnflow.constants import (
    DEFAULT_REJECTION_REASON,
    UPLOAD_STATUS_APPROVED,
    UPLOAD_STATUS_PENDING,
    UPLOAD_STATUS_REJECTED,
)
from learnflow.exceptions import UploadNotFoundError, UserNotFoundError, ValidationError
from learnflow.utils import normalize_email, utc_now

logger = logging.getLogger(__name__)
structlog_logger = structlog.get_logger(__name__)


class AdminService:
    """Service for the admin dashboard: upload moderation, promotions and stats."""

    def __init__(
        self,
        db: Session,
        resource_repository: repositories.ResourceRepository,
        user_repository: repositories.UserRepository,
        search_history_repository: repositories.SearchHistoryRepository,
        file_repository: repositories.FileRepository,
    ) -> None:
        self.db = db
        self.resource_repository = resource_repository
        self.user_repository = user_repository
        self.search_history_repository = search_history_repository
        self.file_repository = file_repository

    def list_uploads(
        self, status: str | None = None, search: str | None = None
    ) -> list[schemas.AdminUpload]:
        """
        List uploads for moderation.

        Args:
            status: Only uploads with this status; ``all`` or None for every status
            search: Case-insensitive match on title or resource type
        """
        if status == "all":
            status = None
        uploads = self.resource_repository.list_for_moderation(
            status=status, search=search.strip() if search else None
        )
        return [schemas.AdminUpload.model_validate(u) for u in uploads]

    def approve_upload(self, upload_id: int, admin: models.User) -> schemas.ModerationResponse:
        upload = self._get_upload(upload_id)
        upload.status = UPLOAD_STATUS_APPROVED
        upload.approved_by = admin.id
        upload.approved_at = utc_now()
        upload.rejection_reason = None
        self.db.commit()

        structlog_logger.info(
            "upload_approved", upload_id=upload.id, admin_id=admin.id, title=upload.title
        )
        return schemas.ModerationResponse(
            message="Upload approved successfully", title=upload.title
        )

    def reject_upload(
        self, upload_id: int, admin: models.User, reason: str | None = None
    ) -> schemas.ModerationResponse:
        upload = self._get_upload(upload_id)
        upload.status = UPLOAD_STATUS_REJECTED
        upload.rejected_by = admin.id
        upload.rejected_at = utc_now()
        upload.rejection_reason = (reason or "").strip() or DEFAULT_REJECTION_REASON
        self.db.commit()

        structlog_logger.info(
            "upload_rejected",
            upload_id=upload.id,
            admin_id=admin.id,
            reason=upload.rejection_reason,
        )
        return schemas.ModerationResponse(message="Upload rejected", title=upload.title)

    def promote_user(self, email: str, admin: models.User) -> schemas.PromoteUserResponse:
        """
        Grant admin rights to an existing user.

        Raises:
            ValidationError: If the email is blank or the user is already an admin
            UserNotFoundError: If no user has this email
        """
        email = normalize_email(email)
        if not email:
            raise ValidationError("Email is required")

        user = self.user_repository.get_by_email(email)
        if user is None:
            raise UserNotFoundError(message="User not found")
        if user.is_admin:
            raise ValidationError("User is already an admin")

        user.is_admin = True
        user.promoted_by = admin.id
        user.promoted_at = utc_now()
        self.db.commit()

        structlog_logger.info("user_promoted", user_id=user.id, admin_id=admin.id)
        return schemas.PromoteUserResponse(
            message=f"{user.email} is now an admin", user_id=user.id, email=user.email
        )

    def delete_resource(
        self, resource_id: int, admin: models.User
    ) -> schemas.ResourceDeleteResponse:
        """
        Delete an approved resource together with its stored file.

        Raises:
            UploadNotFoundError: If the resource does not exist
            ValidationError: If the resource is not approved
        """
        resource = self._get_upload(resource_id)
        if resource.status != UPLOAD_STATUS_APPROVED:
            raise ValidationError("Only approved resources can be deleted")

        title = resource.title
        file_path = resource.file_path
        self.resource_repository.delete(resource)
        self.db.commit()
        self.file_repository.delete(file_path)

        structlog_logger.info("resource_deleted", resource_id=resource_id, admin_id=admin.id)
        return schemas.ResourceDeleteResponse(
            message="Resource deleted successfully", resource_title=title
        )

    def get_stats(self) -> schemas.AdminStats:
        by_status = self.resource_repository.count_by_status()
        return schemas.AdminStats(
            users=self.user_repository.count(),
            uploads=self.resource_repository.count(),
            search_history=self.search_history_repository.count(),
            upload_stats=schemas.UploadStats(
                pending=by_status.get(UPLOAD_STATUS_PENDING, 0),
                approved=by_status.get(UPLOAD_STATUS_APPROVED, 0),
                rejected=by_status.get(UPLOAD_STATUS_REJECTED, 0),
            ),
        )

    def _get_upload(self, upload_id: int) -> models.ResourceUpload:
        upload = self.resource_repository.get_by_id(upload_id)
        if upload is None:
            raise UploadNotFoundError(message="Upload not found")
        return upload
