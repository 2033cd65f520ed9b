"""Service layer for the public resource catalogue and resource uploads."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from learnflow import models, repositories, schemas
from learnflow.config import get_settings
from learnflow.constants import (
    RESOURCE_ALLOWED_CONTENT_TYPES,
    RESOURCE_TYPE_QUESTION_PAPER,
    RESOURCE_TYPE_STUDY_NOTE,
    UPLOAD_STATUS_PENDING,
)
from learnflow.exceptions import (
    ConflictError,
    DepartmentNotFoundError,
    InvalidUploadError,
    ResourceNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

settings = get_settings()

_RESOURCE_SCHEMAS: dict[str, type[schemas.QuestionPaper] | type[schemas.StudyNote]] = {
    RESOURCE_TYPE_QUESTION_PAPER: schemas.QuestionPaper,
    RESOURCE_TYPE_STUDY_NOTE: schemas.StudyNote,
}
_RESOURCE_LABELS = {
    RESOURCE_TYPE_QUESTION_PAPER: "Question paper",
    RESOURCE_TYPE_STUDY_NOTE: "Study note",
}
_UPLOAD_SUBDIRECTORIES = {
    RESOURCE_TYPE_QUESTION_PAPER: "question-papers",
    RESOURCE_TYPE_STUDY_NOTE: "study-notes",
}


def normalize_department_filter(department: str | None) -> str | None:
    """``all`` (or blank) means no department filter."""
    if not department or department.lower() == "all":
        return None
    return department


class CatalogueService:
    """Service for departments, categories and catalogue statistics."""

    def __init__(
        self,
        db: Session,
        department_repository: repositories.DepartmentRepository,
        category_repository: repositories.CategoryRepository,
        resource_repository: repositories.ResourceRepository,
        user_repository: repositories.UserRepository,
    ) -> None:
        self.db = db
        self.department_repository = department_repository
        self.category_repository = category_repository
        self.resource_repository = resource_repository
        self.user_repository = user_repository

    def get_stats(self) -> schemas.CatalogueStats:
        return schemas.CatalogueStats(
            departments=self.department_repository.count(),
            question_papers=self.resource_repository.count_approved(RESOURCE_TYPE_QUESTION_PAPER),
            study_notes=self.resource_repository.count_approved(RESOURCE_TYPE_STUDY_NOTE),
            active_students=self.user_repository.count(),
        )

    def get_categories(self) -> list[schemas.Category]:
        return [schemas.Category.model_validate(c) for c in self.category_repository.get_all()]

    def get_departments(self) -> list[schemas.Department]:
        return [
            schemas.Department.model_validate(d) for d in self.department_repository.get_all()
        ]

    def get_department(self, department_id: str) -> schemas.Department:
        department = self.department_repository.get_by_id(department_id)
        if department is None:
            raise DepartmentNotFoundError(message="Department not found")
        return schemas.Department.model_validate(department)

    def create_department(self, request: schemas.DepartmentCreate) -> schemas.Department:
        if self.department_repository.get_by_id(request.id) is not None:
            raise ConflictError(f"Department '{request.id}' already exists")
        department = self.department_repository.create(**request.model_dump())
        self.db.commit()
        return schemas.Department.model_validate(department)


class ResourceService:
    """Service for browsing and uploading question papers and study notes."""

    def __init__(
        self,
        db: Session,
        resource_repository: repositories.ResourceRepository,
        department_repository: repositories.DepartmentRepository,
        file_repository: repositories.FileRepository,
    ) -> None:
        self.db = db
        self.resource_repository = resource_repository
        self.department_repository = department_repository
        self.file_repository = file_repository

    def list_resources(
        self,
        resource_type: str,
        department_id: str | None = None,
        limit: int | None = None,
    ) -> list[schemas.ResourceBase]:
        """Approved resources of one type, newest upload first."""
        resources = self.resource_repository.list_approved(
            resource_type, department_id=department_id, limit=limit
        )
        return self._to_schemas(resource_type, resources)

    def search_resources(
        self,
        resource_type: str,
        query: str | None = None,
        department: str | None = None,
        semester: int | None = None,
        year: int | None = None,
    ) -> list[schemas.ResourceBase]:
        resources = self.resource_repository.search_approved(
            resource_type,
            query=query.strip() if query else None,
            department_id=normalize_department_filter(department),
            semester=semester,
            year=year,
        )
        return self._to_schemas(resource_type, resources)

    def get_resource(self, resource_type: str, resource_id: int) -> schemas.ResourceBase:
        """
        Get one approved resource.

        Raises:
            ResourceNotFoundError: If missing, of another type, or not approved
        """
        resource = self.resource_repository.get_approved(resource_id, resource_type)
        if resource is None:
            raise ResourceNotFoundError(message=f"{_RESOURCE_LABELS[resource_type]} not found")
        return _RESOURCE_SCHEMAS[resource_type].model_validate(resource)

    def upload_resource(
        self,
        resource_type: str,
        user_id: int,
        content: bytes,
        filename: str,
        content_type: str | None,
        fields: dict[str, Any],
    ) -> schemas.Upload:
        """
        Store an uploaded PDF and create a pending upload for moderation.

        Args:
            resource_type: ``question_paper`` or ``study_note``
            user_id: Uploading user
            content: File content, read with a limit of one byte over the maximum
            filename: Client supplied filename
            content_type: Client supplied MIME type
            fields: Metadata columns (title, subject, semester, ...)

        Raises:
            InvalidUploadError: If the file is not a PDF, empty or too large
            ValidationError: If the department does not exist
        """
        self.validate_pdf(content, content_type)

        department_id = normalize_department_filter(fields.pop("department_id", None))
        if department_id and self.department_repository.get_by_id(department_id) is None:
            raise ValidationError(f"Department '{department_id}' does not exist")

        relative_path = self.file_repository.save(
            _UPLOAD_SUBDIRECTORIES[resource_type], content, filename or "upload.pdf"
        )
        try:
            resource = self.resource_repository.create(
                user_id=user_id,
                resource_type=resource_type,
                department_id=department_id,
                file_path=relative_path,
                status=UPLOAD_STATUS_PENDING,
                **fields,
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            self.file_repository.delete(relative_path)
            raise

        logger.info(f"User {user_id} uploaded {resource_type} {resource.id} for review")
        return schemas.Upload.model_validate(resource)

    @staticmethod
    def validate_pdf(content: bytes, content_type: str | None) -> None:
        if content_type not in RESOURCE_ALLOWED_CONTENT_TYPES:
            raise InvalidUploadError("Only PDF files are allowed")
        if not content:
            raise InvalidUploadError("Uploaded file is empty")
        if len(content) > settings.MAX_RESOURCE_UPLOAD_SIZE:
            max_mb = settings.MAX_RESOURCE_UPLOAD_SIZE // (1024 * 1024)
            raise InvalidUploadError(f"File too large. Maximum size is {max_mb}MB.")

    @staticmethod
    def _to_schemas(
        resource_type: str, resources: list[models.ResourceUpload]
    ) -> list[schemas.ResourceBase]:
        schema = _RESOURCE_SCHEMAS[resource_type]
        return [schema.model_validate(r) for r in resources]
