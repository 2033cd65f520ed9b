"""Resource upload repository for database operations."""

import logging
import uuid
from typing import Any

from sqlalchemy import Select, func, or_, select
from sqlalchemy.orm import Session, joinedload

from learnflow import models
from learnflow.constants import RESOURCE_TYPE_STUDY_NOTE, UPLOAD_STATUS_APPROVED
from learnflow.utils import LIKE_ESCAPE, contains_pattern

logger = logging.getLogger(__name__)


class ResourceRepository:
    """Repository for question papers and study notes.

    Both resource types live in the ``resource_uploads`` table; public
    catalogue queries only ever see approved rows.
    """

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    @staticmethod
    def _newest_first(stmt: Select[Any]) -> Select[Any]:
        return stmt.order_by(
            models.ResourceUpload.uploaded_at.desc(), models.ResourceUpload.id.desc()
        )

    def _approved(self, resource_type: str) -> Select[Any]:
        return select(models.ResourceUpload).where(
            models.ResourceUpload.resource_type == resource_type,
            models.ResourceUpload.status == UPLOAD_STATUS_APPROVED,
        )

    def get_by_id(self, resource_id: int) -> models.ResourceUpload | None:
        stmt = (
            select(models.ResourceUpload)
            .options(joinedload(models.ResourceUpload.uploader))
            .where(models.ResourceUpload.id == resource_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_approved(self, resource_id: int, resource_type: str) -> models.ResourceUpload | None:
        stmt = self._approved(resource_type).where(models.ResourceUpload.id == resource_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_approved(
        self,
        resource_type: str,
        department_id: str | None = None,
        limit: int | None = None,
    ) -> list[models.ResourceUpload]:
        stmt = self._approved(resource_type)
        if department_id is not None:
            stmt = stmt.where(models.ResourceUpload.department_id == department_id)
        stmt = self._newest_first(stmt)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def search_approved(
        self,
        resource_type: str,
        query: str | None = None,
        department_id: str | None = None,
        semester: int | None = None,
        year: int | None = None,
    ) -> list[models.ResourceUpload]:
        """
        Search approved resources of one type.

        ``query`` matches title or subject case-insensitively, and chapter for
        study notes.
        """
        stmt = self._approved(resource_type)
        if query:
            pattern = contains_pattern(query)
            columns = [models.ResourceUpload.title, models.ResourceUpload.subject]
            if resource_type == RESOURCE_TYPE_STUDY_NOTE:
                columns.append(models.ResourceUpload.chapter)
            stmt = stmt.where(
                or_(*(func.lower(c).like(pattern, escape=LIKE_ESCAPE) for c in columns))
            )
        if department_id is not None:
            stmt = stmt.where(models.ResourceUpload.department_id == department_id)
        if semester is not None:
            stmt = stmt.where(models.ResourceUpload.semester == semester)
        if year is not None:
            stmt = stmt.where(models.ResourceUpload.year == year)
        return list(self.db.execute(self._newest_first(stmt)).scalars().all())

    def list_by_user(self, user_id: int) -> list[models.ResourceUpload]:
        stmt = self._newest_first(
            select(models.ResourceUpload).where(models.ResourceUpload.user_id == user_id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def list_for_moderation(
        self, status: str | None = None, search: str | None = None
    ) -> list[models.ResourceUpload]:
        """All uploads with their uploader, optionally filtered by status and text."""
        stmt = select(models.ResourceUpload).options(joinedload(models.ResourceUpload.uploader))
        if status:
            stmt = stmt.where(models.ResourceUpload.status == status)
        if search:
            pattern = contains_pattern(search)
            columns = [models.ResourceUpload.title, models.ResourceUpload.resource_type]
            stmt = stmt.where(
                or_(*(func.lower(c).like(pattern, escape=LIKE_ESCAPE) for c in columns))
            )
        return list(self.db.execute(self._newest_first(stmt)).scalars().all())

    def create(self, **fields: Any) -> models.ResourceUpload:  # noqa: ANN401
        """Create a new upload; a fresh ``resource_uid`` is generated."""
        resource = models.ResourceUpload(resource_uid=uuid.uuid4().hex, **fields)
        self.db.add(resource)
        self.db.flush()
        self.db.refresh(resource)
        logger.info(
            f"Created {resource.resource_type} upload: {resource.title} "
            f"(id={resource.id}, user_id={resource.user_id})"
        )
        return resource

    def delete(self, resource: models.ResourceUpload) -> None:
        self.db.delete(resource)
        self.db.flush()

    def count_approved(self, resource_type: str) -> int:
        stmt = (
            select(func.count(models.ResourceUpload.id))
            .where(models.ResourceUpload.resource_type == resource_type)
            .where(models.ResourceUpload.status == UPLOAD_STATUS_APPROVED)
        )
        return self.db.execute(stmt).scalar_one()

    def count_by_status(self) -> dict[str, int]:
        stmt = select(models.ResourceUpload.status, func.count(models.ResourceUpload.id)).group_by(
            models.ResourceUpload.status
        )
        return {status: count for status, count in self.db.execute(stmt).all()}

    def count(self) -> int:
        return self.db.execute(select(func.count(models.ResourceUpload.id))).scalar_one()
