"""Search history repository for database operations."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from learnflow import models


class SearchHistoryRepository:
    """Repository for SearchHistory database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def create(
        self,
        user_id: int,
        search_query: str,
        department: str | None = None,
        resource_type: str | None = None,
        semester: int | None = None,
        year: int | None = None,
    ) -> models.SearchHistory:
        entry = models.SearchHistory(
            user_id=user_id,
            search_query=search_query,
            department=department,
            resource_type=resource_type,
            semester=semester,
            year=year,
        )
        self.db.add(entry)
        self.db.flush()
        self.db.refresh(entry)
        return entry

    def get_recent_for_user(self, user_id: int, limit: int) -> list[models.SearchHistory]:
        """Newest searches first."""
        stmt = (
            select(models.SearchHistory)
            .where(models.SearchHistory.user_id == user_id)
            .order_by(models.SearchHistory.searched_at.desc(), models.SearchHistory.id.desc())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def count(self) -> int:
        return self.db.execute(select(func.count(models.SearchHistory.id))).scalar_one()
