"""Department and category repositories."""

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from learnflow import models

logger = logging.getLogger(__name__)


class DepartmentRepository:
    """Repository for Department database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_all(self) -> list[models.Department]:
        stmt = select(models.Department).order_by(models.Department.name)
        return list(self.db.execute(stmt).scalars().all())

    def get_by_id(self, department_id: str) -> models.Department | None:
        return self.db.get(models.Department, department_id)

    def create(self, **fields: Any) -> models.Department:  # noqa: ANN401
        department = models.Department(**fields)
        self.db.add(department)
        self.db.flush()
        self.db.refresh(department)
        logger.info(f"Created department: {department.id}")
        return department

    def count(self) -> int:
        return self.db.execute(select(func.count(models.Department.id))).scalar_one()


class CategoryRepository:
    """Repository for Category database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_all(self) -> list[models.Category]:
        stmt = select(models.Category).order_by(models.Category.order, models.Category.id)
        return list(self.db.execute(stmt).scalars().all())

    def create(self, **fields: Any) -> models.Category:  # noqa: ANN401
        category = models.Category(**fields)
        self.db.add(category)
        self.db.flush()
        return category

    def count(self) -> int:
        return self.db.execute(select(func.count(models.Category.id))).scalar_one()
