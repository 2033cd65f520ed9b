"""User repository for database operations."""

import logging

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from learnflow import models

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_by_id(self, user_id: int) -> models.User | None:
        stmt = select(models.User).where(models.User.id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_email(self, email: str) -> models.User | None:
        """Get a user by (normalized) email."""
        stmt = select(models.User).where(models.User.email == email)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_email_or_google_id(self, email: str, google_id: str) -> models.User | None:
        """Find the account a Google login belongs to, preferring an email match."""
        stmt = (
            select(models.User)
            .where(or_(models.User.email == email, models.User.google_id == google_id))
            .order_by((models.User.email == email).desc())
            .limit(1)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def email_exists(self, email: str) -> bool:
        stmt = select(models.User.id).where(models.User.email == email)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def create(
        self,
        email: str,
        first_name: str,
        last_name: str = "",
        hashed_password: str | None = None,
        google_id: str | None = None,
        profile_image_url: str | None = None,
        is_admin: bool = False,
    ) -> models.User:
        """Create a new user."""
        user = models.User(
            email=email,
            first_name=first_name,
            last_name=last_name,
            hashed_password=hashed_password,
            google_id=google_id,
            profile_image_url=profile_image_url,
            is_admin=is_admin,
        )
        self.db.add(user)
        self.db.flush()
        self.db.refresh(user)
        logger.info(f"Created user: {user.email} (id={user.id})")
        return user

    def count(self) -> int:
        return self.db.execute(select(func.count(models.User.id))).scalar_one()
