"""Certificate repository for database operations."""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from learnflow import models
from learnflow.utils import generate_verification_code

logger = logging.getLogger(__name__)


class CertificateRepository:
    """Repository for Certificate database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_for_user(self, user_id: int) -> list[models.Certificate]:
        stmt = (
            select(models.Certificate)
            .where(models.Certificate.user_id == user_id)
            .order_by(models.Certificate.issue_date.desc(), models.Certificate.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_public_by_code(self, code: str) -> models.Certificate | None:
        stmt = select(models.Certificate).where(
            models.Certificate.verification_code == code,
            models.Certificate.is_public.is_(True),
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def code_exists(self, code: str) -> bool:
        stmt = select(models.Certificate.id).where(models.Certificate.verification_code == code)
        return self.db.execute(stmt).first() is not None

    def create(self, user_id: int, **fields: Any) -> models.Certificate:  # noqa: ANN401
        """Create a certificate with a fresh, unused verification code."""
        code = generate_verification_code()
        while self.code_exists(code):
            code = generate_verification_code()
        certificate = models.Certificate(user_id=user_id, verification_code=code, **fields)
        self.db.add(certificate)
        self.db.flush()
        self.db.refresh(certificate)
        logger.info(f"Issued certificate {certificate.verification_code} to user {user_id}")
        return certificate
