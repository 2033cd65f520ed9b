"""Service layer for certificates."""

import logging

from sqlalchemy.orm import Session

from learnflow import models, repositories, schemas
from learnflow.exceptions import CertificateNotFoundError

logger = logging.getLogger(__name__)


class CertificateService:
    """Service for listing, issuing and verifying certificates."""

    def __init__(
        self,
        db: Session,
        certificate_repository: repositories.CertificateRepository,
        progress_repository: repositories.UserProgressRepository,
    ) -> None:
        self.db = db
        self.certificate_repository = certificate_repository
        self.progress_repository = progress_repository

    def get_certificates(self, user_id: int) -> list[schemas.Certificate]:
        """The user's certificates, newest first."""
        return [
            schemas.Certificate.model_validate(c)
            for c in self.certificate_repository.get_for_user(user_id)
        ]

    def verify(self, code: str) -> schemas.Certificate:
        """
        Look up a public certificate by its verification code.

        Raises:
            CertificateNotFoundError: If no public certificate has this code
        """
        certificate = self.certificate_repository.get_public_by_code(code.strip().upper())
        if certificate is None:
            raise CertificateNotFoundError(code)
        return schemas.Certificate.model_validate(certificate)

    def issue_for_learning_path(self, path: models.LearningPath) -> models.Certificate:
        """
        Issue a certificate for a completed learning path.

        Increments the owner's ``certificates_earned``. Does not commit; the
        caller owns the transaction.
        """
        certificate = self.certificate_repository.create(
            user_id=path.user_id,
            title=path.title,
            description=path.description or f"Completed the learning path '{path.title}'",
            category_id=path.category_id,
            skill_name=path.title,
            score=path.progress,
        )
        progress = self.progress_repository.get_or_create(path.user_id)
        progress.certificates_earned += 1
        logger.info(
            f"Issued certificate {certificate.id} for learning path {path.id} "
            f"to user {path.user_id}"
        )
        return certificate
