"""Startup tasks: reference data seeding and the first admin account."""

import logging

from sqlalchemy.orm import Session

from learnflow import repositories, seed_data
from learnflow.config import Settings
from learnflow.constants import (
    RESOURCE_TYPE_QUESTION_PAPER,
    RESOURCE_TYPE_STUDY_NOTE,
    UPLOAD_STATUS_APPROVED,
)
from learnflow.services.auth_service import hash_password
from learnflow.utils import utc_now

logger = logging.getLogger(__name__)


def seed_reference_data(db: Session) -> None:
    """
    Load departments, categories, achievements and sample resources.

    Each table is only seeded while it is empty, so this is safe to run on
    every startup.
    """
    departments = repositories.DepartmentRepository(db)
    if departments.count() == 0:
        for department in seed_data.DEPARTMENTS:
            departments.create(**department)
        logger.info(f"Seeded {len(seed_data.DEPARTMENTS)} departments")

    categories = repositories.CategoryRepository(db)
    if categories.count() == 0:
        for order, category in enumerate(seed_data.CATEGORIES):
            categories.create(order=order, **category)
        logger.info(f"Seeded {len(seed_data.CATEGORIES)} categories")

    achievements = repositories.AchievementRepository(db)
    if achievements.count() == 0:
        for achievement in seed_data.ACHIEVEMENTS:
            achievements.create(requirement=achievement["description"], **achievement)
        logger.info(f"Seeded {len(seed_data.ACHIEVEMENTS)} achievements")

    resources = repositories.ResourceRepository(db)
    if resources.count() == 0:
        approved_at = utc_now()
        samples = [
            (RESOURCE_TYPE_QUESTION_PAPER, seed_data.SAMPLE_QUESTION_PAPERS),
            (RESOURCE_TYPE_STUDY_NOTE, seed_data.SAMPLE_STUDY_NOTES),
        ]
        for resource_type, rows in samples:
            for row in rows:
                resources.create(
                    resource_type=resource_type,
                    status=UPLOAD_STATUS_APPROVED,
                    approved_at=approved_at,
                    **row,
                )
        logger.info("Seeded sample question papers and study notes")

    db.commit()


def ensure_admin(db: Session, settings: Settings) -> None:
    """
    Create the configured admin account, or promote the user with that email.

    Does nothing unless both ``ADMIN_EMAIL`` and ``ADMIN_PASSWORD`` are set.
    """
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        return

    users = repositories.UserRepository(db)
    user = users.get_by_email(settings.ADMIN_EMAIL)
    if user is None:
        users.create(
            email=settings.ADMIN_EMAIL,
            first_name=settings.ADMIN_FIRST_NAME,
            last_name=settings.ADMIN_LAST_NAME,
            hashed_password=hash_password(settings.ADMIN_PASSWORD),
            is_admin=True,
        )
        logger.info(f"Created admin account {settings.ADMIN_EMAIL}")
    elif not user.is_admin:
        user.is_admin = True
        user.promoted_at = utc_now()
        logger.info(f"Promoted existing user {settings.ADMIN_EMAIL} to admin")

    db.commit()
