"""Repository layer for database operations using repository pattern."""

from learnflow.repositories.catalogue_repository import CategoryRepository, DepartmentRepository
from learnflow.repositories.certificate_repository import CertificateRepository
from learnflow.repositories.challenge_repository import DailyChallengeRepository
from learnflow.repositories.file_repository import FileRepository
from learnflow.repositories.flashcard_repository import (
    FlashcardDeckRepository,
    FlashcardRepository,
)
from learnflow.repositories.learning_path_repository import LearningPathRepository
from learnflow.repositories.preferences_repository import UserPreferencesRepository
from learnflow.repositories.progress_repository import (
    AchievementRepository,
    UserProgressRepository,
)
from learnflow.repositories.resource_repository import ResourceRepository
from learnflow.repositories.search_history_repository import SearchHistoryRepository
from learnflow.repositories.user_repository import UserRepository

__all__ = [
    "AchievementRepository",
    "CategoryRepository",
    "CertificateRepository",
    "DailyChallengeRepository",
    "DepartmentRepository",
    "FileRepository",
    "FlashcardDeckRepository",
    "FlashcardRepository",
    "LearningPathRepository",
    "ResourceRepository",
    "SearchHistoryRepository",
    "UserPreferencesRepository",
    "UserProgressRepository",
    "UserRepository",
]
