"""Service layer for business logic."""

from learnflow.services import auth_service
from learnflow.services.admin_service import AdminService
from learnflow.services.ai.ai_service import AIService
from learnflow.services.auth_service import AuthService
from learnflow.services.certificate_service import CertificateService
from learnflow.services.flashcard_service import FlashcardService
from learnflow.services.gamification_service import GamificationService
from learnflow.services.learning_path_service import LearningPathService
from learnflow.services.resource_service import CatalogueService, ResourceService
from learnflow.services.user_service import UserService

__all__ = [
    "AIService",
    "AdminService",
    "AuthService",
    "CatalogueService",
    "CertificateService",
    "FlashcardService",
    "GamificationService",
    "LearningPathService",
    "ResourceService",
    "UserService",
    "auth_service",
]
