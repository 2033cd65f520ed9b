from pathlib import Path

from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from learnflow.config import get_settings
from learnflow.repositories import (
    AchievementRepository,
    CategoryRepository,
    CertificateRepository,
    DailyChallengeRepository,
    DepartmentRepository,
    FileRepository,
    FlashcardDeckRepository,
    FlashcardRepository,
    LearningPathRepository,
    ResourceRepository,
    SearchHistoryRepository,
    UserPreferencesRepository,
    UserProgressRepository,
    UserRepository,
)
from learnflow.services import (
    AdminService,
    AIService,
    AuthService,
    CatalogueService,
    CertificateService,
    FlashcardService,
    GamificationService,
    LearningPathService,
    ResourceService,
    UserService,
)


def _uploads_dir() -> Path:
    return get_settings().UPLOADS_DIR


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    search_history_repository = providers.Factory(SearchHistoryRepository, db=db)
    department_repository = providers.Factory(DepartmentRepository, db=db)
    category_repository = providers.Factory(CategoryRepository, db=db)
    resource_repository = providers.Factory(ResourceRepository, db=db)
    progress_repository = providers.Factory(UserProgressRepository, db=db)
    achievement_repository = providers.Factory(AchievementRepository, db=db)
    challenge_repository = providers.Factory(DailyChallengeRepository, db=db)
    learning_path_repository = providers.Factory(LearningPathRepository, db=db)
    deck_repository = providers.Factory(FlashcardDeckRepository, db=db)
    flashcard_repository = providers.Factory(FlashcardRepository, db=db)
    certificate_repository = providers.Factory(CertificateRepository, db=db)
    preferences_repository = providers.Factory(UserPreferencesRepository, db=db)
    # Resolved per call so the uploads dir follows the current settings
    file_repository = providers.Factory(
        FileRepository, uploads_dir=providers.Callable(_uploads_dir)
    )

    # Identity
    auth_service = providers.Factory(AuthService, db=db, user_repository=user_repository)
    user_service = providers.Factory(
        UserService,
        db=db,
        search_history_repository=search_history_repository,
        resource_repository=resource_repository,
        preferences_repository=preferences_repository,
    )

    # Catalogue and moderation
    catalogue_service = providers.Factory(
        CatalogueService,
        db=db,
        department_repository=department_repository,
        category_repository=category_repository,
        resource_repository=resource_repository,
        user_repository=user_repository,
    )
    resource_service = providers.Factory(
        ResourceService,
        db=db,
        resource_repository=resource_repository,
        department_repository=department_repository,
        file_repository=file_repository,
    )
    admin_service = providers.Factory(
        AdminService,
        db=db,
        resource_repository=resource_repository,
        user_repository=user_repository,
        search_history_repository=search_history_repository,
        file_repository=file_repository,
    )

    # Learning and gamification
    gamification_service = providers.Factory(
        GamificationService,
        db=db,
        progress_repository=progress_repository,
        achievement_repository=achievement_repository,
        challenge_repository=challenge_repository,
    )
    certificate_service = providers.Factory(
        CertificateService,
        db=db,
        certificate_repository=certificate_repository,
        progress_repository=progress_repository,
    )
    learning_path_service = providers.Factory(
        LearningPathService,
        db=db,
        learning_path_repository=learning_path_repository,
        certificate_service=certificate_service,
        gamification_service=gamification_service,
    )
    flashcard_service = providers.Factory(
        FlashcardService,
        db=db,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
    )

    # AI generation (no database access)
    ai_service = providers.Factory(AIService)


container = Container()
