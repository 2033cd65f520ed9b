"""Pydantic schemas for request/response validation."""

from learnflow.schemas.ai_schemas import (
    FlashcardGenerateRequest,
    GeneratedFlashcard,
    GeneratedFlashcards,
    GeneratedLearningPath,
    GeneratedModule,
    LearningPathGenerateRequest,
    LearningPathGenerateResponse,
    MCQQuestion,
    MCQRequest,
    MCQResponse,
    SummarizeRequest,
    Summary,
)
from learnflow.schemas.gamification_schemas import (
    Achievement,
    ChallengeProgressRequest,
    ChallengeProgressResponse,
    DailyChallenge,
    LeaderboardEntry,
    UserAchievement,
)
from learnflow.schemas.learning_schemas import (
    Certificate,
    DeleteResponse,
    Flashcard,
    FlashcardCreate,
    FlashcardDeck,
    FlashcardDeckCreate,
    FlashcardDeckUpdate,
    FlashcardReviewRequest,
    FlashcardsCreateRequest,
    FlashcardsCreateResponse,
    LearningPath,
    LearningPathCreate,
    LearningPathUpdate,
)
from learnflow.schemas.resource_schemas import (
    AdminStats,
    AdminUpload,
    CatalogueStats,
    Category,
    Department,
    DepartmentCreate,
    ModerationResponse,
    PromoteUserRequest,
    PromoteUserResponse,
    QuestionPaper,
    RejectUploadRequest,
    ResourceBase,
    ResourceDeleteResponse,
    StudyNote,
    Upload,
    Uploader,
    UploadStats,
)
from learnflow.schemas.user_schemas import (
    AuthResponse,
    GoogleLoginRequest,
    LoginRequest,
    MessageResponse,
    RegisterResponse,
    SearchHistory,
    SearchHistoryCreate,
    StreakResponse,
    User,
    UserPreferences,
    UserPreferencesUpdate,
    UserProgress,
    UserRegisterRequest,
    XPRequest,
    XPResponse,
)

__all__ = [
    "Achievement",
    "AdminStats",
    "AdminUpload",
    "AuthResponse",
    "CatalogueStats",
    "Category",
    "Certificate",
    "ChallengeProgressRequest",
    "ChallengeProgressResponse",
    "DailyChallenge",
    "DeleteResponse",
    "Department",
    "DepartmentCreate",
    "Flashcard",
    "FlashcardCreate",
    "FlashcardDeck",
    "FlashcardDeckCreate",
    "FlashcardDeckUpdate",
    "FlashcardGenerateRequest",
    "FlashcardReviewRequest",
    "FlashcardsCreateRequest",
    "FlashcardsCreateResponse",
    "GeneratedFlashcard",
    "GeneratedFlashcards",
    "GeneratedLearningPath",
    "GeneratedModule",
    "GoogleLoginRequest",
    "LeaderboardEntry",
    "LearningPath",
    "LearningPathCreate",
    "LearningPathGenerateRequest",
    "LearningPathGenerateResponse",
    "LearningPathUpdate",
    "LoginRequest",
    "MCQQuestion",
    "MCQRequest",
    "MCQResponse",
    "MessageResponse",
    "ModerationResponse",
    "PromoteUserRequest",
    "PromoteUserResponse",
    "QuestionPaper",
    "RegisterResponse",
    "RejectUploadRequest",
    "ResourceBase",
    "ResourceDeleteResponse",
    "SearchHistory",
    "SearchHistoryCreate",
    "StreakResponse",
    "StudyNote",
    "SummarizeRequest",
    "Summary",
    "Upload",
    "UploadStats",
    "Uploader",
    "User",
    "UserAchievement",
    "UserPreferences",
    "UserPreferencesUpdate",
    "UserProgress",
    "UserRegisterRequest",
    "XPRequest",
    "XPResponse",
]
