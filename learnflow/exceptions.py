"""Custom exception hierarchy for the LearnFlow application."""

from fastapi import HTTPException
from starlette import status


class LearnFlowError(Exception):
    """Base exception for all LearnFlow errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(LearnFlowError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ValidationError(LearnFlowError):
    """Validation error."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=400)


class ConflictError(LearnFlowError):
    """Resource already exists."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=409)


class PermissionDeniedError(LearnFlowError):
    """Caller may not perform the operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=403)


class ServiceError(LearnFlowError):
    """Service layer error."""


class _IdNotFoundError(NotFoundError):
    """Not-found error that names the missing resource and optional id."""

    resource_name = "Resource"

    def __init__(self, resource_id: int | str | None = None, *, message: str | None = None) -> None:
        self.resource_id = resource_id
        if message:
            super().__init__(message)
        elif resource_id is not None:
            super().__init__(f"{self.resource_name} with id {resource_id} not found")
        else:
            super().__init__(f"{self.resource_name} not found")


class UserNotFoundError(_IdNotFoundError):
    resource_name = "User"


class UploadNotFoundError(_IdNotFoundError):
    resource_name = "Upload"


class ResourceNotFoundError(_IdNotFoundError):
    resource_name = "Resource"


class DepartmentNotFoundError(_IdNotFoundError):
    resource_name = "Department"


class LearningPathNotFoundError(_IdNotFoundError):
    resource_name = "Learning path"


class DeckNotFoundError(_IdNotFoundError):
    resource_name = "Deck"


class FlashcardNotFoundError(_IdNotFoundError):
    resource_name = "Flashcard"


class DailyChallengeNotFoundError(_IdNotFoundError):
    resource_name = "Daily challenge"


class CertificateNotFoundError(NotFoundError):
    """Certificate not found (or not public) for a verification code."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__("Certificate not found")


class InvalidCredentialsError(LearnFlowError):
    """Wrong email or password."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password", status_code=401)


class InvalidUploadError(ValidationError):
    """Uploaded file rejected (wrong type, too large, empty)."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


MissingTokenException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Access token required",
    headers={"WWW-Authenticate": "Bearer"},
)

InvalidTokenException = HTTPException(
    status_code=status.HTTP_403_FORBIDDEN,
    detail="Invalid or expired token",
)

AdminRequiredException = HTTPException(
    status_code=status.HTTP_403_FORBIDDEN,
    detail="Admin access required",
)
