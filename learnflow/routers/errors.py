import logging

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


def internal_error(action: str, e: Exception) -> HTTPException:
    """Log an unexpected failure and build the generic 500 response for it."""
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )
