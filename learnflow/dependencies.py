"""FastAPI dependencies for the application."""

from typing import Annotated

from fastapi import Depends, Request

from learnflow import models
from learnflow.config import get_settings
from learnflow.database import DatabaseSession
from learnflow.exceptions import (
    AdminRequiredException,
    InvalidTokenException,
    MissingTokenException,
)
from learnflow.repositories import UserRepository
from learnflow.services.auth_service import verify_access_token


def get_token(request: Request) -> str | None:
    """Read the access token from the Authorization header, else the auth cookie."""
    authorization = request.headers.get("Authorization")
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()
    return request.cookies.get(get_settings().AUTH_COOKIE_NAME) or None


def get_current_user(request: Request, db: DatabaseSession) -> models.User:
    token = get_token(request)
    if token is None:
        raise MissingTokenException

    user_id = verify_access_token(token)
    if user_id is None:
        raise InvalidTokenException

    user = UserRepository(db).get_by_id(user_id)
    if user is None:
        raise InvalidTokenException
    return user


CurrentUser = Annotated[models.User, Depends(get_current_user)]


def require_admin(current_user: CurrentUser) -> models.User:
    """Allow only administrators through."""
    if not current_user.is_admin:
        raise AdminRequiredException
    return current_user


AdminUser = Annotated[models.User, Depends(require_admin)]
