"""Password hashing, JWT handling and account authentication."""

import logging
from datetime import timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError
from pwdlib import PasswordHash
from sqlalchemy.orm import Session

from learnflow import models, repositories, schemas
from learnflow.config import get_settings
from learnflow.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    PermissionDeniedError,
    ValidationError,
)
from learnflow.utils import normalize_email, utc_now

logger = logging.getLogger(__name__)

settings = get_settings()
ALGORITHM = "HS256"
TOKEN_TYPE = "access"

password_hash = PasswordHash.recommended()
# Verified against when the user does not exist so the response time is the same
DUMMY_HASH = password_hash.hash("learnflow-dummy-password")


def hash_password(plain_password: str) -> str:
    """Hash a plain password for storage."""
    return password_hash.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hashed password."""
    return password_hash.verify(plain_password, hashed_password)


def create_access_token(user: models.User) -> str:
    expire = utc_now() + timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    to_encode: dict[str, Any] = {
        "sub": str(user.id),
        "email": user.email,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "is_admin": user.is_admin,
        "type": TOKEN_TYPE,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def verify_access_token(token: str) -> int | None:
    """Verify an access token and return the user_id if valid."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
        if payload.get("type") != TOKEN_TYPE:
            return None
        user_id = payload.get("sub")
        if user_id is None:
            return None
        return int(user_id)
    except (InvalidTokenError, ValueError):
        return None


class AuthService:
    """Service for registration and the login flows."""

    def __init__(self, db: Session, user_repository: repositories.UserRepository) -> None:
        self.db = db
        self.user_repository = user_repository

    def register(self, request: schemas.UserRegisterRequest) -> models.User:
        """
        Register a new password account.

        Raises:
            PermissionDeniedError: If registrations are disabled
            ConflictError: If the email is already registered
        """
        if not settings.ALLOW_USER_REGISTRATIONS:
            raise PermissionDeniedError("Registration is disabled")

        if self.user_repository.email_exists(request.email):
            raise ConflictError("User already exists")

        user = self.user_repository.create(
            email=request.email,
            first_name=request.first_name.strip(),
            last_name=request.last_name.strip(),
            hashed_password=hash_password(request.password),
        )
        self.db.commit()
        logger.info(f"Registered user {user.id}")
        return user

    def authenticate(self, email: str, password: str) -> tuple[models.User, str]:
        """
        Check email and password and issue an access token.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password wrong
        """
        user = self.user_repository.get_by_email(normalize_email(email))
        if not user:
            verify_password(password, DUMMY_HASH)  # Constant time to avoid timing difference
            raise InvalidCredentialsError
        if not user.hashed_password or not verify_password(password, user.hashed_password):
            raise InvalidCredentialsError

        user.updated_at = utc_now()
        self.db.commit()
        self.db.refresh(user)
        return user, create_access_token(user)

    def google_login(self, request: schemas.GoogleLoginRequest) -> tuple[models.User, str]:
        """
        Log in (or sign up) with a profile returned by Google OAuth.

        An existing account is matched by email or Google id; its Google id and
        picture are filled in when missing.
        """
        if not request.email or not request.google_id:
            raise ValidationError("Email and Google ID are required")

        email = normalize_email(request.email)
        user = self.user_repository.get_by_email_or_google_id(email, request.google_id)
        if user is None:
            user = self.user_repository.create(
                email=email,
                first_name=request.first_name or email.split("@")[0],
                last_name=request.last_name or "",
                google_id=request.google_id,
                profile_image_url=request.image,
            )
            logger.info(f"Created Google user {user.id}")
        else:
            if not user.google_id:
                user.google_id = request.google_id
            if not user.profile_image_url and request.image:
                user.profile_image_url = request.image
            user.updated_at = utc_now()

        self.db.commit()
        self.db.refresh(user)
        return user, create_access_token(user)
