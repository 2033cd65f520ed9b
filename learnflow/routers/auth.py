from fastapi import APIRouter, Depends, Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette import status

from learnflow import schemas
from learnflow.config import get_settings
from learnflow.core import container
from learnflow.dependencies import CurrentUser
from learnflow.di import inject_service
from learnflow.exceptions import LearnFlowError
from learnflow.routers.errors import internal_error
from learnflow.services import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])
settings = get_settings()
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)


def set_auth_cookie(response: Response, token: str) -> None:
    """Set the access token as an httpOnly cookie."""
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        max_age=settings.ACCESS_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,  # Convert days to seconds
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.AUTH_COOKIE_NAME,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
    )


@router.post(
    "/register",
    response_model=schemas.RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit("5/minute")  # type: ignore[misc]
def register(
    request: Request,
    register_data: schemas.UserRegisterRequest,
    service: AuthService = Depends(inject_service(container.auth_service)),
) -> schemas.RegisterResponse:
    """
    Create a password account.

    The client logs in separately afterwards; no token is issued here.
    """
    try:
        user = service.register(register_data)
        return schemas.RegisterResponse(
            message="User created successfully", user=schemas.User.model_validate(user)
        )
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("register user", e) from e


@router.post("/login", response_model=schemas.AuthResponse)
@limiter.limit("5/minute")  # type: ignore[misc]
def login(
    request: Request,
    response: Response,
    credentials: schemas.LoginRequest,
    service: AuthService = Depends(inject_service(container.auth_service)),
) -> schemas.AuthResponse:
    try:
        user, token = service.authenticate(credentials.email, credentials.password)
        set_auth_cookie(response, token)
        return schemas.AuthResponse(
            message="Login successful", user=schemas.User.model_validate(user), token=token
        )
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("log in", e) from e


@router.post("/google-login", response_model=schemas.AuthResponse)
@limiter.limit("10/minute")  # type: ignore[misc]
def google_login(
    request: Request,
    response: Response,
    profile: schemas.GoogleLoginRequest,
    service: AuthService = Depends(inject_service(container.auth_service)),
) -> schemas.AuthResponse:
    """
    Log in with a Google profile obtained by the client's OAuth flow.

    Creates the account on first login.
    """
    try:
        user, token = service.google_login(profile)
        set_auth_cookie(response, token)
        return schemas.AuthResponse(
            message="Google login successful", user=schemas.User.model_validate(user), token=token
        )
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("log in with Google", e) from e


@router.post("/logout", response_model=schemas.MessageResponse)
def logout(response: Response) -> schemas.MessageResponse:
    """
    Log out by clearing the auth cookie.

    The token itself stays valid until it expires.
    """
    clear_auth_cookie(response)
    return schemas.MessageResponse(message="Logout successful")


@router.get("/me", response_model=schemas.User)
def get_me(current_user: CurrentUser) -> schemas.User:
    return schemas.User.model_validate(current_user)

