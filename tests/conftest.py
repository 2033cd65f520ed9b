"""Pytest configuration and fixtures."""

import os
import tempfile
import uuid
from collections.abc import Generator
from pathlib import Path
from typing import Any

# Settings are read at import time, so the test environment must be set first
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["SEED_REFERENCE_DATA"] = "false"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["UPLOADS_DIR"] = tempfile.mkdtemp(prefix="learnflow-uploads-")
for _name in ("AI_PROVIDER", "AI_MODEL_NAME", "ADMIN_EMAIL", "ADMIN_PASSWORD"):
    os.environ.pop(_name, None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from learnflow import models  # noqa: E402
from learnflow.bootstrap import seed_reference_data  # noqa: E402
from learnflow.config import get_settings  # noqa: E402
from learnflow.constants import (  # noqa: E402
    RESOURCE_TYPE_QUESTION_PAPER,
    UPLOAD_STATUS_PENDING,
)
from learnflow.database import Base, get_db  # noqa: E402
from learnflow.main import app  # noqa: E402
from learnflow.services.auth_service import create_access_token, hash_password  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine; StaticPool keeps every session on the same in-memory database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

TEST_PASSWORD = "password123"  # noqa: S105


def create_test_user(
    db_session: Session,
    email: str = "student@example.com",
    first_name: str = "Test",
    last_name: str = "Student",
    is_admin: bool = False,
    password: str | None = TEST_PASSWORD,
) -> models.User:
    """Create a user with a hashed password."""
    user = models.User(
        email=email,
        first_name=first_name,
        last_name=last_name,
        is_admin=is_admin,
        hashed_password=hash_password(password) if password else None,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def auth_headers_for(user: models.User) -> dict[str, str]:
    """Bearer header carrying a fresh access token for ``user``."""
    return {"Authorization": f"Bearer {create_access_token(user)}"}


def create_test_resource(
    db_session: Session,
    user_id: int | None = None,
    resource_type: str = RESOURCE_TYPE_QUESTION_PAPER,
    status: str = UPLOAD_STATUS_PENDING,
    title: str = "Operating Systems",
    subject: str = "Operating Systems",
    department_id: str | None = None,
    **fields: Any,  # noqa: ANN401
) -> models.ResourceUpload:
    """Create a resource upload row directly in the database."""
    resource = models.ResourceUpload(
        user_id=user_id,
        resource_uid=uuid.uuid4().hex,
        resource_type=resource_type,
        title=title,
        subject=subject,
        department_id=department_id,
        semester=fields.pop("semester", 4),
        file_path=fields.pop("file_path", "question-papers/os.pdf"),
        status=status,
        **fields,
    )
    db_session.add(resource)
    db_session.commit()
    db_session.refresh(resource)
    return resource


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(autouse=True)
def uploads_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Store uploaded files in a per-test directory."""
    directory = tmp_path / "uploads"
    directory.mkdir()
    monkeypatch.setattr(get_settings(), "UPLOADS_DIR", directory)
    return directory


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def reference_data(db_session: Session) -> None:
    """Seed departments, categories, achievements and sample resources."""
    seed_reference_data(db_session)


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    return create_test_user(db_session)


@pytest.fixture
def admin_user(db_session: Session) -> models.User:
    return create_test_user(
        db_session, email="admin@example.com", first_name="Ada", last_name="Admin", is_admin=True
    )


@pytest.fixture
def auth_headers(test_user: models.User) -> dict[str, str]:
    return auth_headers_for(test_user)


@pytest.fixture
def admin_headers(admin_user: models.User) -> dict[str, str]:
    return auth_headers_for(admin_user)
