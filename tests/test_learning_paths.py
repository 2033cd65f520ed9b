"""Tests for learning path endpoints and certificate issuance on completion."""

from typing import Any

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from learnflow import models
from tests.conftest import auth_headers_for, create_test_user

MODULES: list[dict[str, Any]] = [
    {"id": "1", "title": "Introduction to Rust", "duration": "1 week"},
    {"id": "2", "title": "Ownership and Borrowing", "duration": "2 weeks"},
    {"id": "3", "title": "Capstone Project", "duration": "1 week"},
]


def create_path(
    client: TestClient, headers: dict[str, str], **overrides: Any  # noqa: ANN401
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "title": "Master Rust",
        "description": "From basics to building real projects",
        "skill_level": "beginner",
        "modules": MODULES,
    }
    payload.update(overrides)
    response = client.post("/api/learning-paths", json=payload, headers=headers)
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


class TestCreateLearningPath:
    """Test suite for POST /learning-paths."""

    def test_create_counts_modules(
        self, client: TestClient, test_user: models.User, auth_headers: dict[str, str]
    ) -> None:
        path = create_path(client, auth_headers)

        assert path["user_id"] == test_user.id
        assert path["total_modules"] == 3
        assert path["completed_modules"] == 0
        assert path["progress"] == 0
        assert path["status"] == "active"
        assert path["certificate_id"] is None
        assert path["modules"][1]["title"] == "Ownership and Borrowing"

    def test_create_with_explicit_total(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        path = create_path(client, auth_headers, total_modules=10)

        assert path["total_modules"] == 10

    def test_create_requires_title(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post("/api/learning-paths", json={"title": ""}, headers=auth_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestListLearningPaths:
    """Test suite for GET /learning-paths."""

    def test_only_own_paths(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        other = create_test_user(db_session, email="other@example.com")
        create_path(client, auth_headers, title="Mine")
        create_path(client, auth_headers_for(other), title="Theirs")

        response = client.get("/api/learning-paths", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert [p["title"] for p in response.json()] == ["Mine"]


class TestUpdateLearningPath:
    """Test suite for PATCH /learning-paths/{id}."""

    def test_update_progress(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        path = create_path(client, auth_headers)

        response = client.patch(
            f"/api/learning-paths/{path['id']}",
            json={"progress": 40, "completed_modules": 1, "active_lesson": "Borrowing"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["progress"] == 40
        assert data["completed_modules"] == 1
        assert data["active_lesson"] == "Borrowing"
        assert data["status"] == "active"
        assert data["certificate_id"] is None

    def test_completion_issues_certificate_once(
        self,
        client: TestClient,
        db_session: Session,
        reference_data: None,
        test_user: models.User,
        auth_headers: dict[str, str],
    ) -> None:
        path = create_path(client, auth_headers)

        response = client.patch(
            f"/api/learning-paths/{path['id']}", json={"progress": 100}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "completed"
        assert data["completed_modules"] == 3
        assert data["certificate_id"] is not None

        certificates = client.get("/api/certificates", headers=auth_headers).json()
        assert len(certificates) == 1
        assert certificates[0]["id"] == data["certificate_id"]
        assert certificates[0]["title"] == "Master Rust"
        assert certificates[0]["verification_code"].startswith("LF-")

        progress = client.get("/api/user/progress", headers=auth_headers).json()
        assert progress["certificates_earned"] == 1

        names = {
            a["achievement"]["name"]
            for a in client.get("/api/user/achievements", headers=auth_headers).json()
        }
        assert names == {"Path Finder", "Certified"}

        # Reopening and completing again must not issue another certificate
        client.patch(
            f"/api/learning-paths/{path['id']}", json={"progress": 50}, headers=auth_headers
        )
        again = client.patch(
            f"/api/learning-paths/{path['id']}", json={"progress": 100}, headers=auth_headers
        ).json()
        assert again["certificate_id"] == data["certificate_id"]
        assert db_session.query(models.Certificate).count() == 1

    def test_progress_over_100_completes_path(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        """Progress past 100 is capped and counts as completion."""
        path = create_path(client, auth_headers)

        response = client.patch(
            f"/api/learning-paths/{path['id']}", json={"progress": 120}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["progress"] == 100
        assert data["status"] == "completed"
        assert data["certificate_id"] is not None
        assert db_session.query(models.Certificate).count() == 1

    def test_negative_progress_rejected(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        path = create_path(client, auth_headers)

        response = client.patch(
            f"/api/learning-paths/{path['id']}", json={"progress": -5}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_update_other_users_path(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        other = create_test_user(db_session, email="other@example.com")
        path = create_path(client, auth_headers_for(other))

        response = client.patch(
            f"/api/learning-paths/{path['id']}", json={"progress": 100}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == f"Learning path with id {path['id']} not found"


class TestDeleteLearningPath:
    """Test suite for DELETE /learning-paths/{id}."""

    def test_delete(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        path = create_path(client, auth_headers)

        response = client.delete(f"/api/learning-paths/{path['id']}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "success": True,
            "message": "Learning path deleted successfully",
        }
        assert client.get("/api/learning-paths", headers=auth_headers).json() == []

    def test_delete_other_users_path(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        other = create_test_user(db_session, email="other@example.com")
        path = create_path(client, auth_headers_for(other))

        response = client.delete(f"/api/learning-paths/{path['id']}", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
