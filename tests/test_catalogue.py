"""Tests for catalogue endpoints: stats, categories and departments."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from learnflow import models, seed_data
from learnflow.bootstrap import ensure_admin, seed_reference_data
from learnflow.config import Settings


class TestCatalogueStats:
    """Test suite for GET /stats."""

    def test_stats_counts_only_approved_resources(
        self, client: TestClient, db_session: Session, reference_data: None, test_user: models.User
    ) -> None:
        response = client.get("/api/stats")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "departments": len(seed_data.DEPARTMENTS),
            "question_papers": len(seed_data.SAMPLE_QUESTION_PAPERS),
            "study_notes": len(seed_data.SAMPLE_STUDY_NOTES),
            "active_students": 1,
        }

    def test_stats_empty_database(self, client: TestClient) -> None:
        response = client.get("/api/stats")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["question_papers"] == 0


class TestCategories:
    """Test suite for GET /categories."""

    def test_categories_in_display_order(self, client: TestClient, reference_data: None) -> None:
        response = client.get("/api/categories")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [c["name"] for c in data] == [c["name"] for c in seed_data.CATEGORIES]
        assert [c["order"] for c in data] == list(range(len(seed_data.CATEGORIES)))


class TestDepartments:
    """Test suite for the department endpoints."""

    def test_list_departments(self, client: TestClient, reference_data: None) -> None:
        response = client.get("/api/departments")

        assert response.status_code == status.HTTP_200_OK
        ids = {d["id"] for d in response.json()}
        assert {"ai", "computer", "civil"} <= ids

    def test_get_department(self, client: TestClient, reference_data: None) -> None:
        response = client.get("/api/departments/ai")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == "ai"

    def test_get_department_not_found(self, client: TestClient, reference_data: None) -> None:
        response = client.get("/api/departments/astrology")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Department not found"

    def test_create_department_as_admin(
        self, client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        payload = {
            "id": "biotech",
            "name": "Biotechnology",
            "short_name": "Biotech",
            "description": "Genetics, bioprocess and molecular biology",
            "accent_color": "from-green-500 to-teal-500",
        }

        response = client.post("/api/departments", json=payload, headers=admin_headers)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["resource_count"] == 0
        assert client.get("/api/departments/biotech").status_code == status.HTTP_200_OK

        duplicate = client.post("/api/departments", json=payload, headers=admin_headers)
        assert duplicate.status_code == status.HTTP_409_CONFLICT

    def test_create_department_requires_admin(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/departments",
            json={
                "id": "biotech",
                "name": "Biotechnology",
                "short_name": "Biotech",
                "description": "Biology",
                "accent_color": "green",
            },
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["detail"] == "Admin access required"


class TestBootstrap:
    """Test suite for startup seeding and admin setup."""

    def test_seeding_is_idempotent(self, db_session: Session) -> None:
        seed_reference_data(db_session)
        seed_reference_data(db_session)

        assert db_session.query(models.Department).count() == len(seed_data.DEPARTMENTS)
        assert db_session.query(models.Achievement).count() == len(seed_data.ACHIEVEMENTS)
        samples = len(seed_data.SAMPLE_QUESTION_PAPERS) + len(seed_data.SAMPLE_STUDY_NOTES)
        assert db_session.query(models.ResourceUpload).count() == samples

    def test_ensure_admin_creates_account(self, db_session: Session) -> None:
        settings = Settings(ADMIN_EMAIL="Root@Example.com", ADMIN_PASSWORD=" secret-pass ")

        ensure_admin(db_session, settings)

        admin = db_session.query(models.User).filter_by(email="root@example.com").one()
        assert admin.is_admin is True
        assert admin.hashed_password is not None

    def test_ensure_admin_promotes_existing_user(
        self, db_session: Session, test_user: models.User
    ) -> None:
        settings = Settings(ADMIN_EMAIL=test_user.email, ADMIN_PASSWORD="secret-pass")

        ensure_admin(db_session, settings)

        db_session.refresh(test_user)
        assert test_user.is_admin is True
        assert test_user.promoted_at is not None

    def test_ensure_admin_needs_credentials(self, db_session: Session) -> None:
        ensure_admin(db_session, Settings(ADMIN_EMAIL="root@example.com", ADMIN_PASSWORD=None))

        assert db_session.query(models.User).count() == 0
