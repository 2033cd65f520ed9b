"""Tests for the admin moderation endpoints."""

from pathlib import Path

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from learnflow import models
from learnflow.constants import (
    DEFAULT_REJECTION_REASON,
    RESOURCE_TYPE_STUDY_NOTE,
    UPLOAD_STATUS_APPROVED,
    UPLOAD_STATUS_PENDING,
    UPLOAD_STATUS_REJECTED,
)
from tests.conftest import create_test_resource, create_test_user


class TestAdminAccess:
    """Every admin route requires an admin token."""

    def test_requires_token(self, client: TestClient) -> None:
        response = client.get("/api/admin/uploads")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_rejects_regular_user(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.get("/api/admin/stats", headers=auth_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["detail"] == "Admin access required"


class TestListUploads:
    """Test suite for GET /admin/uploads."""

    def test_list_with_uploader(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        admin_headers: dict[str, str],
    ) -> None:
        create_test_resource(db_session, user_id=test_user.id, title="Compiler Design")

        response = client.get("/api/admin/uploads", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        assert data[0]["uploader"]["email"] == test_user.email
        assert data[0]["status"] == UPLOAD_STATUS_PENDING

    def test_filter_by_status(
        self, client: TestClient, db_session: Session, admin_headers: dict[str, str]
    ) -> None:
        create_test_resource(db_session, title="Pending", status=UPLOAD_STATUS_PENDING)
        create_test_resource(db_session, title="Approved", status=UPLOAD_STATUS_APPROVED)

        pending = client.get(
            "/api/admin/uploads", params={"status": "pending"}, headers=admin_headers
        ).json()
        everything = client.get(
            "/api/admin/uploads", params={"status": "all"}, headers=admin_headers
        ).json()

        assert [u["title"] for u in pending] == ["Pending"]
        assert len(everything) == 2

    def test_search_percent_is_literal(
        self, client: TestClient, db_session: Session, admin_headers: dict[str, str]
    ) -> None:
        create_test_resource(db_session, title="Computer Networks")
        create_test_resource(db_session, title="Top 10% Questions")

        response = client.get("/api/admin/uploads", params={"search": "%"}, headers=admin_headers)

        assert [u["title"] for u in response.json()] == ["Top 10% Questions"]

    def test_search_title_or_type(
        self, client: TestClient, db_session: Session, admin_headers: dict[str, str]
    ) -> None:
        create_test_resource(db_session, title="Computer Networks")
        create_test_resource(
            db_session, title="Chapter Summary", resource_type=RESOURCE_TYPE_STUDY_NOTE
        )

        by_title = client.get(
            "/api/admin/uploads", params={"search": "networks"}, headers=admin_headers
        ).json()
        by_type = client.get(
            "/api/admin/uploads", params={"search": "study"}, headers=admin_headers
        ).json()

        assert [u["title"] for u in by_title] == ["Computer Networks"]
        assert [u["title"] for u in by_type] == ["Chapter Summary"]


class TestModeration:
    """Test suite for approving and rejecting uploads."""

    def test_approve_publishes_upload(
        self,
        client: TestClient,
        db_session: Session,
        admin_user: models.User,
        admin_headers: dict[str, str],
    ) -> None:
        upload = create_test_resource(db_session, title="Database Systems")

        response = client.post(f"/api/admin/uploads/{upload.id}/approve", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "message": "Upload approved successfully",
            "title": "Database Systems",
        }
        db_session.refresh(upload)
        assert upload.status == UPLOAD_STATUS_APPROVED
        assert upload.approved_by == admin_user.id
        assert upload.approved_at is not None
        assert client.get(f"/api/question-papers/{upload.id}").status_code == status.HTTP_200_OK

    def test_reject_with_reason(
        self, client: TestClient, db_session: Session, admin_headers: dict[str, str]
    ) -> None:
        upload = create_test_resource(db_session)

        response = client.post(
            f"/api/admin/uploads/{upload.id}/reject",
            json={"reason": "Blurry scan"},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Upload rejected"
        db_session.refresh(upload)
        assert upload.status == UPLOAD_STATUS_REJECTED
        assert upload.rejection_reason == "Blurry scan"

    def test_reject_without_body(
        self, client: TestClient, db_session: Session, admin_headers: dict[str, str]
    ) -> None:
        upload = create_test_resource(db_session)

        response = client.post(f"/api/admin/uploads/{upload.id}/reject", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        db_session.refresh(upload)
        assert upload.rejection_reason == DEFAULT_REJECTION_REASON

    def test_approve_missing_upload(
        self, client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        response = client.post("/api/admin/uploads/9999/approve", headers=admin_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Upload not found"


class TestPromoteUser:
    """Test suite for POST /admin/promote-user."""

    def test_promote(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        admin_user: models.User,
        admin_headers: dict[str, str],
    ) -> None:
        response = client.post(
            "/api/admin/promote-user",
            json={"email": "  STUDENT@example.com "},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user_id"] == test_user.id
        db_session.refresh(test_user)
        assert test_user.is_admin is True
        assert test_user.promoted_by == admin_user.id

    def test_promote_unknown_user(self, client: TestClient, admin_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/admin/promote-user", json={"email": "ghost@example.com"}, headers=admin_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "User not found"

    def test_promote_existing_admin(
        self, client: TestClient, db_session: Session, admin_headers: dict[str, str]
    ) -> None:
        create_test_user(db_session, email="other-admin@example.com", is_admin=True)

        response = client.post(
            "/api/admin/promote-user",
            json={"email": "other-admin@example.com"},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "User is already an admin"

    def test_promote_blank_email(self, client: TestClient, admin_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/admin/promote-user", json={"email": "   "}, headers=admin_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Email is required"


class TestDeleteResource:
    """Test suite for DELETE /admin/resources/{id}."""

    def test_delete_removes_row_and_file(
        self,
        client: TestClient,
        db_session: Session,
        admin_headers: dict[str, str],
        uploads_dir: Path,
    ) -> None:
        stored = uploads_dir / "question-papers" / "networks.pdf"
        stored.parent.mkdir(parents=True)
        stored.write_bytes(b"%PDF-1.4")
        resource = create_test_resource(
            db_session,
            title="Computer Networks",
            status=UPLOAD_STATUS_APPROVED,
            file_path="question-papers/networks.pdf",
        )
        resource_id = resource.id

        response = client.delete(f"/api/admin/resources/{resource_id}", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "message": "Resource deleted successfully",
            "resource_title": "Computer Networks",
        }
        assert not stored.exists()
        db_session.expire_all()
        assert db_session.get(models.ResourceUpload, resource_id) is None

    def test_delete_seeded_sample_keeps_external_link(
        self, client: TestClient, db_session: Session, admin_headers: dict[str, str]
    ) -> None:
        resource = create_test_resource(
            db_session, status=UPLOAD_STATUS_APPROVED, file_path="https://pdflink.to/ee3c0640/"
        )

        response = client.delete(f"/api/admin/resources/{resource.id}", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK

    def test_delete_pending_is_refused(
        self, client: TestClient, db_session: Session, admin_headers: dict[str, str]
    ) -> None:
        resource = create_test_resource(db_session, status=UPLOAD_STATUS_PENDING)

        response = client.delete(f"/api/admin/resources/{resource.id}", headers=admin_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Only approved resources can be deleted"


class TestAdminStats:
    """Test suite for GET /admin/stats."""

    def test_stats(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        admin_headers: dict[str, str],
    ) -> None:
        create_test_resource(db_session, status=UPLOAD_STATUS_PENDING)
        create_test_resource(db_session, status=UPLOAD_STATUS_APPROVED)
        create_test_resource(db_session, status=UPLOAD_STATUS_APPROVED)
        client.post(
            "/api/user/history",
            json={"search_query": "compilers"},
            headers=admin_headers,
        )

        response = client.get("/api/admin/stats", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "users": 2,
            "uploads": 3,
            "search_history": 1,
            "upload_stats": {"pending": 1, "approved": 2, "rejected": 0},
        }
