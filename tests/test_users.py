"""Tests for the signed-in user's search history, uploads and preferences."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from learnflow import models
from learnflow.constants import (
    SEARCH_HISTORY_LIMIT,
    UPLOAD_STATUS_APPROVED,
    UPLOAD_STATUSES,
)
from tests.conftest import auth_headers_for, create_test_resource, create_test_user


class TestSearchHistory:
    """Test suite for /user/history."""

    def test_record_and_list(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/user/history",
            json={
                "search_query": "operating systems",
                "department": "computer",
                "resource_type": "question_paper",
                "semester": 4,
            },
            headers=auth_headers,
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json() == {"message": "Search history saved"}

        client.post("/api/user/history", json={"search_query": "dbms"}, headers=auth_headers)

        history = client.get("/api/user/history", headers=auth_headers).json()
        assert [h["search_query"] for h in history] == ["dbms", "operating systems"]
        assert history[1]["semester"] == 4

    def test_history_is_capped(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        headers = auth_headers_for(test_user)
        for i in range(SEARCH_HISTORY_LIMIT + 5):
            db_session.add(models.SearchHistory(user_id=test_user.id, search_query=f"query {i}"))
        db_session.commit()

        history = client.get("/api/user/history", headers=headers).json()

        assert len(history) == SEARCH_HISTORY_LIMIT

    def test_history_is_per_user(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        other = create_test_user(db_session, email="other@example.com")
        client.post(
            "/api/user/history",
            json={"search_query": "secret"},
            headers=auth_headers_for(other),
        )

        assert client.get("/api/user/history", headers=auth_headers).json() == []

    def test_blank_query_rejected(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/user/history", json={"search_query": ""}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestUserUploads:
    """Test suite for GET /user/uploads."""

    def test_lists_every_status(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        auth_headers: dict[str, str],
    ) -> None:
        for upload_status in UPLOAD_STATUSES:
            create_test_resource(db_session, user_id=test_user.id, status=upload_status)
        create_test_resource(db_session, user_id=None, status=UPLOAD_STATUS_APPROVED)

        response = client.get("/api/user/uploads", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        statuses = sorted(u["status"] for u in response.json())
        assert statuses == ["approved", "pending", "rejected"]


class TestPreferences:
    """Test suite for /user/preferences."""

    def test_defaults_created_on_first_read(
        self, client: TestClient, test_user: models.User, auth_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/user/preferences", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == test_user.first_name
        assert data["interests"] == []
        assert data["daily_goal_minutes"] == 30
        assert data["onboarding_completed"] is False

    def test_partial_update(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.put(
            "/api/user/preferences",
            json={
                "college": "State Engineering College",
                "interests": ["Programming", "Data Science"],
                "weekly_goal_days": 6,
                "onboarding_completed": True,
            },
            headers=auth_headers,
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Preferences saved successfully"}

        client.put("/api/user/preferences", json={"course": "B.Tech"}, headers=auth_headers)

        data = client.get("/api/user/preferences", headers=auth_headers).json()
        assert data["college"] == "State Engineering College"
        assert data["course"] == "B.Tech"
        assert data["interests"] == ["Programming", "Data Science"]
        assert data["weekly_goal_days"] == 6
        assert data["onboarding_completed"] is True

    def test_invalid_goal_days(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.put(
            "/api/user/preferences", json={"weekly_goal_days": 8}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
