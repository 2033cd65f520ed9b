"""Tests for flashcard deck and card endpoints."""

from typing import Any

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from learnflow import models
from learnflow.services.flashcard_service import ReviewSchedule, sm2_schedule
from tests.conftest import auth_headers_for, create_test_user


def create_deck(client: TestClient, headers: dict[str, str], title: str = "Networking") -> int:
    response = client.post("/api/flashcard-decks", json={"title": title}, headers=headers)
    assert response.status_code == status.HTTP_201_CREATED
    return int(response.json()["id"])


def add_cards(
    client: TestClient, headers: dict[str, str], deck_id: int, *fronts: str
) -> list[dict[str, Any]]:
    response = client.post(
        f"/api/flashcard-decks/{deck_id}/cards",
        json={"cards": [{"front": front, "back": f"Answer to {front}"} for front in fronts]},
        headers=headers,
    )
    assert response.status_code == status.HTTP_201_CREATED
    flashcards: list[dict[str, Any]] = response.json()["flashcards"]
    return flashcards


class TestSM2Schedule:
    """Unit tests for the SM-2 scheduling step."""

    def test_first_successful_review(self) -> None:
        assert sm2_schedule(5, 2.5, 1, 0) == ReviewSchedule(
            ease_factor=2.6, interval=1, repetitions=1
        )

    def test_second_successful_review(self) -> None:
        schedule = sm2_schedule(4, 2.5, 1, 1)

        assert schedule.interval == 6
        assert schedule.repetitions == 2
        assert schedule.ease_factor == 2.5

    def test_later_review_multiplies_interval(self) -> None:
        schedule = sm2_schedule(4, 2.5, 6, 2)

        assert schedule.interval == 15
        assert schedule.repetitions == 3

    def test_failed_review_resets(self) -> None:
        schedule = sm2_schedule(1, 2.5, 15, 3)

        assert schedule.interval == 1
        assert schedule.repetitions == 0
        assert schedule.ease_factor == 1.96

    @pytest.mark.parametrize("quality", [0, 1, 2])
    def test_ease_never_below_minimum(self, quality: int) -> None:
        assert sm2_schedule(quality, 1.3, 1, 0).ease_factor == 1.3


class TestDecks:
    """Test suite for /flashcard-decks."""

    def test_create_and_list(
        self, client: TestClient, test_user: models.User, auth_headers: dict[str, str]
    ) -> None:
        deck_id = create_deck(client, auth_headers)

        response = client.get("/api/flashcard-decks", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [d["id"] for d in data] == [deck_id]
        assert data[0]["user_id"] == test_user.id
        assert data[0]["card_count"] == 0
        assert data[0]["is_public"] is False

    def test_decks_are_private(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        other = create_test_user(db_session, email="other@example.com")
        create_deck(client, auth_headers_for(other))

        assert client.get("/api/flashcard-decks", headers=auth_headers).json() == []

    def test_update_deck(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        deck_id = create_deck(client, auth_headers)

        response = client.patch(
            f"/api/flashcard-decks/{deck_id}",
            json={"title": "Computer Networks", "is_public": True, "mastery": 40},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["title"] == "Computer Networks"
        assert data["is_public"] is True
        assert data["mastery"] == 40

    def test_update_other_users_deck(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        other = create_test_user(db_session, email="other@example.com")
        deck_id = create_deck(client, auth_headers_for(other))

        response = client.patch(
            f"/api/flashcard-decks/{deck_id}", json={"title": "Mine now"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == f"Deck with id {deck_id} not found"

    def test_delete_deck_removes_cards(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        deck_id = create_deck(client, auth_headers)
        add_cards(client, auth_headers, deck_id, "What is TCP?", "What is UDP?")

        response = client.delete(f"/api/flashcard-decks/{deck_id}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True, "message": "Deck deleted successfully"}
        assert db_session.query(models.Flashcard).count() == 0


class TestCards:
    """Test suite for deck cards and reviews."""

    def test_add_cards_appends_in_order(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        deck_id = create_deck(client, auth_headers)
        add_cards(client, auth_headers, deck_id, "What is TCP?", "What is UDP?")

        response = client.post(
            f"/api/flashcard-decks/{deck_id}/cards",
            json={"cards": [{"front": "What is QUIC?", "back": "UDP based transport"}]},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["message"] == "Added 1 flashcard(s)"

        cards = client.get(f"/api/flashcard-decks/{deck_id}/cards", headers=auth_headers).json()
        assert [c["front"] for c in cards] == ["What is TCP?", "What is UDP?", "What is QUIC?"]
        assert [c["order"] for c in cards] == [0, 1, 2]
        assert cards[0]["ease_factor"] == 2.5
        assert cards[0]["next_review_at"] is None

        deck = client.get("/api/flashcard-decks", headers=auth_headers).json()[0]
        assert deck["card_count"] == 3

    def test_add_cards_requires_at_least_one(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        deck_id = create_deck(client, auth_headers)

        response = client.post(
            f"/api/flashcard-decks/{deck_id}/cards", json={"cards": []}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_cards_of_other_users_deck(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        other = create_test_user(db_session, email="other@example.com")
        deck_id = create_deck(client, auth_headers_for(other))

        response = client.get(f"/api/flashcard-decks/{deck_id}/cards", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_review_schedules_next_review(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        deck_id = create_deck(client, auth_headers)
        card = add_cards(client, auth_headers, deck_id, "What is TCP?")[0]

        response = client.post(
            f"/api/flashcards/{card['id']}/review", json={"quality": 5}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["repetitions"] == 1
        assert data["interval"] == 1
        assert data["ease_factor"] == 2.6
        assert data["last_reviewed_at"] is not None
        assert data["next_review_at"] is not None

    def test_review_invalid_quality(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        deck_id = create_deck(client, auth_headers)
        card = add_cards(client, auth_headers, deck_id, "What is TCP?")[0]

        response = client.post(
            f"/api/flashcards/{card['id']}/review", json={"quality": 6}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_review_other_users_card(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        other = create_test_user(db_session, email="other@example.com")
        other_headers = auth_headers_for(other)
        deck_id = create_deck(client, other_headers)
        card = add_cards(client, other_headers, deck_id, "What is TCP?")[0]

        response = client.post(
            f"/api/flashcards/{card['id']}/review", json={"quality": 5}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
