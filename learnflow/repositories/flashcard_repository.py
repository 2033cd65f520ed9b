"""Flashcard deck and flashcard repositories."""

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from learnflow import models

logger = logging.getLogger(__name__)


class FlashcardDeckRepository:
    """Repository for FlashcardDeck database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_by_id(self, deck_id: int, user_id: int) -> models.FlashcardDeck | None:
        """Get a deck by its ID, verifying user ownership."""
        stmt = select(models.FlashcardDeck).where(
            models.FlashcardDeck.id == deck_id,
            models.FlashcardDeck.user_id == user_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_for_user(self, user_id: int) -> list[models.FlashcardDeck]:
        stmt = (
            select(models.FlashcardDeck)
            .where(models.FlashcardDeck.user_id == user_id)
            .order_by(models.FlashcardDeck.updated_at.desc(), models.FlashcardDeck.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def create(self, user_id: int, **fields: Any) -> models.FlashcardDeck:  # noqa: ANN401
        deck = models.FlashcardDeck(user_id=user_id, **fields)
        self.db.add(deck)
        self.db.flush()
        self.db.refresh(deck)
        logger.info(f"Created flashcard deck {deck.id} for user {user_id}")
        return deck

    def delete(self, deck: models.FlashcardDeck) -> None:
        """Delete a deck; its cards go with it."""
        self.db.delete(deck)
        self.db.flush()


class FlashcardRepository:
    """Repository for Flashcard database operations."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_by_id(self, flashcard_id: int, user_id: int) -> models.Flashcard | None:
        """Get a flashcard by its ID, verifying ownership through its deck."""
        stmt = (
            select(models.Flashcard)
            .join(models.FlashcardDeck, models.FlashcardDeck.id == models.Flashcard.deck_id)
            .where(
                models.Flashcard.id == flashcard_id,
                models.FlashcardDeck.user_id == user_id,
            )
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_deck_id(self, deck_id: int) -> list[models.Flashcard]:
        stmt = (
            select(models.Flashcard)
            .where(models.Flashcard.deck_id == deck_id)
            .order_by(models.Flashcard.order, models.Flashcard.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def next_order(self, deck_id: int) -> int:
        stmt = select(func.max(models.Flashcard.order)).where(models.Flashcard.deck_id == deck_id)
        current = self.db.execute(stmt).scalar_one_or_none()
        return 0 if current is None else current + 1

    def create(self, deck_id: int, order: int, **fields: Any) -> models.Flashcard:  # noqa: ANN401
        flashcard = models.Flashcard(deck_id=deck_id, order=order, **fields)
        self.db.add(flashcard)
        self.db.flush()
        self.db.refresh(flashcard)
        return flashcard

    def count_for_deck(self, deck_id: int) -> int:
        stmt = select(func.count(models.Flashcard.id)).where(models.Flashcard.deck_id == deck_id)
        return self.db.execute(stmt).scalar_one()
