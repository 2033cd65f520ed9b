"""Service layer for flashcard decks, cards and spaced repetition reviews."""

import logging
from dataclasses import dataclass
from datetime import timedelta

from sqlalchemy.orm import Session

from learnflow import models, repositories, schemas
from learnflow.constants import SM2_MIN_EASE, SM2_PASSING_QUALITY
from learnflow.exceptions import DeckNotFoundError, FlashcardNotFoundError
from learnflow.utils import utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReviewSchedule:
    """Card state after an SM-2 review."""

    ease_factor: float
    interval: int
    repetitions: int


def sm2_schedule(
    quality: int, ease_factor: float, interval: int, repetitions: int
) -> ReviewSchedule:
    """
    Apply one SM-2 review.

    A failed recall (quality below 3) restarts the card at a one day interval.
    Successful recalls are scheduled after 1 day, then 6 days, then the previous
    interval times the ease factor. The ease factor moves by
    ``0.1 - (5 - q) * (0.08 + (5 - q) * 0.02)`` and never drops below 1.3.

    Examples:
        >>> sm2_schedule(5, 2.5, 1, 0)
        ReviewSchedule(ease_factor=2.6, interval=1, repetitions=1)
        >>> sm2_schedule(4, 2.5, 6, 2)
        ReviewSchedule(ease_factor=2.5, interval=15, repetitions=3)
    """
    if quality < SM2_PASSING_QUALITY:
        repetitions = 0
        interval = 1
    else:
        repetitions += 1
        if repetitions == 1:
            interval = 1
        elif repetitions == 2:  # noqa: PLR2004
            interval = 6
        else:
            interval = round(interval * ease_factor)

    penalty = 5 - quality
    ease_factor = max(SM2_MIN_EASE, ease_factor + 0.1 - penalty * (0.08 + penalty * 0.02))
    return ReviewSchedule(
        ease_factor=round(ease_factor, 2), interval=interval, repetitions=repetitions
    )


class FlashcardService:
    """Service for handling flashcard deck and card operations."""

    def __init__(
        self,
        db: Session,
        deck_repository: repositories.FlashcardDeckRepository,
        flashcard_repository: repositories.FlashcardRepository,
    ) -> None:
        """Initialize service with database session and repositories."""
        self.db = db
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository

    def get_decks(self, user_id: int) -> list[schemas.FlashcardDeck]:
        return [
            schemas.FlashcardDeck.model_validate(d)
            for d in self.deck_repository.get_for_user(user_id)
        ]

    def create_deck(
        self, user_id: int, request: schemas.FlashcardDeckCreate
    ) -> schemas.FlashcardDeck:
        deck = self.deck_repository.create(user_id=user_id, card_count=0, **request.model_dump())
        self.db.commit()
        return schemas.FlashcardDeck.model_validate(deck)

    def update_deck(
        self, deck_id: int, user_id: int, update: schemas.FlashcardDeckUpdate
    ) -> schemas.FlashcardDeck:
        """
        Update deck fields.

        Raises:
            DeckNotFoundError: If the deck does not exist or belongs to another user
        """
        deck = self._get_deck(deck_id, user_id)
        for field, value in update.model_dump(exclude_unset=True).items():
            if value is not None or field in ("description", "category_id"):
                setattr(deck, field, value)
        self.db.commit()
        self.db.refresh(deck)
        return schemas.FlashcardDeck.model_validate(deck)

    def delete_deck(self, deck_id: int, user_id: int) -> None:
        deck = self._get_deck(deck_id, user_id)
        self.deck_repository.delete(deck)
        self.db.commit()
        logger.info(f"Deleted flashcard deck {deck_id} for user {user_id}")

    def get_cards(self, deck_id: int, user_id: int) -> list[schemas.Flashcard]:
        deck = self._get_deck(deck_id, user_id)
        return [
            schemas.Flashcard.model_validate(c)
            for c in self.flashcard_repository.get_by_deck_id(deck.id)
        ]

    def add_cards(
        self, deck_id: int, user_id: int, cards: list[schemas.FlashcardCreate]
    ) -> list[schemas.Flashcard]:
        """
        Append cards to the end of a deck and keep ``card_count`` in sync.

        Raises:
            DeckNotFoundError: If the deck does not exist or belongs to another user
        """
        deck = self._get_deck(deck_id, user_id)
        order = self.flashcard_repository.next_order(deck.id)
        created = []
        for offset, card in enumerate(cards):
            created.append(
                self.flashcard_repository.create(
                    deck_id=deck.id, order=order + offset, **card.model_dump()
                )
            )
        deck.card_count = self.flashcard_repository.count_for_deck(deck.id)
        self.db.commit()

        logger.info(f"Added {len(created)} cards to deck {deck.id}")
        return [schemas.Flashcard.model_validate(c) for c in created]

    def review_card(self, flashcard_id: int, user_id: int, quality: int) -> schemas.Flashcard:
        """
        Record a review and schedule the card's next review with SM-2.

        Raises:
            FlashcardNotFoundError: If the card does not exist or belongs to another user
        """
        card = self.flashcard_repository.get_by_id(flashcard_id, user_id)
        if card is None:
            raise FlashcardNotFoundError(flashcard_id)

        schedule = sm2_schedule(quality, card.ease_factor, card.interval, card.repetitions)
        reviewed_at = utc_now()
        card.ease_factor = schedule.ease_factor
        card.interval = schedule.interval
        card.repetitions = schedule.repetitions
        card.last_reviewed_at = reviewed_at
        card.next_review_at = reviewed_at + timedelta(days=schedule.interval)
        self.db.commit()
        self.db.refresh(card)
        return schemas.Flashcard.model_validate(card)

    def _get_deck(self, deck_id: int, user_id: int) -> models.FlashcardDeck:
        deck = self.deck_repository.get_by_id(deck_id, user_id)
        if deck is None:
            raise DeckNotFoundError(deck_id)
        return deck
