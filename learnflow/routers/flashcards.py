"""API routes for flashcard decks, cards and reviews."""

from fastapi import APIRouter, Depends, status

from learnflow import schemas
from learnflow.core import container
from learnflow.dependencies import CurrentUser
from learnflow.di import inject_service
from learnflow.exceptions import LearnFlowError
from learnflow.routers.errors import internal_error
from learnflow.services import FlashcardService

router = APIRouter(tags=["flashcards"])


@router.get("/flashcard-decks", response_model=list[schemas.FlashcardDeck])
def get_decks(
    current_user: CurrentUser,
    service: FlashcardService = Depends(inject_service(container.flashcard_service)),
) -> list[schemas.FlashcardDeck]:
    try:
        return service.get_decks(current_user.id)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch flashcard decks", e) from e


@router.post(
    "/flashcard-decks",
    response_model=schemas.FlashcardDeck,
    status_code=status.HTTP_201_CREATED,
)
def create_deck(
    deck: schemas.FlashcardDeckCreate,
    current_user: CurrentUser,
    service: FlashcardService = Depends(inject_service(container.flashcard_service)),
) -> schemas.FlashcardDeck:
    try:
        return service.create_deck(current_user.id, deck)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("create flashcard deck", e) from e


@router.patch("/flashcard-decks/{deck_id}", response_model=schemas.FlashcardDeck)
def update_deck(
    deck_id: int,
    update: schemas.FlashcardDeckUpdate,
    current_user: CurrentUser,
    service: FlashcardService = Depends(inject_service(container.flashcard_service)),
) -> schemas.FlashcardDeck:
    try:
        return service.update_deck(deck_id, current_user.id, update)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"update flashcard deck {deck_id}", e) from e


@router.delete("/flashcard-decks/{deck_id}", response_model=schemas.DeleteResponse)
def delete_deck(
    deck_id: int,
    current_user: CurrentUser,
    service: FlashcardService = Depends(inject_service(container.flashcard_service)),
) -> schemas.DeleteResponse:
    """Delete a deck together with all its cards."""
    try:
        service.delete_deck(deck_id, current_user.id)
        return schemas.DeleteResponse(success=True, message="Deck deleted successfully")
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"delete flashcard deck {deck_id}", e) from e


@router.get("/flashcard-decks/{deck_id}/cards", response_model=list[schemas.Flashcard])
def get_cards(
    deck_id: int,
    current_user: CurrentUser,
    service: FlashcardService = Depends(inject_service(container.flashcard_service)),
) -> list[schemas.Flashcard]:
    try:
        return service.get_cards(deck_id, current_user.id)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"fetch cards for deck {deck_id}", e) from e


@router.post(
    "/flashcard-decks/{deck_id}/cards",
    response_model=schemas.FlashcardsCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_cards(
    deck_id: int,
    request: schemas.FlashcardsCreateRequest,
    current_user: CurrentUser,
    service: FlashcardService = Depends(inject_service(container.flashcard_service)),
) -> schemas.FlashcardsCreateResponse:
    try:
        flashcards = service.add_cards(deck_id, current_user.id, request.cards)
        return schemas.FlashcardsCreateResponse(
            success=True,
            message=f"Added {len(flashcards)} flashcard(s)",
            flashcards=flashcards,
        )
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"add cards to deck {deck_id}", e) from e


@router.post("/flashcards/{flashcard_id}/review", response_model=schemas.Flashcard)
def review_flashcard(
    flashcard_id: int,
    review: schemas.FlashcardReviewRequest,
    current_user: CurrentUser,
    service: FlashcardService = Depends(inject_service(container.flashcard_service)),
) -> schemas.Flashcard:
    """
    Record how well the card was recalled (0-5) and schedule its next review.

    Args:
        flashcard_id: ID of the reviewed card
        review: SM-2 recall quality

    Returns:
        The card with its updated schedule
    """
    try:
        return service.review_card(flashcard_id, current_user.id, review.quality)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"review flashcard {flashcard_id}", e) from e
