"""Pydantic schemas for learning paths, flashcard decks and certificates."""

from datetime import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LearningPath(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str | None
    category_id: int | None
    skill_level: str
    estimated_duration: int | None
    total_modules: int
    completed_modules: int
    progress: float
    is_ai_generated: bool
    status: str
    active_lesson: str | None
    modules: list[dict[str, Any]]
    certificate_id: int | None
    created_at: dt
    updated_at: dt


class LearningPathCreate(BaseModel):
    """Schema for saving a learning path (usually one returned by the generator)."""

    title: str = Field(..., min_length=1, max_length=300)
    description: str | None = None
    category_id: int | None = None
    skill_level: str = Field("beginner", max_length=20)
    estimated_duration: int | None = Field(None, ge=0)
    total_modules: int | None = Field(None, ge=0)
    is_ai_generated: bool = True
    active_lesson: str | None = Field(None, max_length=200)
    modules: list[dict[str, Any]] = Field(default_factory=list)


class LearningPathUpdate(BaseModel):
    completed_modules: int | None = Field(None, ge=0)
    progress: float | None = Field(None, ge=0)
    active_lesson: str | None = Field(None, max_length=200)
    modules: list[dict[str, Any]] | None = None


class FlashcardDeck(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str | None
    category_id: int | None
    is_public: bool
    is_ai_generated: bool
    card_count: int
    mastery: float
    created_at: dt
    updated_at: dt


class FlashcardDeckCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=300)
    description: str | None = None
    category_id: int | None = None
    is_public: bool = False
    is_ai_generated: bool = False


class FlashcardDeckUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=300)
    description: str | None = None
    category_id: int | None = None
    is_public: bool | None = None
    mastery: float | None = Field(None, ge=0, le=100)


class Flashcard(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    deck_id: int
    front: str
    back: str
    hint: str | None
    image_url: str | None
    order: int
    ease_factor: float
    interval: int
    repetitions: int
    next_review_at: dt | None
    last_reviewed_at: dt | None


class FlashcardCreate(BaseModel):
    front: str = Field(..., min_length=1, description="Prompt shown on the front of the card")
    back: str = Field(..., min_length=1, description="Answer shown on the back of the card")
    hint: str | None = None
    image_url: str | None = Field(None, max_length=1000)


class FlashcardsCreateRequest(BaseModel):
    """Add one or more cards to a deck."""

    cards: list[FlashcardCreate] = Field(..., min_length=1)


class FlashcardsCreateResponse(BaseModel):
    success: bool
    message: str
    flashcards: list[Flashcard]


class FlashcardReviewRequest(BaseModel):
    quality: int = Field(..., ge=0, le=5, description="SM-2 recall quality (0-5)")


class DeleteResponse(BaseModel):
    success: bool
    message: str


class Certificate(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str | None
    category_id: int | None
    skill_name: str | None
    score: float | None
    issue_date: dt
    expiry_date: dt | None
    certificate_url: str | None
    verification_code: str
    is_public: bool
