"""Pydantic schemas for AI generation endpoints.

The generated models double as structured output types for the AI agents.
"""

from typing import Literal

from pydantic import BaseModel, Field

from learnflow.constants import MCQ_MAX_QUESTIONS, MCQ_MIN_QUESTIONS

Difficulty = Literal["easy", "medium", "hard"]
SkillLevel = Literal["beginner", "intermediate", "advanced"]


class MCQRequest(BaseModel):
    prompt: str
    num_questions: int = Field(5, ge=MCQ_MIN_QUESTIONS, le=MCQ_MAX_QUESTIONS)


class MCQQuestion(BaseModel):
    question: str
    options: list[str] = Field(..., min_length=4, max_length=4)
    correct_answer: str = Field(..., description="Exact text of one of the options")
    explanation: str | None = None
    difficulty: Difficulty | None = None


class MCQResponse(BaseModel):
    questions: list[MCQQuestion]


class LearningPathGenerateRequest(BaseModel):
    topic: str
    current_level: str | None = None
    goal: str | None = None
    daily_minutes: int | None = Field(None, gt=0, le=1440)


class GeneratedModule(BaseModel):
    id: str
    title: str
    description: str
    duration: str
    topics: list[str]
    difficulty: str


class GeneratedLearningPath(BaseModel):
    title: str
    description: str
    total_duration: str
    difficulty: str
    prerequisites: list[str]
    estimated_completion: str
    skills: list[str]
    modules: list[GeneratedModule]


class LearningPathGenerateResponse(BaseModel):
    path: GeneratedLearningPath


class FlashcardGenerateRequest(BaseModel):
    content: str
    deck_name: str | None = None


class GeneratedFlashcard(BaseModel):
    id: str
    front: str
    back: str
    difficulty: Difficulty


class GeneratedFlashcards(BaseModel):
    flashcards: list[GeneratedFlashcard]


class SummarizeRequest(BaseModel):
    content: str
    type: str | None = None


class Summary(BaseModel):
    summary: str
    key_points: list[str]
    concepts: list[str]
    difficulty: SkillLevel | None = None
    estimated_read_time: str | None = None
