"""AI content generation with deterministic fallbacks."""

from collections.abc import Awaitable, Callable
from pathlib import PurePath
from typing import TypeVar

import structlog

from learnflow import schemas
from learnflow.config import GenerationKind, Settings, get_settings
from learnflow.constants import (
    AI_CONTENT_CHAR_LIMIT,
    AI_SUMMARY_CHAR_LIMIT,
    FLASHCARDS_CHARS_PER_CARD,
    FLASHCARDS_MAX,
    FLASHCARDS_MIN,
    MCQ_ALLOWED_EXTENSIONS,
)
from learnflow.exceptions import InvalidUploadError, ValidationError
from learnflow.services.ai import fallbacks
from learnflow.services.ai.ai_agents import (
    get_flashcard_agent,
    get_learning_path_agent,
    get_mcq_agent,
    get_summary_agent,
)
from learnflow.utils import humanize_filename

structlog_logger = structlog.get_logger(__name__)

T = TypeVar("T")


def flashcard_count(content: str) -> int:
    """
    Number of cards to request for a piece of content.

    Examples:
        >>> flashcard_count("short")
        5
        >>> flashcard_count("x" * 2000)
        10
        >>> flashcard_count("x" * 10000)
        15
    """
    return min(FLASHCARDS_MAX, max(FLASHCARDS_MIN, len(content) // FLASHCARDS_CHARS_PER_CARD))


def mcq_prompt_from_file(filename: str, content: bytes, num_questions: int) -> str:
    """
    Build an MCQ prompt for an uploaded study file.

    Text files are used as-is; PDF and Word documents are described by their
    file name.
    """
    extension = PurePath(filename).suffix.lower()
    name = humanize_filename(filename)
    if extension == ".txt":
        text = content.decode("utf-8", errors="replace")
    elif extension == ".pdf":
        text = (
            f'Generate comprehensive multiple choice questions about "{name}". '
            "Focus on key concepts, definitions, applications, and important details "
            "that would typically be covered in this topic."
        )
    else:
        text = (
            f'Generate multiple choice questions about "{name}". '
            "Cover fundamental concepts, practical applications, and theoretical knowledge."
        )

    if len(text) > AI_CONTENT_CHAR_LIMIT:
        text = text[:AI_CONTENT_CHAR_LIMIT] + "..."
    return f"{text} Generate {num_questions} comprehensive MCQ questions based on this content."


class AIService:
    """Generates study material with the configured model, or locally when AI is off."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    async def generate_mcq(self, prompt: str, num_questions: int) -> schemas.MCQResponse:
        if not prompt.strip():
            raise ValidationError("Prompt is required")

        async def run_agent() -> list[schemas.MCQQuestion]:
            result = await get_mcq_agent().run(
                f'Generate exactly {num_questions} multiple-choice questions about: "{prompt}".'
            )
            return result.output.questions[:num_questions]

        questions = await self._generate(
            "mcq",
            run_agent,
            lambda: fallbacks.generate_mcq_questions(prompt, num_questions),
        )
        return schemas.MCQResponse(questions=questions)

    async def generate_mcq_from_file(
        self, filename: str, content: bytes, num_questions: int
    ) -> schemas.MCQResponse:
        """
        Generate MCQs from an uploaded PDF, Word or text file.

        Raises:
            InvalidUploadError: If the file type is unsupported, the file is empty
                or exceeds the upload limit
        """
        if PurePath(filename).suffix.lower() not in MCQ_ALLOWED_EXTENSIONS:
            raise InvalidUploadError("Only PDF, DOC, DOCX and TXT files are allowed")
        if not content:
            raise InvalidUploadError("Uploaded file is empty")
        if len(content) > self.settings.MAX_MCQ_UPLOAD_SIZE:
            max_mb = self.settings.MAX_MCQ_UPLOAD_SIZE // (1024 * 1024)
            raise InvalidUploadError(f"File too large. Maximum size is {max_mb}MB.")

        structlog_logger.info(
            "mcq_file_received", filename=filename, size=len(content), questions=num_questions
        )
        prompt = mcq_prompt_from_file(filename, content, num_questions)
        return await self.generate_mcq(prompt, num_questions)

    async def generate_learning_path(
        self, request: schemas.LearningPathGenerateRequest
    ) -> schemas.LearningPathGenerateResponse:
        topic = request.topic.strip()
        if not topic:
            raise ValidationError("Topic is required")
        level = request.current_level or "beginner"

        async def run_agent() -> schemas.GeneratedLearningPath:
            result = await get_learning_path_agent().run(
                "Create a comprehensive learning path for someone who wants to learn "
                f'"{topic}".\n'
                f"Current level: {level}\n"
                f"Goal: {request.goal or 'Become proficient'}\n"
                f"Daily time commitment: {request.daily_minutes or 30} minutes"
            )
            return result.output

        path = await self._generate(
            "learning_path",
            run_agent,
            lambda: fallbacks.generate_learning_path(topic, level),
        )
        return schemas.LearningPathGenerateResponse(path=path)

    async def generate_flashcards(
        self, request: schemas.FlashcardGenerateRequest
    ) -> schemas.GeneratedFlashcards:
        content = request.content
        if not content.strip():
            raise ValidationError("Content is required")
        count = flashcard_count(content)

        async def run_agent() -> list[schemas.GeneratedFlashcard]:
            result = await get_flashcard_agent().run(
                f"Create {count} flashcards from the following study content.\n\n"
                f"{content[:AI_CONTENT_CHAR_LIMIT]}"
            )
            return result.output.flashcards

        flashcards = await self._generate(
            "flashcards", run_agent, lambda: fallbacks.generate_flashcards(content)
        )
        return schemas.GeneratedFlashcards(flashcards=flashcards)

    async def summarize(self, request: schemas.SummarizeRequest) -> schemas.Summary:
        content = request.content
        if not content.strip():
            raise ValidationError("Content is required")

        async def run_agent() -> schemas.Summary:
            result = await get_summary_agent().run(content[:AI_SUMMARY_CHAR_LIMIT])
            return result.output

        return await self._generate("summary", run_agent, lambda: fallbacks.summarize(content))

    async def _generate(
        self,
        kind: GenerationKind,
        run_agent: Callable[[], Awaitable[T]],
        fallback: Callable[[], T],
    ) -> T:
        if not self.settings.ai_enabled:
            structlog_logger.debug("ai_disabled_using_fallback", kind=kind)
            return fallback()

        try:
            output = await run_agent()
        except Exception as e:
            # Provider or output validation failure; serve the local version instead
            structlog_logger.warning(
                "ai_generation_failed", kind=kind, error=str(e), exc_info=True
            )
            return fallback()

        structlog_logger.info(
            "ai_generation_succeeded", kind=kind, provider=self.settings.AI_PROVIDER
        )
        return output
