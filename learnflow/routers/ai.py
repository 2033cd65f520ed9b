"""API routes for AI generated study material."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile

from learnflow import schemas
from learnflow.config import get_settings
from learnflow.constants import MCQ_MAX_QUESTIONS, MCQ_MIN_QUESTIONS
from learnflow.core import container
from learnflow.dependencies import CurrentUser
from learnflow.di import inject_service
from learnflow.exceptions import LearnFlowError
from learnflow.routers.errors import internal_error
from learnflow.services import AIService

router = APIRouter(tags=["ai"])
settings = get_settings()


@router.post("/generate-mcq", response_model=schemas.MCQResponse)
async def generate_mcq(
    request: schemas.MCQRequest,
    current_user: CurrentUser,
    service: AIService = Depends(inject_service(container.ai_service)),
) -> schemas.MCQResponse:
    """Generate multiple choice questions about a topic."""
    try:
        return await service.generate_mcq(request.prompt, request.num_questions)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("generate MCQ questions", e) from e


@router.post("/generate-mcq-from-file", response_model=schemas.MCQResponse)
async def generate_mcq_from_file(
    file: Annotated[UploadFile, File(...)],
    current_user: CurrentUser,
    num_questions: Annotated[int, Form(ge=MCQ_MIN_QUESTIONS, le=MCQ_MAX_QUESTIONS)] = 5,
    service: AIService = Depends(inject_service(container.ai_service)),
) -> schemas.MCQResponse:
    """
    Generate multiple choice questions from a PDF, Word or text file.

    Text files are read; PDF and Word documents are described by their name.
    The file is not stored.
    """
    try:
        content = await file.read(settings.MAX_MCQ_UPLOAD_SIZE + 1)
        return await service.generate_mcq_from_file(
            file.filename or "upload.txt", content, num_questions
        )
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("generate MCQ questions from file", e) from e


@router.post("/ai/generate-learning-path", response_model=schemas.LearningPathGenerateResponse)
async def generate_learning_path(
    request: schemas.LearningPathGenerateRequest,
    current_user: CurrentUser,
    service: AIService = Depends(inject_service(container.ai_service)),
) -> schemas.LearningPathGenerateResponse:
    try:
        return await service.generate_learning_path(request)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("generate learning path", e) from e


@router.post("/ai/generate-flashcards", response_model=schemas.GeneratedFlashcards)
async def generate_flashcards(
    request: schemas.FlashcardGenerateRequest,
    current_user: CurrentUser,
    service: AIService = Depends(inject_service(container.ai_service)),
) -> schemas.GeneratedFlashcards:
    try:
        return await service.generate_flashcards(request)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("generate flashcards", e) from e


@router.post("/ai/summarize", response_model=schemas.Summary)
async def summarize(
    request: schemas.SummarizeRequest,
    current_user: CurrentUser,
    service: AIService = Depends(inject_service(container.ai_service)),
) -> schemas.Summary:
    try:
        return await service.summarize(request)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("summarize content", e) from e
