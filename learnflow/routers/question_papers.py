"""API routes for browsing and uploading question papers."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from learnflow import schemas
from learnflow.config import get_settings
from learnflow.constants import RECENT_RESOURCES_DEFAULT_LIMIT, RESOURCE_TYPE_QUESTION_PAPER
from learnflow.core import container
from learnflow.dependencies import CurrentUser
from learnflow.di import inject_service
from learnflow.exceptions import LearnFlowError
from learnflow.routers.errors import internal_error
from learnflow.services import ResourceService

router = APIRouter(prefix="/question-papers", tags=["question-papers"])
settings = get_settings()


@router.get("", response_model=list[schemas.QuestionPaper])
def list_question_papers(
    service: ResourceService = Depends(inject_service(container.resource_service)),
) -> list[schemas.QuestionPaper]:
    try:
        return service.list_resources(RESOURCE_TYPE_QUESTION_PAPER)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch question papers", e) from e


@router.get("/recent", response_model=list[schemas.QuestionPaper])
def list_recent_question_papers(
    limit: Annotated[int, Query(ge=1, le=100)] = RECENT_RESOURCES_DEFAULT_LIMIT,
    service: ResourceService = Depends(inject_service(container.resource_service)),
) -> list[schemas.QuestionPaper]:
    try:
        return service.list_resources(RESOURCE_TYPE_QUESTION_PAPER, limit=limit)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch recent question papers", e) from e


@router.get("/department/{department_id}", response_model=list[schemas.QuestionPaper])
def list_question_papers_by_department(
    department_id: str,
    service: ResourceService = Depends(inject_service(container.resource_service)),
) -> list[schemas.QuestionPaper]:
    try:
        return service.list_resources(RESOURCE_TYPE_QUESTION_PAPER, department_id=department_id)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"fetch question papers for {department_id}", e) from e


@router.get("/search", response_model=list[schemas.QuestionPaper])
def search_question_papers(
    q: str | None = None,
    department: str | None = None,
    semester: int | None = None,
    year: int | None = None,
    service: ResourceService = Depends(inject_service(container.resource_service)),
) -> list[schemas.QuestionPaper]:
    """
    Search approved question papers.

    Args:
        q: Case-insensitive match on title or subject
        department: Department id; ``all`` means every department
        semester: Exact semester
        year: Exact exam year
    """
    try:
        return service.search_resources(
            RESOURCE_TYPE_QUESTION_PAPER,
            query=q,
            department=department,
            semester=semester,
            year=year,
        )
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("search question papers", e) from e


@router.get("/{paper_id}", response_model=schemas.QuestionPaper)
def get_question_paper(
    paper_id: int,
    service: ResourceService = Depends(inject_service(container.resource_service)),
) -> schemas.QuestionPaper:
    try:
        return service.get_resource(RESOURCE_TYPE_QUESTION_PAPER, paper_id)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"fetch question paper {paper_id}", e) from e


@router.post("", response_model=schemas.Upload, status_code=status.HTTP_201_CREATED)
def upload_question_paper(
    file: Annotated[UploadFile, File(...)],
    title: Annotated[str, Form(min_length=1, max_length=300)],
    subject: Annotated[str, Form(min_length=1, max_length=200)],
    semester: Annotated[int, Form(ge=1, le=12)],
    year: Annotated[int, Form(ge=1900, le=2100)],
    session: Annotated[str, Form(min_length=1, max_length=50)],
    current_user: CurrentUser,
    department_id: Annotated[str | None, Form()] = None,
    marks: Annotated[int, Form(ge=0)] = 100,
    description: Annotated[str | None, Form()] = None,
    service: ResourceService = Depends(inject_service(container.resource_service)),
) -> schemas.Upload:
    """
    Upload a question paper PDF for moderation.

    The paper stays pending, and hidden from the catalogue, until an admin
    approves it.

    Raises:
        HTTPException: 400 if the file is not a PDF or is larger than 10MB
    """
    try:
        content = file.file.read(settings.MAX_RESOURCE_UPLOAD_SIZE + 1)
        return service.upload_resource(
            RESOURCE_TYPE_QUESTION_PAPER,
            user_id=current_user.id,
            content=content,
            filename=file.filename or "question-paper.pdf",
            content_type=file.content_type,
            fields={
                "title": title.strip(),
                "subject": subject.strip(),
                "department_id": department_id,
                "semester": semester,
                "year": year,
                "session": session.strip(),
                "marks": marks,
                "description": description,
            },
        )
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("upload question paper", e) from e
