"""API routes for browsing and uploading study notes."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from learnflow import schemas
from learnflow.config import get_settings
from learnflow.constants import RECENT_RESOURCES_DEFAULT_LIMIT, RESOURCE_TYPE_STUDY_NOTE
from learnflow.core import container
from learnflow.dependencies import CurrentUser
from learnflow.di import inject_service
from learnflow.exceptions import LearnFlowError
from learnflow.routers.errors import internal_error
from learnflow.services import ResourceService

router = APIRouter(prefix="/study-notes", tags=["study-notes"])
settings = get_settings()


@router.get("", response_model=list[schemas.StudyNote])
def list_study_notes(
    service: ResourceService = Depends(inject_service(container.resource_service)),
) -> list[schemas.StudyNote]:
    try:
        return service.list_resources(RESOURCE_TYPE_STUDY_NOTE)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch study notes", e) from e


@router.get("/recent", response_model=list[schemas.StudyNote])
def list_recent_study_notes(
    limit: Annotated[int, Query(ge=1, le=100)] = RECENT_RESOURCES_DEFAULT_LIMIT,
    service: ResourceService = Depends(inject_service(container.resource_service)),
) -> list[schemas.StudyNote]:
    try:
        return service.list_resources(RESOURCE_TYPE_STUDY_NOTE, limit=limit)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch recent study notes", e) from e


@router.get("/department/{department_id}", response_model=list[schemas.StudyNote])
def list_study_notes_by_department(
    department_id: str,
    service: ResourceService = Depends(inject_service(container.resource_service)),
) -> list[schemas.StudyNote]:
    try:
        return service.list_resources(RESOURCE_TYPE_STUDY_NOTE, department_id=department_id)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"fetch study notes for {department_id}", e) from e


@router.get("/search", response_model=list[schemas.StudyNote])
def search_study_notes(
    q: str | None = None,
    department: str | None = None,
    semester: int | None = None,
    service: ResourceService = Depends(inject_service(container.resource_service)),
) -> list[schemas.StudyNote]:
    """Search approved notes by title, subject or chapter."""
    try:
        return service.search_resources(
            RESOURCE_TYPE_STUDY_NOTE, query=q, department=department, semester=semester
        )
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("search study notes", e) from e


@router.get("/{note_id}", response_model=schemas.StudyNote)
def get_study_note(
    note_id: int,
    service: ResourceService = Depends(inject_service(container.resource_service)),
) -> schemas.StudyNote:
    try:
        return service.get_resource(RESOURCE_TYPE_STUDY_NOTE, note_id)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"fetch study note {note_id}", e) from e


@router.post("", response_model=schemas.Upload, status_code=status.HTTP_201_CREATED)
def upload_study_note(
    file: Annotated[UploadFile, File(...)],
    title: Annotated[str, Form(min_length=1, max_length=300)],
    subject: Annotated[str, Form(min_length=1, max_length=200)],
    semester: Annotated[int, Form(ge=1, le=12)],
    current_user: CurrentUser,
    department_id: Annotated[str | None, Form()] = None,
    chapter: Annotated[str | None, Form(max_length=200)] = None,
    description: Annotated[str | None, Form()] = None,
    service: ResourceService = Depends(inject_service(container.resource_service)),
) -> schemas.Upload:
    """Upload a study note PDF; it is listed once an admin approves it."""
    try:
        content = file.file.read(settings.MAX_RESOURCE_UPLOAD_SIZE + 1)
        return service.upload_resource(
            RESOURCE_TYPE_STUDY_NOTE,
            user_id=current_user.id,
            content=content,
            filename=file.filename or "study-note.pdf",
            content_type=file.content_type,
            fields={
                "title": title.strip(),
                "subject": subject.strip(),
                "department_id": department_id,
                "semester": semester,
                "chapter": chapter,
                "description": description,
            },
        )
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("upload study note", e) from e
