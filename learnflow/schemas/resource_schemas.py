"""Pydantic schemas for the resource catalogue and its moderation."""

from datetime import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class Department(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    short_name: str
    description: str
    accent_color: str
    resource_count: int


class DepartmentCreate(BaseModel):
    """Schema for creating a department."""

    id: str = Field(..., min_length=1, max_length=50, pattern=r"^[a-z0-9-]+$")
    name: str = Field(..., min_length=1, max_length=200)
    short_name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    accent_color: str = Field(..., min_length=1, max_length=50)
    resource_count: int = Field(0, ge=0)


class Category(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    icon: str
    color: str
    parent_id: int | None
    order: int


class ResourceBase(BaseModel):
    """Fields shared by question papers and study notes."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int | None
    resource_type: str
    title: str
    subject: str
    department_id: str | None
    semester: int | None
    description: str | None
    file_url: str
    status: str
    uploaded_at: dt


class QuestionPaper(ResourceBase):
    year: int | None
    session: str | None
    marks: int | None


class StudyNote(ResourceBase):
    chapter: str | None


class Upload(ResourceBase):
    """Any upload regardless of type, as listed on a user's profile."""

    year: int | None
    session: str | None
    marks: int | None
    chapter: str | None
    rejection_reason: str | None
    approved_at: dt | None
    rejected_at: dt | None


class Uploader(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str


class AdminUpload(Upload):
    """Upload as seen in the moderation queue."""

    uploader: Uploader | None


class CatalogueStats(BaseModel):
    departments: int
    question_papers: int
    study_notes: int
    active_students: int


class RejectUploadRequest(BaseModel):
    reason: str | None = Field(None, max_length=1000)


class ModerationResponse(BaseModel):
    message: str
    title: str


class PromoteUserRequest(BaseModel):
    email: str = ""


class PromoteUserResponse(BaseModel):
    message: str
    user_id: int
    email: str


class ResourceDeleteResponse(BaseModel):
    message: str
    resource_title: str


class UploadStats(BaseModel):
    pending: int
    approved: int
    rejected: int


class AdminStats(BaseModel):
    users: int
    uploads: int
    search_history: int
    upload_stats: UploadStats
