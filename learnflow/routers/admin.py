"""API routes for the admin dashboard. Every route requires an admin."""

from fastapi import APIRouter, Depends

from learnflow import schemas
from learnflow.core import container
from learnflow.dependencies import AdminUser
from learnflow.di import inject_service
from learnflow.exceptions import LearnFlowError
from learnflow.routers.errors import internal_error
from learnflow.services import AdminService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/uploads", response_model=list[schemas.AdminUpload])
def list_uploads(
    admin: AdminUser,
    status: str | None = None,
    search: str | None = None,
    service: AdminService = Depends(inject_service(container.admin_service)),
) -> list[schemas.AdminUpload]:
    """
    List uploads for moderation, newest first.

    Args:
        status: ``pending``, ``approved``, ``rejected`` or ``all``
        search: Case-insensitive match on title or resource type
    """
    try:
        return service.list_uploads(status=status, search=search)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch uploads", e) from e


@router.post("/uploads/{upload_id}/approve", response_model=schemas.ModerationResponse)
def approve_upload(
    upload_id: int,
    admin: AdminUser,
    service: AdminService = Depends(inject_service(container.admin_service)),
) -> schemas.ModerationResponse:
    try:
        return service.approve_upload(upload_id, admin)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"approve upload {upload_id}", e) from e


@router.post("/uploads/{upload_id}/reject", response_model=schemas.ModerationResponse)
def reject_upload(
    upload_id: int,
    admin: AdminUser,
    body: schemas.RejectUploadRequest | None = None,
    service: AdminService = Depends(inject_service(container.admin_service)),
) -> schemas.ModerationResponse:
    try:
        return service.reject_upload(upload_id, admin, reason=body.reason if body else None)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"reject upload {upload_id}", e) from e


@router.post("/promote-user", response_model=schemas.PromoteUserResponse)
def promote_user(
    body: schemas.PromoteUserRequest,
    admin: AdminUser,
    service: AdminService = Depends(inject_service(container.admin_service)),
) -> schemas.PromoteUserResponse:
    try:
        return service.promote_user(body.email, admin)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("promote user", e) from e


@router.delete("/resources/{resource_id}", response_model=schemas.ResourceDeleteResponse)
def delete_resource(
    resource_id: int,
    admin: AdminUser,
    service: AdminService = Depends(inject_service(container.admin_service)),
) -> schemas.ResourceDeleteResponse:
    """Delete an approved resource and its stored file."""
    try:
        return service.delete_resource(resource_id, admin)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"delete resource {resource_id}", e) from e


@router.get("/stats", response_model=schemas.AdminStats)
def get_admin_stats(
    admin: AdminUser,
    service: AdminService = Depends(inject_service(container.admin_service)),
) -> schemas.AdminStats:
    try:
        return service.get_stats()
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch admin stats", e) from e
