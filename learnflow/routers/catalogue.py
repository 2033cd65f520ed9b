"""API routes for catalogue statistics, categories and departments."""

from fastapi import APIRouter, Depends, status

from learnflow import schemas
from learnflow.core import container
from learnflow.dependencies import AdminUser
from learnflow.di import inject_service
from learnflow.exceptions import LearnFlowError
from learnflow.routers.errors import internal_error
from learnflow.services import CatalogueService

router = APIRouter(tags=["catalogue"])


@router.get("/stats", response_model=schemas.CatalogueStats)
def get_stats(
    service: CatalogueService = Depends(inject_service(container.catalogue_service)),
) -> schemas.CatalogueStats:
    """Counts shown on the landing page. Only approved resources are counted."""
    try:
        return service.get_stats()
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch stats", e) from e


@router.get("/categories", response_model=list[schemas.Category])
def get_categories(
    service: CatalogueService = Depends(inject_service(container.catalogue_service)),
) -> list[schemas.Category]:
    try:
        return service.get_categories()
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch categories", e) from e


@router.get("/departments", response_model=list[schemas.Department])
def get_departments(
    service: CatalogueService = Depends(inject_service(container.catalogue_service)),
) -> list[schemas.Department]:
    try:
        return service.get_departments()
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch departments", e) from e


@router.get("/departments/{department_id}", response_model=schemas.Department)
def get_department(
    department_id: str,
    service: CatalogueService = Depends(inject_service(container.catalogue_service)),
) -> schemas.Department:
    try:
        return service.get_department(department_id)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error(f"fetch department {department_id}", e) from e


@router.post(
    "/departments",
    response_model=schemas.Department,
    status_code=status.HTTP_201_CREATED,
)
def create_department(
    department: schemas.DepartmentCreate,
    admin: AdminUser,
    service: CatalogueService = Depends(inject_service(container.catalogue_service)),
) -> schemas.Department:
    """
    Create a department.

    Raises:
        HTTPException: 409 if a department with the same id exists
    """
    try:
        return service.create_department(department)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("create department", e) from e
