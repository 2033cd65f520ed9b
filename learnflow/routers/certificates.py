"""API routes for certificates."""

from fastapi import APIRouter, Depends

from learnflow import schemas
from learnflow.core import container
from learnflow.dependencies import CurrentUser
from learnflow.di import inject_service
from learnflow.exceptions import LearnFlowError
from learnflow.routers.errors import internal_error
from learnflow.services import CertificateService

router = APIRouter(prefix="/certificates", tags=["certificates"])


@router.get("", response_model=list[schemas.Certificate])
def get_certificates(
    current_user: CurrentUser,
    service: CertificateService = Depends(inject_service(container.certificate_service)),
) -> list[schemas.Certificate]:
    try:
        return service.get_certificates(current_user.id)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("fetch certificates", e) from e


@router.get("/verify/{code}", response_model=schemas.Certificate)
def verify_certificate(
    code: str,
    service: CertificateService = Depends(inject_service(container.certificate_service)),
) -> schemas.Certificate:
    """Public lookup of a certificate by its verification code (e.g. ``LF-3F9A0C1B2D``)."""
    try:
        return service.verify(code)
    except LearnFlowError:
        raise
    except Exception as e:
        raise internal_error("verify certificate", e) from e
