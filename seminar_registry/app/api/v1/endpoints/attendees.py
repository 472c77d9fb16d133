"""
Attendee endpoints for API v1.

Registration creates an attendee with status ``Registered``.
Administrators move attendees to ``Completed`` (or back) and fetch
the completion certificate of completed attendees.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from seminar_registry.app.core.dependencies import (
    get_certificate_service,
    get_design_service,
    get_gateway,
)
from seminar_registry.app.core.errors import NotFoundError, ValidationError
from seminar_registry.app.schemas.attendee import AttendeeCreate, AttendeeRead, AttendeeStatusUpdate
from seminar_registry.app.schemas.certificate import CertificateRead
from seminar_registry.app.services.certificate_service import CertificateService
from seminar_registry.app.services.design_service import CertificateDesignService
from seminar_registry.app.services.gateway import SeminarGateway


router = APIRouter()


@router.post("/", response_model=AttendeeRead, status_code=status.HTTP_201_CREATED)
async def register_attendee(
    attendee: AttendeeCreate,
    gateway: SeminarGateway = Depends(get_gateway),
) -> AttendeeRead:
    """Register an attendee for a seminar.

    Returns 400 when a field is empty and 404 when the seminar does
    not exist.
    """
    try:
        return await gateway.add_attendee(attendee)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/{attendee_id}", response_model=AttendeeRead)
async def get_attendee(attendee_id: str, gateway: SeminarGateway = Depends(get_gateway)) -> AttendeeRead:
    try:
        return await gateway.get_attendee(attendee_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.patch("/{attendee_id}/status", response_model=AttendeeRead)
async def update_attendee_status(
    attendee_id: str,
    update: AttendeeStatusUpdate,
    gateway: SeminarGateway = Depends(get_gateway),
) -> AttendeeRead:
    """Change the attendance status of an attendee."""
    try:
        return await gateway.update_attendee_status(attendee_id, update.status)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/{attendee_id}/certificate", response_model=CertificateRead)
async def get_certificate(
    attendee_id: str,
    certificates: CertificateService = Depends(get_certificate_service),
    designer: CertificateDesignService = Depends(get_design_service),
) -> CertificateRead:
    """Return the printable certificate of a completed attendee.

    The current generated background, if any, is included.  Attendees
    who have not completed the seminar get a 400 response.
    """
    try:
        return await certificates.build_certificate(attendee_id, designer.current_background)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
