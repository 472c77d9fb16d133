"""
Seminar endpoints for API v1.

Seminars can be created, listed and fetched individually.  The
attendee list of a seminar and the bulk certificate mailing are
exposed here as nested resources.  There is no update or delete.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from seminar_registry.app.core.dependencies import get_gateway
from seminar_registry.app.core.errors import NotFoundError, ValidationError
from seminar_registry.app.schemas.attendee import AttendeeRead
from seminar_registry.app.schemas.certificate import BulkSendResult
from seminar_registry.app.schemas.seminar import SeminarCreate, SeminarRead
from seminar_registry.app.services.gateway import SeminarGateway


router = APIRouter()


@router.get("/", response_model=List[SeminarRead])
async def list_seminars(gateway: SeminarGateway = Depends(get_gateway)) -> List[SeminarRead]:
    """Return all seminars in the order they were created."""
    return await gateway.list_seminars()


@router.post("/", response_model=SeminarRead, status_code=status.HTTP_201_CREATED)
async def create_seminar(
    seminar: SeminarCreate,
    gateway: SeminarGateway = Depends(get_gateway),
) -> SeminarRead:
    """Create a new seminar.

    All fields are required and ``date`` must be ``YYYY-MM-DD``;
    otherwise a 400 response describes the problem.
    """
    try:
        return await gateway.add_seminar(seminar)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.get("/{seminar_id}", response_model=SeminarRead)
async def get_seminar(seminar_id: str, gateway: SeminarGateway = Depends(get_gateway)) -> SeminarRead:
    try:
        return await gateway.get_seminar(seminar_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/{seminar_id}/attendees", response_model=List[AttendeeRead])
async def list_seminar_attendees(
    seminar_id: str,
    gateway: SeminarGateway = Depends(get_gateway),
) -> List[AttendeeRead]:
    """List the attendees registered for a seminar.

    An unknown seminar simply has no attendees, so the result is an
    empty list rather than a 404.
    """
    return await gateway.list_attendees(seminar_id)


@router.post("/{seminar_id}/certificates/send", response_model=BulkSendResult)
async def send_certificates(
    seminar_id: str,
    gateway: SeminarGateway = Depends(get_gateway),
) -> BulkSendResult:
    """Email certificates to every attendee who completed the seminar.

    Delivery is simulated.  When nobody has completed the seminar the
    response is still 200 with ``success`` set to ``false``.
    """
    return await gateway.send_bulk_certificates(seminar_id)
