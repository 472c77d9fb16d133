"""
Business logic for completion certificates.

A certificate can only be produced for an attendee whose status is
``Completed``.  The service reads the attendee and the seminar through
the gateway and returns the values a front end needs to lay out and
print the certificate.
"""

import logging
from datetime import date
from typing import Optional

from ..core.errors import ValidationError
from ..schemas.attendee import AttendanceStatus
from ..schemas.certificate import CertificateRead
from .gateway import SeminarGateway


def format_held_on(iso_date: str) -> str:
    """Render ``2024-08-15`` as ``August 15, 2024``.

    Values that are not ISO dates are returned unchanged.
    """
    try:
        parsed = date.fromisoformat(iso_date)
    except ValueError:
        return iso_date
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


class CertificateService:
    """Builds certificates for completed attendees."""

    def __init__(self, gateway: SeminarGateway) -> None:
        self.gateway = gateway

    async def build_certificate(
        self, attendee_id: str, background_image_url: Optional[str] = None
    ) -> CertificateRead:
        """Return the certificate data for ``attendee_id``.

        Raises ``NotFoundError`` for an unknown attendee or seminar and
        ``ValidationError`` if the attendee has not completed the seminar.
        """
        attendee = await self.gateway.get_attendee(attendee_id)
        if attendee.status != AttendanceStatus.COMPLETED:
            raise ValidationError(
                f"Attendee {attendee_id} has not completed the seminar yet."
            )
        seminar = await self.gateway.get_seminar(attendee.seminar_id)
        logging.getLogger(__name__).info(
            "Prepared certificate for attendee %s (seminar %s)", attendee.id, seminar.id
        )
        return CertificateRead(
            attendee_id=attendee.id,
            attendee_name=attendee.full_name,
            seminar_id=seminar.id,
            seminar_title=seminar.title,
            seminar_date=seminar.date,
            held_on=format_held_on(seminar.date),
            speaker_name=seminar.speaker,
            background_image_url=background_image_url,
        )
