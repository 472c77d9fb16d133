"""
In‑memory entity store for seminars and attendees.

The ``SeminarStore`` holds the two collections and offers synchronous
read and write primitives.  It performs no I/O and no waiting; the
gateway in ``services.gateway`` adds the simulated network behaviour
on top.  Records are frozen Pydantic models: updating an attendee's
status replaces the stored record with a modified copy, so values
already handed to callers never change underneath them.

Nothing is ever deleted.  All data is lost when the store object is
discarded.
"""

import logging
import re
import uuid
from datetime import date
from typing import Callable, Iterable, List, Optional

from ..core.errors import NotFoundError, ValidationError
from ..schemas.attendee import AttendanceStatus, AttendeeCreate, AttendeeRead
from ..schemas.seminar import SeminarCreate, SeminarRead


logger = logging.getLogger(__name__)

CALENDAR_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


INITIAL_SEMINARS = [
    SeminarRead(
        id="seminar-1",
        title="Digital Transformation in Public Service",
        date="2024-08-15",
        speaker="Dr. Juan Dela Cruz",
        description=(
            "Exploring the impact of technology on governance and public "
            "administration in the Philippines."
        ),
    ),
    SeminarRead(
        id="seminar-2",
        title="Leadership and Governance in the New Normal",
        date="2024-09-10",
        speaker="Sec. Maria Reyes",
        description="Strategies for effective leadership amidst contemporary challenges.",
    ),
]

INITIAL_ATTENDEES = [
    AttendeeRead(
        id="attendee-1",
        full_name="Ana Santos",
        email="ana.santos@gov.ph",
        contact_number="09171234567",
        agency="Department of Information and Communications Technology",
        position="IT Officer",
        seminar_id="seminar-1",
        status=AttendanceStatus.REGISTERED,
    ),
    AttendeeRead(
        id="attendee-2",
        full_name="Benito Carlos",
        email="b.carlos@gov.ph",
        contact_number="09209876543",
        agency="Civil Service Commission",
        position="Director",
        seminar_id="seminar-1",
        status=AttendanceStatus.COMPLETED,
    ),
]


def new_id(prefix: str) -> str:
    """Return a process‑unique identifier such as ``seminar-3f2a...``."""
    return f"{prefix}-{uuid.uuid4().hex}"


def _blank_fields(data: dict) -> List[str]:
    return [name for name, value in data.items() if not str(value).strip()]


class SeminarStore:
    """Holds seminars and attendees in insertion order.

    ``enforce_seminar_reference`` makes ``create_attendee`` reject
    registrations whose ``seminar_id`` is unknown.  ``id_factory``
    produces identifiers from a prefix and exists mainly for tests.
    """

    def __init__(
        self,
        seminars: Optional[Iterable[SeminarRead]] = None,
        attendees: Optional[Iterable[AttendeeRead]] = None,
        *,
        enforce_seminar_reference: bool = True,
        id_factory: Callable[[str], str] = new_id,
    ) -> None:
        self._seminars: List[SeminarRead] = list(seminars or [])
        self._attendees: List[AttendeeRead] = list(attendees or [])
        self.enforce_seminar_reference = enforce_seminar_reference
        self._id_factory = id_factory

    @classmethod
    def seeded(cls, **kwargs) -> "SeminarStore":
        """Create a store pre‑populated with the sample seminars and attendees."""
        return cls(INITIAL_SEMINARS, INITIAL_ATTENDEES, **kwargs)

    def _fresh_id(self, prefix: str, taken: Iterable[str]) -> str:
        existing = set(taken)
        candidate = self._id_factory(prefix)
        while candidate in existing:
            candidate = self._id_factory(prefix)
        return candidate

    # ------------------------------------------------------------------
    # Seminars
    # ------------------------------------------------------------------
    def list_seminars(self) -> List[SeminarRead]:
        return list(self._seminars)

    def get_seminar(self, seminar_id: str) -> SeminarRead:
        for seminar in self._seminars:
            if seminar.id == seminar_id:
                return seminar
        raise NotFoundError(f"Seminar {seminar_id} not found")

    def create_seminar(self, data: SeminarCreate) -> SeminarRead:
        """Validate and append a new seminar.

        Every field must be non‑empty and ``date`` must be an ISO
        calendar date.  Raises ``ValidationError`` otherwise.
        """
        fields = data.model_dump()
        blank = _blank_fields(fields)
        if blank:
            raise ValidationError(f"All fields are required. Missing: {', '.join(blank)}.")
        message = f"Invalid seminar date '{data.date}', expected YYYY-MM-DD."
        if not CALENDAR_DATE.fullmatch(data.date):
            raise ValidationError(message)
        try:
            date.fromisoformat(data.date)
        except ValueError as exc:
            raise ValidationError(message) from exc
        seminar = SeminarRead(
            id=self._fresh_id("seminar", (s.id for s in self._seminars)),
            **fields,
        )
        self._seminars.append(seminar)
        logger.info("Created seminar %s '%s'", seminar.id, seminar.title)
        return seminar

    # ------------------------------------------------------------------
    # Attendees
    # ------------------------------------------------------------------
    def list_attendees(self, seminar_id: str) -> List[AttendeeRead]:
        return [a for a in self._attendees if a.seminar_id == seminar_id]

    def get_attendee(self, attendee_id: str) -> AttendeeRead:
        for attendee in self._attendees:
            if attendee.id == attendee_id:
                return attendee
        raise NotFoundError("Attendee not found")

    def create_attendee(self, data: AttendeeCreate) -> AttendeeRead:
        """Register an attendee with status ``Registered``.

        Raises ``ValidationError`` when a field is empty and, if
        reference checking is enabled, ``NotFoundError`` when the
        seminar does not exist.
        """
        fields = data.model_dump()
        if _blank_fields(fields):
            raise ValidationError("All fields are required.")
        if self.enforce_seminar_reference:
            self.get_seminar(data.seminar_id)
        attendee = AttendeeRead(
            id=self._fresh_id("attendee", (a.id for a in self._attendees)),
            status=AttendanceStatus.REGISTERED,
            **fields,
        )
        self._attendees.append(attendee)
        logger.info("Registered attendee %s for seminar %s", attendee.id, attendee.seminar_id)
        return attendee

    def set_attendee_status(self, attendee_id: str, status: AttendanceStatus) -> AttendeeRead:
        for index, attendee in enumerate(self._attendees):
            if attendee.id == attendee_id:
                updated = attendee.model_copy(update={"status": AttendanceStatus(status)})
                self._attendees[index] = updated
                logger.info("Attendee %s status %s -> %s", attendee_id, attendee.status.value, updated.status.value)
                return updated
        raise NotFoundError("Attendee not found")

    def count_completed(self, seminar_id: str) -> int:
        return sum(
            1
            for a in self._attendees
            if a.seminar_id == seminar_id and a.status == AttendanceStatus.COMPLETED
        )
