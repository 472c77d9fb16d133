"""
Asynchronous gateway in front of the entity store.

Callers talk to seminars and attendees only through a
``SeminarGateway``.  The interface is shaped like a remote service:
every operation is asynchronous and may fail, so the in‑memory
``SimulatedGateway`` used today can be swapped for a real backend
without touching the callers.

``SimulatedGateway`` waits for a configurable delay before running the
store operation, which gives callers the same experience as a network
round‑trip.  Each invocation returns its own ``GatewayCall`` handle
with ``loading`` and ``error`` attributes, so several requests can be
in flight without sharing a busy flag.  There is no cancellation,
timeout or retry: once issued, a call always runs to completion.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Generator, Generic, List, Optional, TypeVar

from ..schemas.attendee import AttendanceStatus, AttendeeCreate, AttendeeRead
from ..schemas.certificate import BulkSendResult
from ..schemas.seminar import SeminarCreate, SeminarRead
from .store import SeminarStore


logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_DELAY = 0.5
DEFAULT_BULK_DELAY = 1.5

UNKNOWN_ERROR = "An unknown error occurred"
NO_COMPLETED_MESSAGE = "No attendees have completed the seminar yet."


class GatewayCall(Generic[T]):
    """Handle for a single gateway request.

    ``loading`` is ``True`` from creation until the request settles.
    ``error`` holds the failure message once the request has failed.
    Awaiting the handle returns the result or re‑raises the failure;
    a caller that only polls ``loading`` and ``error`` never has to
    await it.  The handle must be created while an event loop is
    running, otherwise ``RuntimeError`` is raised.
    """

    def __init__(self, operation: str, action: Callable[[], T], delay: float) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            raise RuntimeError(
                f"Gateway call {operation} must be issued from a running event loop"
            ) from None
        self.operation = operation
        self.loading = True
        self.error: Optional[str] = None
        self._task: "asyncio.Task[T]" = loop.create_task(self._run(action, delay))
        self._task.add_done_callback(self._settled)

    @staticmethod
    def _settled(task: "asyncio.Task[T]") -> None:
        # Mark the failure as retrieved; it is re-raised when awaited.
        if not task.cancelled():
            task.exception()

    async def _run(self, action: Callable[[], T], delay: float) -> T:
        await asyncio.sleep(delay)
        try:
            result = action()
        except Exception as exc:
            self.error = str(exc) or UNKNOWN_ERROR
            self.loading = False
            logger.warning("Gateway call %s failed: %s", self.operation, self.error)
            raise
        self.loading = False
        return result

    def done(self) -> bool:
        return self._task.done()

    def __await__(self) -> Generator[Any, None, T]:
        return self._task.__await__()

    def __repr__(self) -> str:
        state = "loading" if self.loading else ("error" if self.error else "done")
        return f"<GatewayCall {self.operation} {state}>"


class SeminarGateway(ABC):
    """Asynchronous service contract for seminars and attendees."""

    @abstractmethod
    def list_seminars(self) -> Awaitable[List[SeminarRead]]:
        ...

    @abstractmethod
    def add_seminar(self, data: SeminarCreate) -> Awaitable[SeminarRead]:
        ...

    @abstractmethod
    def get_seminar(self, seminar_id: str) -> Awaitable[SeminarRead]:
        ...

    @abstractmethod
    def list_attendees(self, seminar_id: str) -> Awaitable[List[AttendeeRead]]:
        ...

    @abstractmethod
    def add_attendee(self, data: AttendeeCreate) -> Awaitable[AttendeeRead]:
        ...

    @abstractmethod
    def get_attendee(self, attendee_id: str) -> Awaitable[AttendeeRead]:
        ...

    @abstractmethod
    def update_attendee_status(
        self, attendee_id: str, status: AttendanceStatus
    ) -> Awaitable[AttendeeRead]:
        ...

    @abstractmethod
    def send_bulk_certificates(self, seminar_id: str) -> Awaitable[BulkSendResult]:
        ...


class SimulatedGateway(SeminarGateway):
    """Gateway that serves requests from a ``SeminarStore`` after a delay.

    ``delay`` applies to every operation except bulk certificate
    sending, which uses ``bulk_delay``.  Both are in seconds; tests
    pass ``0``.
    """

    def __init__(
        self,
        store: SeminarStore,
        *,
        delay: float = DEFAULT_DELAY,
        bulk_delay: float = DEFAULT_BULK_DELAY,
    ) -> None:
        self.store = store
        self.delay = delay
        self.bulk_delay = bulk_delay

    def _call(self, operation: str, action: Callable[[], T], delay: Optional[float] = None) -> GatewayCall[T]:
        logger.debug("Gateway call %s issued", operation)
        return GatewayCall(operation, action, self.delay if delay is None else delay)

    def list_seminars(self) -> GatewayCall[List[SeminarRead]]:
        return self._call("list_seminars", self.store.list_seminars)

    def add_seminar(self, data: SeminarCreate) -> GatewayCall[SeminarRead]:
        return self._call("add_seminar", lambda: self.store.create_seminar(data))

    def get_seminar(self, seminar_id: str) -> GatewayCall[SeminarRead]:
        return self._call("get_seminar", lambda: self.store.get_seminar(seminar_id))

    def list_attendees(self, seminar_id: str) -> GatewayCall[List[AttendeeRead]]:
        return self._call("list_attendees", lambda: self.store.list_attendees(seminar_id))

    def add_attendee(self, data: AttendeeCreate) -> GatewayCall[AttendeeRead]:
        return self._call("add_attendee", lambda: self.store.create_attendee(data))

    def get_attendee(self, attendee_id: str) -> GatewayCall[AttendeeRead]:
        return self._call("get_attendee", lambda: self.store.get_attendee(attendee_id))

    def update_attendee_status(
        self, attendee_id: str, status: AttendanceStatus
    ) -> GatewayCall[AttendeeRead]:
        return self._call(
            "update_attendee_status",
            lambda: self.store.set_attendee_status(attendee_id, status),
        )

    def send_bulk_certificates(self, seminar_id: str) -> GatewayCall[BulkSendResult]:
        """Simulate emailing certificates to every completed attendee.

        No message is delivered.  A seminar without completed attendees
        is reported through ``success=False`` rather than an error.
        """
        return self._call(
            "send_bulk_certificates",
            lambda: self._bulk_send(seminar_id),
            delay=self.bulk_delay,
        )

    def _bulk_send(self, seminar_id: str) -> BulkSendResult:
        logger.info("Simulating bulk certificate sending for seminar %s", seminar_id)
        completed = self.store.count_completed(seminar_id)
        if completed == 0:
            return BulkSendResult(success=False, message=NO_COMPLETED_MESSAGE, sent_count=0)
        logger.info("Sending certificates to %d attendees", completed)
        return BulkSendResult(
            success=True,
            message=f"Successfully sent certificates to {completed} completed attendees.",
            sent_count=completed,
        )
