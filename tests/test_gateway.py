import asyncio
import gc
import logging

import pytest

from seminar_registry.app.core.errors import NotFoundError, ValidationError
from seminar_registry.app.schemas.attendee import AttendanceStatus
from seminar_registry.app.services.gateway import (
    NO_COMPLETED_MESSAGE,
    UNKNOWN_ERROR,
    GatewayCall,
    SeminarGateway,
    SimulatedGateway,
)
from seminar_registry.app.services.store import INITIAL_SEMINARS, SeminarStore


def test_simulated_gateway_implements_interface(gateway):
    assert isinstance(gateway, SeminarGateway)


def test_call_is_loading_until_settled(gateway):
    async def scenario():
        call = gateway.list_seminars()
        assert call.loading
        assert call.error is None
        seminars = await call
        assert not call.loading
        assert call.done()
        return seminars

    seminars = asyncio.run(scenario())
    assert [s.id for s in seminars] == ["seminar-1", "seminar-2"]


def test_failed_call_records_error_and_reraises(gateway, store):
    async def scenario():
        call = gateway.update_attendee_status("attendee-404", AttendanceStatus.COMPLETED)
        with pytest.raises(NotFoundError):
            await call
        return call

    call = asyncio.run(scenario())
    assert call.error == "Attendee not found"
    assert not call.loading
    assert store.count_completed("seminar-1") == 1


def test_validation_error_is_surfaced(gateway, new_seminar):
    async def scenario():
        call = gateway.add_seminar(new_seminar.model_copy(update={"title": ""}))
        with pytest.raises(ValidationError):
            await call
        return call

    call = asyncio.run(scenario())
    assert "title" in call.error


def test_unexpected_error_without_message_uses_default():
    async def scenario():
        def boom():
            raise RuntimeError()

        call = GatewayCall("boom", boom, 0)
        with pytest.raises(RuntimeError):
            await call
        return call

    assert asyncio.run(scenario()).error == UNKNOWN_ERROR


def test_calls_track_their_own_state(gateway):
    async def scenario():
        ok = gateway.get_attendee("attendee-1")
        bad = gateway.get_attendee("attendee-404")
        results = await asyncio.gather(ok, bad, return_exceptions=True)
        return ok, bad, results

    ok, bad, results = asyncio.run(scenario())
    assert results[0].full_name == "Ana Santos"
    assert isinstance(results[1], NotFoundError)
    assert ok.error is None and not ok.loading
    assert bad.error == "Attendee not found" and not bad.loading


def test_mutation_happens_after_delay(store, new_attendee):
    gateway = SimulatedGateway(store, delay=0.05, bulk_delay=0.05)

    async def scenario():
        call = gateway.add_attendee(new_attendee)
        await asyncio.sleep(0)
        assert not call.done()
        assert len(store.list_attendees("seminar-1")) == 2
        return await call

    created = asyncio.run(scenario())
    assert store.list_attendees("seminar-1")[-1] == created


def test_add_attendee_then_list_includes_it(gateway, new_attendee):
    async def scenario():
        created = await gateway.add_attendee(new_attendee)
        listed = await gateway.list_attendees("seminar-1")
        return created, listed

    created, listed = asyncio.run(scenario())
    assert created.status == AttendanceStatus.REGISTERED
    assert created in listed


def send_bulk(gateway, seminar_id):
    async def scenario():
        return await gateway.send_bulk_certificates(seminar_id)

    return asyncio.run(scenario())


def test_bulk_send_without_completed_attendees(gateway):
    result = send_bulk(gateway, "seminar-2")
    assert result.success is False
    assert result.message == NO_COMPLETED_MESSAGE
    assert result.sent_count == 0


def test_bulk_send_reports_completed_count(gateway):
    result = send_bulk(gateway, "seminar-1")
    assert result.success is True
    assert result.message == "Successfully sent certificates to 1 completed attendees."
    assert result.sent_count == 1


def test_call_outside_event_loop_is_rejected(gateway):
    with pytest.raises(RuntimeError, match="running event loop"):
        gateway.send_bulk_certificates("seminar-1")


def test_polled_failure_is_not_reported_as_unretrieved(gateway, caplog):
    async def scenario():
        call = gateway.get_attendee("attendee-404")
        while call.loading:
            await asyncio.sleep(0)
        return call.error

    with caplog.at_level(logging.ERROR, logger="asyncio"):
        error = asyncio.run(scenario())
        gc.collect()

    assert error == "Attendee not found"
    assert [r for r in caplog.records if r.name == "asyncio"] == []


def test_registration_and_certificate_scenario(new_attendee):
    gateway = SimulatedGateway(SeminarStore(INITIAL_SEMINARS), delay=0, bulk_delay=0)

    async def scenario():
        attendee = await gateway.add_attendee(new_attendee)
        assert attendee.status == AttendanceStatus.REGISTERED
        first = await gateway.send_bulk_certificates("seminar-1")
        await gateway.update_attendee_status(attendee.id, AttendanceStatus.COMPLETED)
        second = await gateway.send_bulk_certificates("seminar-1")
        return first, second

    first, second = asyncio.run(scenario())
    assert first.success is False
    assert first.message == "No attendees have completed the seminar yet."
    assert second.success is True
    assert second.message == "Successfully sent certificates to 1 completed attendees."


def test_bulk_send_uses_bulk_delay(store):
    gateway = SimulatedGateway(store, delay=0, bulk_delay=0.05)

    async def scenario():
        call = gateway.send_bulk_certificates("seminar-1")
        fast = gateway.list_seminars()
        await fast
        assert call.loading
        return await call

    assert asyncio.run(scenario()).success
