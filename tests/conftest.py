import itertools
import pathlib
import sys

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from seminar_registry.app.core.config import Settings
from seminar_registry.app.main import create_app
from seminar_registry.app.schemas.attendee import AttendeeCreate
from seminar_registry.app.schemas.seminar import SeminarCreate
from seminar_registry.app.services.design_service import CertificateDesignService
from seminar_registry.app.services.gateway import SimulatedGateway
from seminar_registry.app.services.store import SeminarStore


def counting_ids():
    counter = itertools.count(100)
    return lambda prefix: f"{prefix}-{next(counter)}"


@pytest.fixture
def store():
    return SeminarStore.seeded(id_factory=counting_ids())


@pytest.fixture
def gateway(store):
    return SimulatedGateway(store, delay=0, bulk_delay=0)


@pytest.fixture
def new_seminar():
    return SeminarCreate(
        title="Records Management for LGUs",
        date="2024-10-01",
        speaker="Atty. Rosa Lim",
        description="Retention schedules and digitisation of public records.",
    )


@pytest.fixture
def new_attendee():
    return AttendeeCreate(
        full_name="Carla Mendoza",
        email="c.mendoza@gov.ph",
        contact_number="09181112222",
        agency="Commission on Audit",
        position="State Auditor II",
        seminar_id="seminar-1",
    )


@pytest.fixture
def test_settings():
    return Settings(api_delay_ms=0, bulk_delay_ms=0, image_api_key="")


@pytest.fixture
def designer():
    return CertificateDesignService(api_key="")


@pytest.fixture
def app(test_settings, gateway, designer):
    return create_app(test_settings, gateway=gateway, design_service=designer)


@pytest.fixture
def client(app):
    return TestClient(app)
