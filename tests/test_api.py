import httpx
import pytest
from fastapi.testclient import TestClient

from seminar_registry.app.main import create_app
from seminar_registry.app.services.design_service import CertificateDesignService


NEW_SEMINAR = {
    "title": "Records Management for LGUs",
    "date": "2024-10-01",
    "speaker": "Atty. Rosa Lim",
    "description": "Retention schedules and digitisation of public records.",
}

NEW_ATTENDEE = {
    "full_name": "Carla Mendoza",
    "email": "c.mendoza@gov.ph",
    "contact_number": "09181112222",
    "agency": "Commission on Audit",
    "position": "State Auditor II",
    "seminar_id": "seminar-1",
}


def test_list_seminars(client):
    resp = client.get("/api/v1/seminars/")
    assert resp.status_code == 200
    assert [s["id"] for s in resp.json()] == ["seminar-1", "seminar-2"]


def test_create_seminar(client):
    resp = client.post("/api/v1/seminars/", json=NEW_SEMINAR)
    assert resp.status_code == 201
    created = resp.json()
    assert created["title"] == NEW_SEMINAR["title"]
    assert client.get(f"/api/v1/seminars/{created['id']}").json() == created


def test_create_seminar_with_empty_field(client):
    resp = client.post("/api/v1/seminars/", json={**NEW_SEMINAR, "title": ""})
    assert resp.status_code == 400
    assert "title" in resp.json()["detail"]


def test_get_unknown_seminar(client):
    assert client.get("/api/v1/seminars/seminar-404").status_code == 404


def test_register_and_list_attendees(client):
    resp = client.post("/api/v1/attendees/", json=NEW_ATTENDEE)
    assert resp.status_code == 201
    attendee = resp.json()
    assert attendee["status"] == "Registered"

    listed = client.get("/api/v1/seminars/seminar-1/attendees").json()
    assert listed[-1] == attendee
    assert client.get("/api/v1/seminars/unknown/attendees").json() == []


def test_register_requires_all_fields(client):
    resp = client.post("/api/v1/attendees/", json={**NEW_ATTENDEE, "email": ""})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "All fields are required."


def test_register_for_unknown_seminar(client):
    resp = client.post("/api/v1/attendees/", json={**NEW_ATTENDEE, "seminar_id": "seminar-404"})
    assert resp.status_code == 404


def test_update_status_and_bulk_send(client):
    empty = client.post("/api/v1/seminars/seminar-2/certificates/send")
    assert empty.status_code == 200
    assert empty.json()["success"] is False

    attendee = client.post("/api/v1/attendees/", json={**NEW_ATTENDEE, "seminar_id": "seminar-2"}).json()
    resp = client.patch(f"/api/v1/attendees/{attendee['id']}/status", json={"status": "Completed"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "Completed"

    sent = client.post("/api/v1/seminars/seminar-2/certificates/send").json()
    assert sent == {
        "success": True,
        "message": "Successfully sent certificates to 1 completed attendees.",
        "sent_count": 1,
    }


def test_update_status_unknown_attendee(client):
    resp = client.patch("/api/v1/attendees/attendee-404/status", json={"status": "Completed"})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Attendee not found"


def test_update_status_rejects_unknown_value(client):
    resp = client.patch("/api/v1/attendees/attendee-1/status", json={"status": "Absent"})
    assert resp.status_code == 422


def test_certificate_endpoint(client):
    resp = client.get("/api/v1/attendees/attendee-2/certificate")
    assert resp.status_code == 200
    body = resp.json()
    assert body["attendee_name"] == "Benito Carlos"
    assert body["held_on"] == "August 15, 2024"
    assert body["background_image_url"] is None

    assert client.get("/api/v1/attendees/attendee-1/certificate").status_code == 400
    assert client.get("/api/v1/attendees/attendee-404/certificate").status_code == 404


def test_design_without_api_key(client):
    assert client.get("/api/v1/certificates/design").json() == {"background_url": None}
    resp = client.post("/api/v1/certificates/design", json={"prompt": "Gold seal"})
    assert resp.status_code == 502
    assert resp.json()["detail"].startswith("Failed to generate certificate:")


def test_design_rejects_empty_prompt(client):
    resp = client.post("/api/v1/certificates/design", json={"prompt": ""})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please provide a prompt."


def test_generated_design_is_used_on_certificates(test_settings, gateway):
    def handler(request):
        return httpx.Response(
            200,
            json={"candidates": [{"content": {"parts": [{"inlineData": {"mimeType": "image/jpeg", "data": "QUJD"}}]}}]},
        )

    designer = CertificateDesignService(
        api_key="test-key", client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )
    client = TestClient(create_app(test_settings, gateway=gateway, design_service=designer))

    resp = client.post("/api/v1/certificates/design", json={})
    assert resp.status_code == 200
    assert resp.json()["background_url"] == "data:image/jpeg;base64,QUJD"

    certificate = client.get("/api/v1/attendees/attendee-2/certificate").json()
    assert certificate["background_image_url"] == "data:image/jpeg;base64,QUJD"

    assert client.delete("/api/v1/certificates/design").status_code == 204
    assert client.get("/api/v1/certificates/design").json() == {"background_url": None}


def test_info(client):
    body = client.get("/api/v1/info/").json()
    assert body["name"] == "Seminar Registry"
    assert body["seminars"] == 2


@pytest.mark.parametrize("path", ["/api/v1/seminars/", "/api/v1/seminars/seminar-1/attendees"])
def test_apps_do_not_share_state(test_settings, path):
    first = TestClient(create_app(test_settings))
    second = TestClient(create_app(test_settings))
    first.post("/api/v1/seminars/", json=NEW_SEMINAR)
    first.post("/api/v1/attendees/", json=NEW_ATTENDEE)
    assert len(first.get(path).json()) == 3
    assert len(second.get(path).json()) == 2
