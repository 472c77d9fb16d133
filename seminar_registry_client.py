"""Seminar Registry API client.

This module defines a small client wrapper around the Seminar Registry
REST API (``/api/v1``).  It is meant for admin scripts and for front
ends written in Python that want the same calls the web dashboard
makes.  The client uses the ``requests`` library internally.

The client exposes high‑level methods for the operations of the API:

* :meth:`list_seminars`, :meth:`get_seminar` and :meth:`create_seminar`.
* :meth:`list_attendees` – attendees of one seminar.
* :meth:`register_attendee` – register a person for a seminar.
* :meth:`update_attendee_status` – mark an attendee ``Registered`` or ``Completed``.
* :meth:`send_certificates` – trigger the (simulated) bulk certificate mailing.
* :meth:`get_certificate` – certificate data for a completed attendee.
* :meth:`generate_design` – request a new AI certificate background.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  The client never
raises for HTTP or connection problems.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class SeminarRegistryAPI:
    """Client for interacting with the Seminar Registry API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            prefix: Path prefix of the versioned API.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout for each request in seconds.  Bulk
                certificate sending and design generation take longer
                than other calls, so keep this generous.
        """
        self.base_url = base_url.rstrip("/") + prefix
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/seminars/``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Seminar operations
    # ------------------------------------------------------------------
    def list_seminars(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/seminars/")
        if error:
            return [], error
        return data or [], None

    def get_seminar(self, seminar_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/seminars/{seminar_id}")

    def create_seminar(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a seminar.

        Args:
            payload: ``title``, ``date`` (``YYYY-MM-DD``), ``speaker`` and
                ``description``.
        """
        return self._request("POST", "/seminars/", json_body=payload)

    def send_certificates(self, seminar_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Trigger the bulk certificate mailing.

        A result with ``success`` set to ``False`` is not an error: it
        means nobody has completed the seminar yet.
        """
        return self._request("POST", f"/seminars/{seminar_id}/certificates/send")

    # ------------------------------------------------------------------
    # Attendee operations
    # ------------------------------------------------------------------
    def list_attendees(self, seminar_id: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/seminars/{seminar_id}/attendees")
        if error:
            return [], error
        return data or [], None

    def register_attendee(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/attendees/", json_body=payload)

    def update_attendee_status(
        self, attendee_id: str, status: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/attendees/{attendee_id}/status", json_body={"status": status})

    def get_certificate(self, attendee_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/attendees/{attendee_id}/certificate")

    # ------------------------------------------------------------------
    # Certificate designer
    # ------------------------------------------------------------------
    def generate_design(
        self, prompt: str, reference_image: Optional[Dict[str, Any]] = None
    ) -> Tuple[Optional[str], Optional[Error]]:
        """Request a new certificate background.

        Returns the ``data:`` URL of the generated image.
        """
        body: Dict[str, Any] = {"prompt": prompt}
        if reference_image is not None:
            body["reference_image"] = reference_image
        data, error = self._request("POST", "/certificates/design", json_body=body)
        if error:
            return None, error
        return (data or {}).get("background_url"), None
