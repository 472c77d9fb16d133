"""
AI generated certificate backgrounds.

``CertificateDesignService`` sends a free‑text design prompt, and
optionally a sample image, to the Gemini ``generateContent`` REST
endpoint and returns the rendered image as a ``data:`` URL.  The call
is a single request/response exchange with no retry and no streaming.
Any failure is raised as ``ExternalServiceError`` with the upstream
message so it can be shown to the operator verbatim.

The most recently generated background is kept in memory and used for
printed certificates until it is replaced or cleared.
"""

import base64
import binascii
import logging
from typing import Any, Dict, Optional

import httpx

from ..core.errors import ExternalServiceError, ValidationError
from ..schemas.certificate import ReferenceImage


logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = {"image/png", "image/jpeg"}
MAX_IMAGE_BYTES = 4 * 1024 * 1024


class CertificateDesignService:
    """Client for the certificate background generator.

    Parameters
    ----------
    api_key : str
        Key sent in the ``x-goog-api-key`` header.
    model : str
        Image capable Gemini model name.
    base_url : str
        Base URL of the Generative Language API.
    timeout : float
        HTTP timeout in seconds.
    max_image_bytes : int
        Upper bound for the decoded reference image.
    client : Optional[httpx.AsyncClient]
        Shared client.  When omitted a client is opened per request.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash-image",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 60.0,
        max_image_bytes: int = MAX_IMAGE_BYTES,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_image_bytes = max_image_bytes
        self._client = client
        self.current_background: Optional[str] = None

    @classmethod
    def from_settings(cls, settings) -> "CertificateDesignService":
        return cls(
            api_key=settings.image_api_key,
            model=settings.image_model,
            base_url=settings.image_api_url,
            timeout=settings.image_timeout_seconds,
            max_image_bytes=settings.image_max_bytes,
        )

    def clear_background(self) -> None:
        self.current_background = None

    def _normalize_reference(self, image: ReferenceImage) -> ReferenceImage:
        """Check type and size; return the image with whitespace removed from ``data``."""
        if image.mime_type not in ALLOWED_IMAGE_TYPES:
            raise ValidationError("Only PNG or JPEG images are supported.")
        # Line-wrapped base64 (e.g. from base64.encodebytes) is accepted.
        data = "".join(image.data.split())
        try:
            raw = base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValidationError("Reference image is not valid base64 data.") from exc
        if len(raw) > self.max_image_bytes:
            raise ValidationError("Image size should be less than 4MB.")
        return image.model_copy(update={"data": data})

    def _build_payload(self, prompt: str, image: Optional[ReferenceImage]) -> Dict[str, Any]:
        parts = []
        if image is not None:
            parts.append({"inline_data": {"mime_type": image.mime_type, "data": image.data}})
        parts.append({"text": prompt})
        return {
            "contents": [{"parts": parts}],
            "generationConfig": {"responseModalities": ["TEXT", "IMAGE"]},
        }

    @staticmethod
    def _extract_image(data: Dict[str, Any]) -> str:
        for candidate in data.get("candidates") or []:
            for part in (candidate.get("content") or {}).get("parts") or []:
                inline = part.get("inlineData") or part.get("inline_data")
                if inline and inline.get("data"):
                    mime = inline.get("mimeType") or inline.get("mime_type") or "image/png"
                    return f"data:{mime};base64,{inline['data']}"
        raise ExternalServiceError("The model did not return an image.")

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        return str(body)

    async def _post(self, url: str, payload: Dict[str, Any]) -> httpx.Response:
        headers = {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}
        if self._client is not None:
            return await self._client.post(url, json=payload, headers=headers, timeout=self.timeout)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(url, json=payload, headers=headers)

    async def generate_background(
        self, prompt: str, reference_image: Optional[ReferenceImage] = None
    ) -> str:
        """Generate a certificate background and make it the current one.

        Raises ``ValidationError`` for an empty prompt or an unusable
        reference image and ``ExternalServiceError`` when the image
        service cannot produce a result.
        """
        if not prompt or not prompt.strip():
            raise ValidationError("Please provide a prompt.")
        if reference_image is not None:
            reference_image = self._normalize_reference(reference_image)
        if not self.api_key:
            raise ExternalServiceError("Image generation API key is not configured.")

        url = f"{self.base_url}/models/{self.model}:generateContent"
        logger.info("Requesting certificate background from %s", self.model)
        try:
            response = await self._post(url, self._build_payload(prompt, reference_image))
        except httpx.HTTPError as exc:
            logger.error("Certificate generation request failed: %s", exc)
            raise ExternalServiceError(str(exc) or exc.__class__.__name__) from exc
        if response.is_error:
            message = self._error_message(response)
            logger.error("Certificate generation failed (%s): %s", response.status_code, message)
            raise ExternalServiceError(message)
        try:
            data = response.json()
        except ValueError as exc:
            raise ExternalServiceError("Image service returned an invalid response.") from exc

        image_url = self._extract_image(data)
        self.current_background = image_url
        return image_url
