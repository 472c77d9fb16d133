"""
Pydantic models for certificates.

``BulkSendResult`` is the outcome of a (simulated) bulk certificate
mailing.  A send with nobody eligible is a successful call with
``success`` set to ``False``; callers inspect the flag instead of
expecting an error.

``CertificateRead`` carries everything needed to lay out a printable
certificate.  ``CertificateDesignCreate`` and ``ReferenceImage``
describe a request to the AI background designer.
"""

from typing import Optional

from pydantic import BaseModel, Field


DEFAULT_DESIGN_PROMPT = (
    "Create a professional certificate background. Use a formal blue and gold "
    "color scheme with Philippines government-inspired seal elements. The design "
    "should be clean and elegant. Leave the center of the certificate blank to "
    "accommodate text content."
)


class BulkSendResult(BaseModel):
    success: bool
    message: str
    sent_count: int = 0

    model_config = {"frozen": True}


class CertificateRead(BaseModel):
    """Data for a completion certificate of a single attendee."""

    attendee_id: str
    attendee_name: str
    seminar_id: str
    seminar_title: str
    seminar_date: str
    held_on: str = Field(..., examples=["August 15, 2024"])
    speaker_name: str
    background_image_url: Optional[str] = None

    model_config = {"frozen": True}


class ReferenceImage(BaseModel):
    """A sample image that inspires the generated design.

    ``data`` is the base64 encoded file content.
    """

    filename: Optional[str] = None
    mime_type: str = Field(..., examples=["image/png"])
    data: str


class CertificateDesignCreate(BaseModel):
    prompt: str = Field(DEFAULT_DESIGN_PROMPT)
    reference_image: Optional[ReferenceImage] = None


class CertificateDesignRead(BaseModel):
    background_url: Optional[str] = None
