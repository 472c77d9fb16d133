"""
Pydantic models for attendees and their attendance status.

An attendee is created through registration with status
``Registered``.  The status is the only field that changes afterwards;
an operator moves it to ``Completed`` once the person has attended,
which makes them eligible for a certificate.
"""

from enum import Enum

from pydantic import BaseModel, Field


class AttendanceStatus(str, Enum):
    REGISTERED = "Registered"
    COMPLETED = "Completed"


class AttendeeBase(BaseModel):
    full_name: str = Field(..., examples=["Juan Dela Cruz"])
    email: str = Field(..., examples=["juan.delacruz@gov.ph"])
    contact_number: str = Field(..., examples=["09123456789"])
    agency: str = Field(..., examples=["Civil Service Commission"])
    position: str = Field(..., examples=["Director IV"])
    seminar_id: str = Field(..., examples=["seminar-1"])


class AttendeeCreate(AttendeeBase):
    """Schema for registering an attendee."""
    pass


class AttendeeRead(AttendeeBase):
    """Schema for a stored attendee."""

    id: str
    status: AttendanceStatus = AttendanceStatus.REGISTERED

    model_config = {
        "frozen": True,
        "from_attributes": True,
    }


class AttendeeStatusUpdate(BaseModel):
    """Schema for changing the attendance status of an attendee."""

    status: AttendanceStatus = Field(..., examples=["Completed"])
