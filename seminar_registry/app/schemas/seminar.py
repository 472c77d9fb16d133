"""
Pydantic models for seminar data.

``SeminarBase`` holds the fields supplied on creation; ``SeminarCreate``
is the request body and ``SeminarRead`` adds the identifier assigned by
the store.  The ``date`` is kept as an ISO calendar date string
(``YYYY-MM-DD``) and checked by the store, so that empty values are
reported with the same error as the other fields.
"""

from pydantic import BaseModel, Field


class SeminarBase(BaseModel):
    title: str = Field(..., examples=["Digital Transformation in Public Service"])
    date: str = Field(..., examples=["2024-08-15"])
    speaker: str = Field(..., examples=["Dr. Juan Dela Cruz"])
    description: str = Field(..., examples=["Exploring the impact of technology on governance."])


class SeminarCreate(SeminarBase):
    """Schema for creating a seminar."""
    pass


class SeminarRead(SeminarBase):
    """Schema for a stored seminar."""

    id: str

    model_config = {
        "frozen": True,
        "from_attributes": True,
    }
