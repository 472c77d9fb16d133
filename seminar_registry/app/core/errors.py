"""
Error taxonomy shared by the store, the gateway and the services.

Services raise these exceptions; API handlers translate them into HTTP
responses.  Business outcomes that are not errors (for example, a bulk
certificate send with nobody to send to) are returned as results and
never raised.
"""


class SeminarRegistryError(Exception):
    """Base class for all errors raised by the service layer."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(SeminarRegistryError):
    """A required field is missing, empty or malformed."""


class NotFoundError(SeminarRegistryError):
    """A referenced seminar or attendee does not exist."""


class ExternalServiceError(SeminarRegistryError):
    """The image generation service failed; ``message`` is passed through."""
