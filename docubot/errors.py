"""
Exception hierarchy for the Docubot client.

Transport failures are not wrapped: requests.RequestException and its
subclasses reach the caller unchanged.
"""

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


class DocubotError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DocubotAPIError(DocubotError):
    """The service answered with a status outside 200-299."""

    def __init__(self, status_code: int, message: str, errors: list[str] | None = None):
        self.status_code = status_code
        self.errors = list(errors or [])
        super().__init__(message)

    def __repr__(self) -> str:
        return f"DocubotAPIError({self.status_code}: {self.message})"


class DocubotDecodeError(DocubotError):
    """A successful response carried a body of the wrong shape."""


class DocubotVersionError(DocubotError):
    """The configured protocol version does not support the operation."""


class DocubotConfigError(DocubotError):
    """Client settings are missing or invalid."""
