"""Domain-specific exceptions: framework-independent."""


class FormatError(ValueError):
    """Raised when a date string cannot be parsed or converted."""

    def __init__(self, value: str, expected: str):
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid date '{value}'. Expected {expected}")


class RemoteStoreError(Exception):
    """Base class for failures reported by the remote user store."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NetworkError(RemoteStoreError):
    """Raised when the remote store is unreachable or the request timed out."""


class ApiError(RemoteStoreError):
    """Raised when the remote store answers with a failure status.

    The message is the single human-readable string built from the
    response body's ``message`` and ``errors`` fields.
    """

    def __init__(self, status_code: int, message: str, errors: list[str] | None = None):
        self.status_code = status_code
        self.errors = errors or []
        super().__init__(message)


class BadRequestError(ApiError):
    """400: the store rejected the payload."""


class ConflictError(ApiError):
    """409: duplicate record (e.g. email or mobile number already registered)."""


class UnprocessableError(ApiError):
    """422: the store's own validation failed."""
