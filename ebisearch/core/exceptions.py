"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every one of them is fatal for the invocation: the CLI reports the message
on stderr and exits non-zero. Nothing is retried.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ServiceError(ApplicationError):
    """Raised when the search service answers with an HTTP error status."""

    def __init__(
        self,
        message: str = "External service error",
        status_code: int | None = None,
        reason: str = "",
        detail: str = "",
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.detail = detail
        super().__init__(message, code="SYS_EXTERNAL_SERVICE_ERROR")


class TransportError(ApplicationError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, message: str = "Transport error") -> None:
        super().__init__(message, code="SYS_TRANSPORT_ERROR")


class ResponseParseError(ApplicationError):
    """Raised when the response body is not well-formed XML."""

    def __init__(self, message: str = "Malformed XML response") -> None:
        super().__init__(message, code="RES_MALFORMED_XML")


class ResponseFormatError(ApplicationError):
    """Raised when the response lacks an element the printers rely on."""

    def __init__(self, message: str = "Unexpected response structure") -> None:
        super().__init__(message, code="RES_UNEXPECTED_STRUCTURE")


class UsageError(ApplicationError):
    """Raised when a method is called with missing arguments."""

    def __init__(self, message: str = "Invalid usage") -> None:
        super().__init__(message, code="CLI_USAGE_ERROR")
