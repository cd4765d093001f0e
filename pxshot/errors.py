"""
Error taxonomy for the Pxshot client.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failure, for callers that branch without isinstance checks."""

    GENERIC = "generic"
    VALIDATION = "validation"
    HTTP = "http"
    API = "api"


class PxshotError(Exception):
    """Base exception for all Pxshot errors.

    Raised directly when a response body does not match the expected schema
    or when the wrong variant of a screenshot result is accessed.
    """

    kind = ErrorKind.GENERIC

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(PxshotError):
    """Invalid parameters, detected before any request is sent."""

    kind = ErrorKind.VALIDATION


class HttpError(PxshotError):
    """Transport failure (status 0) or HTTP error without a readable error body."""

    kind = ErrorKind.HTTP

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)


class ApiError(PxshotError):
    """The API answered with an error body carrying a code and message."""

    kind = ErrorKind.API

    def __init__(self, error_code: str, message: str, status_code: int = 0):
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"
