"""
Custom exceptions and error handling for the movie awards API.

Defines application-specific exceptions with error codes so the Lambda
handler can map every failure to a status code and a client-facing body.

Usage:
    from awards.errors import ClientInputError, ErrorCode

    raise ClientInputError("movieId path parameter is absent", code=ErrorCode.MISSING_MOVIE_ID)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Request errors
    MISSING_MOVIE_ID = "MISSING_MOVIE_ID"
    MISSING_AWARD_BODY = "MISSING_AWARD_BODY"

    # Lookup errors
    NO_MATCH = "NO_MATCH"
    STORE_FAILED = "STORE_FAILED"

    # System errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.MISSING_MOVIE_ID: "Missing movie Id",
    ErrorCode.MISSING_AWARD_BODY: "Missing award body",
    ErrorCode.NO_MATCH: "Request failed",
    ErrorCode.STORE_FAILED: "Award lookup failed",
    ErrorCode.CONFIGURATION_ERROR: "Service is misconfigured",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred",
}

STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.MISSING_MOVIE_ID: 404,
    ErrorCode.MISSING_AWARD_BODY: 404,
    ErrorCode.NO_MATCH: 400,
    ErrorCode.STORE_FAILED: 500,
    ErrorCode.CONFIGURATION_ERROR: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


class AwardsError(Exception):
    """Base exception for all movie awards errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])

    @property
    def status_code(self) -> int:
        return STATUS_CODES.get(self.code, 500)


class ClientInputError(AwardsError):
    """A required path parameter is missing."""

    pass


class EmptyResultError(AwardsError):
    """A well-formed request matched no award records."""

    def __init__(self, message: str = "No award records matched", code: ErrorCode = ErrorCode.NO_MATCH):
        super().__init__(message, code)


class UpstreamError(AwardsError):
    """The store call, query construction or serialization failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.STORE_FAILED):
        super().__init__(message, code)


class ConfigurationError(UpstreamError):
    """Required environment configuration is absent."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.CONFIGURATION_ERROR):
        super().__init__(message, code)
