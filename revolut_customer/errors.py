"""
Errors - Exception hierarchy for the customer API client.

Every error raised by the client, the credential stores and response parsing
derives from RevolutError, so callers can catch the whole family with a
single except clause. Misusing Amount operators (a float multiplier, a
negative divisor) raises the built-in TypeError or ValueError, like the
numeric types do.
"""

from typing import Any, Dict, Optional


class RevolutError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(RevolutError):
    """Client options are missing or invalid."""


class AmountParseError(RevolutError, ValueError):
    """Text could not be parsed as a currency amount."""

    def __init__(self, amount_str: str):
        super().__init__(f"the amount {amount_str!r} is not a valid Revolut amount")
        self.amount_str = amount_str


class ApiError(RevolutError):
    """Base error for failed API calls."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
        }

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (status code: {self.status_code})"
        return self.message


class UnauthorizedError(ApiError):
    """The API rejected the credentials (HTTP 401)."""

    def __init__(self, message: str = "unauthorized use of the API"):
        super().__init__(message, status_code=401)


class NotLoggedInError(ApiError):
    """An authenticated endpoint was called without a session."""

    def __init__(self, message: str = "the client had not logged in"):
        super().__init__(message)


class InvalidUserIdError(ApiError):
    """The provided user ID is not a UUID."""

    def __init__(self, user_id: str):
        super().__init__("the provided user ID is not a valid UUID")
        self.user_id = user_id


class InvalidAccessTokenError(ApiError, ValueError):
    """The provided access token is empty."""

    def __init__(self):
        super().__init__("the provided access token is empty")


class RequestFailedError(ApiError):
    """The request could not be performed (connection, timeout, ...)."""

    def __init__(self, message: str = "failure performing the request"):
        super().__init__(message)


class BadRequestError(ApiError):
    """The API answered 400 with an error code and message."""

    def __init__(self, code: Any, message: str):
        super().__init__(f"bad request: {message} (code: {code})", status_code=400)
        self.code = code
        self.api_message = message

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["code"] = self.code
        data["api_message"] = self.api_message
        return data


class UnexpectedStatusError(ApiError):
    """The request failed with a status code the client does not handle."""

    def __init__(self, status_code: int):
        super().__init__("request failed for an unknown reason", status_code=status_code)


class ParseResponseError(ApiError):
    """The response body did not match the expected structure."""

    def __init__(self, message: str = "could not parse the response"):
        super().__init__(message)
