"""
Exceptions raised when talking to the ChooJobs API.
"""

from typing import Optional


class ApiError(Exception):
    """
    A request to the API failed.

    Attributes:
        status_code: HTTP status, or None when no response arrived
        detail: Error text supplied by the API, if any
    """

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail

    def user_message(self, default: str) -> str:
        """Message to show the user: the API's own text, else ``default``."""
        return self.detail or default


class ApiConnectionError(ApiError):
    """The API could not be reached or timed out."""


class AuthenticationError(ApiError):
    """The API rejected the session token (HTTP 401)."""


class PermissionDeniedError(ApiError):
    """The user may not perform this action (HTTP 403)."""


class NotFoundError(ApiError):
    """The requested record does not exist (HTTP 404)."""


class FormValidationError(ValueError):
    """Input rejected before any request was sent."""
