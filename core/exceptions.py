#!/usr/bin/env python3
"""
Error taxonomy shared by the core and the web layer.
"""

from typing import Optional


class ApiError(Exception):
    """Base exception for errors talking to (or preparing calls for) the job catalog API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(ApiError):
    """Malformed request or response payload. Never retried."""
    pass


class MixedCohortError(ValidationError):
    """Raised when scores of different algorithms are normalized together."""
    pass


class AuthError(ApiError):
    """401/403 class failure that the refresh protocol could not resolve."""
    pass


class SessionExpiredError(AuthError):
    """Token refresh failed; the session has been cleared and the user must log in again."""
    pass


class NotFoundError(ApiError):
    """Requested resource does not exist (e.g. recommendation without any skills)."""
    pass


class NetworkError(ApiError):
    """Transient transport failure or upstream server error."""
    pass


class StaleResponseError(ApiError):
    """A newer request for the same query was issued; this response was discarded."""
    pass
