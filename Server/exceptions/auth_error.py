"""
Dialog Admin Server - Authentication Error Exceptions
"""

from .api_error import DialogAPIError


class UnauthorizedError(DialogAPIError):
    """Raised when the request carries no valid session."""
    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(DialogAPIError):
    """Raised when the session role is not allowed to use the endpoint."""
    status_code = 403
    default_message = "Forbidden"
