"""
Dialog Admin Server - Internal Server Error Exception
"""

from .api_error import DialogAPIError


class InternalServerError(DialogAPIError):
    """Generic failure. Never carries details of the underlying error."""
    status_code = 500
    default_message = "Internal server error"
