"""
Dialog Admin Server - Invalid Input Exception
"""

from .api_error import DialogAPIError


class InvalidInputError(DialogAPIError):
    """Raised when a request payload field has the wrong type."""
    status_code = 400
    default_message = "Invalid input"
