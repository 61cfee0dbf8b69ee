"""
Dialog Admin Server - Exceptions Package

Contains all exception classes raised by the Dialog Admin API.
Each exception carries the HTTP status code and the message shown to callers.
"""

from .api_error import DialogAPIError
from .auth_error import UnauthorizedError, ForbiddenError
from .input_error import InvalidInputError
from .server_error import InternalServerError

__all__ = [
    'DialogAPIError',
    'UnauthorizedError',
    'ForbiddenError',
    'InvalidInputError',
    'InternalServerError'
]
