"""
Dialog Admin Server - API Error Exception

Base exception class for all API-related errors.
"""


class DialogAPIError(Exception):
    """
    Base exception for API errors.

    Rendered by the server as {"success": false, "error": message}
    with the given status code.
    """
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)
