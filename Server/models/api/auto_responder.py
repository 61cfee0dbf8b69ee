"""
Dialog Admin Server - Auto-Responder API Models

Pydantic models for the auto-responder settings endpoints.
"""

from typing import Dict, Union
from pydantic import BaseModel


class AutoResponderSettingsResponse(BaseModel):
    """
    Response for reading auto-responder settings.

    `settings` holds "enabled" plus one text field per configured locale.
    """
    success: bool = True
    settings: Dict[str, Union[bool, str]]


class SaveSettingsResponse(BaseModel):
    """Acknowledgement returned after a successful write"""
    success: bool = True
    message: str = "Settings saved successfully"


class ErrorResponse(BaseModel):
    """Error envelope shared by every failure response"""
    success: bool = False
    error: str
