"""
Dialog Admin Server - API Models Package

This package contains Pydantic models for all API endpoints.
"""

from models.api.auto_responder import (
    AutoResponderSettingsResponse,
    SaveSettingsResponse,
    ErrorResponse
)
from models.api.health import HealthResponse

__all__ = [
    'AutoResponderSettingsResponse',
    'SaveSettingsResponse',
    'ErrorResponse',
    'HealthResponse',
]
