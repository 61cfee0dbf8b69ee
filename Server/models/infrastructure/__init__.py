"""
Dialog Admin Server - Infrastructure Models Package

This package contains dataclass models for infrastructure components
like admin sessions.
"""

from models.infrastructure.admin_session import AdminSession

__all__ = [
    'AdminSession',
]
