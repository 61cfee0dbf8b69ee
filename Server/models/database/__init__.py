"""
Dialog Admin Server - Database Models Package

This package contains the SQLAlchemy database model definitions.
"""

from models.database.base import Base
from models.database.setting import DialogSetting

__all__ = [
    'Base',
    'DialogSetting',
]
