"""
Dialog Admin Server - Managers Package

This package contains manager classes for database and settings storage.
"""

from managers.database_manager import DatabaseManager
from managers.settings_store import SettingsStore

__all__ = ['DatabaseManager', 'SettingsStore']
