"""
Dialog Admin Server - Database Module

Request dependencies that hand out the process-wide database manager and
settings store. Both live on the application state and are created in the
server lifespan handler (or passed in by tests).
"""

from fastapi import Request

from managers import DatabaseManager, SettingsStore


def GetDatabaseManager(request: Request) -> DatabaseManager:
    """Dependency returning the application's DatabaseManager"""
    return request.app.state.db_manager


def GetSettingsStore(request: Request) -> SettingsStore:
    """Dependency returning the application's SettingsStore"""
    return request.app.state.settings_store
