"""
Shared fixtures for Dialog Admin Server tests
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import admin_sessions
from admin_sessions import CreateSession, SESSION_COOKIE_NAME
from config import DEFAULT_CONFIG
from managers import DatabaseManager, SettingsStore
from server import CreateApp


@pytest.fixture(autouse=True)
def clear_sessions():
    """Start every test with an empty session registry"""
    admin_sessions._sessions.clear()
    yield
    admin_sessions._sessions.clear()


@pytest.fixture
def config():
    config = DEFAULT_CONFIG.copy()
    config["log_dir"] = ""
    return config


@pytest.fixture
def db_manager(tmp_path):
    manager = DatabaseManager(str(tmp_path / "dialog.db"))
    manager.InitializeDatabase()
    yield manager
    manager.Dispose()


@pytest.fixture
def store(db_manager):
    return SettingsStore(db_manager)


@pytest.fixture
def app(config, db_manager):
    return CreateApp(config, db_manager)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def LoginAs(client, role, username="operator"):
    """Create a session with the given role and attach its cookie to the client"""
    session = CreateSession(user_id=1, username=username, role=role)
    client.cookies.set(SESSION_COOKIE_NAME, session.session_id)
    return session


@pytest.fixture
def admin_client(client):
    LoginAs(client, "dialog_admin", username="admin")
    return client
