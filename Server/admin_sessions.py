"""
Dialog Admin Server - Admin Session Management

Simple cookie-based session registry for the admin API.
Sessions are stored in-memory only (no persistence across restarts).
Sessions are issued by the hosting application when it runs in the same
process: it calls CreateSession at login and DeleteSession at logout. This
module only keeps and resolves them. Login services in another process
use signed session cookies instead (see auth.py).
"""

import secrets
import logging
from datetime import datetime, timezone, timedelta
from typing import Optional, Dict

from models.infrastructure import AdminSession

logger = logging.getLogger(__name__)

# In-memory session storage
_sessions: Dict[str, AdminSession] = {}

# Session configuration
SESSION_COOKIE_NAME = "dialog_session"
SESSION_LIFETIME_HOURS = 24


def CreateSession(user_id: int, username: str, role: str, lifetime_hours: Optional[int] = None) -> AdminSession:
    """
    Create a new admin session

    Args:
        user_id: User ID
        username: Username
        role: Role of the user (compared against the admin role on each request)
        lifetime_hours: Session lifetime, defaults to SESSION_LIFETIME_HOURS

    Returns:
        AdminSession object with new session ID
    """
    lifetime_hours = SESSION_LIFETIME_HOURS if lifetime_hours is None else lifetime_hours

    # Generate secure random session ID
    session_id = secrets.token_urlsafe(32)

    now = datetime.now(timezone.utc)
    session = AdminSession(
        session_id=session_id,
        user_id=user_id,
        username=username,
        role=role,
        created_at_utc=now,
        expires_at_utc=now + timedelta(hours=lifetime_hours)
    )

    _sessions[session_id] = session

    logger.info(f"Created session for user '{username}' with role '{role}' (expires in {lifetime_hours} hours)")

    return session


def GetSession(session_id: str) -> Optional[AdminSession]:
    """
    Get an active session by ID

    Args:
        session_id: Session ID from cookie

    Returns:
        AdminSession if valid and not expired, None otherwise
    """
    if not session_id:
        return None

    session = _sessions.get(session_id)
    if not session:
        return None

    if session.IsExpired():
        logger.info(f"Session expired for user '{session.username}'")
        _sessions.pop(session_id, None)
        return None

    return session


def DeleteSession(session_id: str) -> None:
    """
    Delete a session

    Args:
        session_id: Session ID to delete
    """
    session = _sessions.pop(session_id, None)
    if session:
        logger.info(f"Deleted session for user '{session.username}'")


def CleanupExpiredSessions() -> int:
    """
    Remove all expired sessions from memory

    Returns:
        Number of sessions cleaned up
    """
    expired_ids = [
        session_id
        for session_id, session in list(_sessions.items())
        if session.IsExpired()
    ]

    for session_id in expired_ids:
        _sessions.pop(session_id, None)

    if expired_ids:
        logger.info(f"Cleaned up {len(expired_ids)} expired sessions")

    return len(expired_ids)
