"""
Dialog Admin Server - Authentication Dependencies

Resolves the caller's session from the session cookie and enforces the
admin role for protected routes.

The cookie may carry either:
- the ID of a session held in the in-memory registry (admin_sessions), or
- a JWT signed by the external login service with the configured
  session_secret, holding user_id, username and role claims.

Hosting applications with their own session lookup can replace
GetCurrentSession through app.dependency_overrides.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from jose import JWTError, jwt

from admin_sessions import GetSession, SESSION_COOKIE_NAME
from exceptions import UnauthorizedError, ForbiddenError

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_ROLE = "dialog_admin"
DEFAULT_ALGORITHM = "HS256"


def _GetConfig(request: Request) -> dict:
    return getattr(request.app.state, "config", None) or {}


# ==================== Signed Session Tokens ====================

def DecodeSessionToken(token: str, secret: str, algorithm: str = DEFAULT_ALGORITHM) -> Optional[dict]:
    """
    Decode and validate a signed session token

    Args:
        token: JWT token string
        secret: Shared secret of the login service
        algorithm: Signing algorithm

    Returns:
        Session info dict if the token is valid, None otherwise
        (bad signature, expired, or missing claims)
    """
    if not secret:
        return None

    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError as e:
        logger.debug(f"Rejected session token: {str(e)}")
        return None

    user_id = payload.get("user_id")
    username = payload.get("username")
    role = payload.get("role")

    if user_id is None or username is None or not isinstance(role, str):
        logger.debug("Rejected session token: missing user_id, username or role claim")
        return None

    return {
        "session_id": None,
        "user_id": user_id,
        "username": username,
        "role": role
    }


# ==================== Authentication Dependencies ====================

def GetCurrentSession(request: Request) -> Optional[dict]:
    """
    Get the caller's session from the session cookie

    Returns:
        Session info dict, or None if there is no valid session
    """
    cookie = request.cookies.get(SESSION_COOKIE_NAME)
    if not cookie:
        return None

    session = GetSession(cookie)
    if session:
        return {
            "session_id": session.session_id,
            "user_id": session.user_id,
            "username": session.username,
            "role": session.role
        }

    config = _GetConfig(request)
    return DecodeSessionToken(
        cookie,
        config.get("session_secret", ""),
        config.get("session_algorithm", DEFAULT_ALGORITHM)
    )


def RequireDialogAdmin(request: Request, session: Optional[dict] = Depends(GetCurrentSession)) -> dict:
    """
    Dependency to require a session whose role is the admin role

    The admin role is read from the application config (admin_role).

    Raises:
        UnauthorizedError: No valid session
        ForbiddenError: Session role is not the admin role
    """
    if not session:
        raise UnauthorizedError()

    admin_role = _GetConfig(request).get("admin_role", DEFAULT_ADMIN_ROLE)

    if session["role"] != admin_role:
        logger.warning(f"User '{session['username']}' with role '{session['role']}' denied admin access")
        raise ForbiddenError()

    return session
