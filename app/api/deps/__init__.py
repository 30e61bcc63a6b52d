"""API dependencies."""

from .auth import CurrentSession, get_current_session, security

__all__ = [
    "security",
    "get_current_session",
    "CurrentSession",
]
