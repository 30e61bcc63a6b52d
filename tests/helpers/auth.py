"""Session credential helpers for tests."""

from __future__ import annotations

from datetime import timedelta

from app.config.settings import Settings
from app.core.security import create_session_token

GITLAB_TOKEN = "glpat-test-token-12345"


def make_session_token(
    settings: Settings,
    user: dict,
    access_token: str = GITLAB_TOKEN,
    expires_in: timedelta = timedelta(minutes=60),
) -> str:
    return create_session_token(
        user,
        access_token,
        settings.jwt_secret,
        expires_in,
        algorithm=settings.jwt_algorithm,
    )


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
