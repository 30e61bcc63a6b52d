"""Session credential minting and verification.

The session credential is an HS256 JWT held in the browser's localStorage.
It embeds a snapshot of the GitLab user profile and the GitLab access token,
so no server-side session state is needed.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt


class SessionTokenError(ValueError):
    """Session credential could not be verified."""


@dataclass(frozen=True)
class SessionPayload:
    """Verified contents of a session credential."""

    user: dict[str, Any]
    access_token: str


def create_session_token(
    user: dict[str, Any],
    access_token: str,
    secret: str,
    expires_delta: timedelta,
    algorithm: str = "HS256",
) -> str:
    """Sign a session credential for the given user and GitLab token.

    Raises:
        SessionTokenError: If no signing secret is configured.
    """
    if not secret:
        raise SessionTokenError("Session signing secret is not configured")

    now = datetime.now(UTC)
    claims = {
        "user": user,
        "access_token": access_token,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(claims, secret, algorithm=algorithm)


def decode_session_token(token: str, secret: str, algorithm: str = "HS256") -> SessionPayload:
    """Verify signature and expiry of a session credential.

    Raises:
        SessionTokenError: If no signing secret is configured, or the token is
            malformed, tampered with, expired, or lacks the user / access_token claims.
    """
    if not secret:
        raise SessionTokenError("Session signing secret is not configured")

    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError as exc:
        raise SessionTokenError("Could not validate session credential") from exc

    user = payload.get("user")
    access_token = payload.get("access_token")
    if not isinstance(user, dict) or not isinstance(access_token, str) or not access_token:
        raise SessionTokenError("Session credential is missing required claims")

    return SessionPayload(user=user, access_token=access_token)
