"""Session credential validation dependency.

Extracts the bearer credential from the Authorization header and verifies it
against the server signing secret. Verification is all-or-nothing: any
failure yields a 401 and the route body never runs.
"""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config.settings import Settings, get_settings
from app.core.exceptions import UnauthorizedError
from app.core.security import SessionPayload, SessionTokenError, decode_session_token

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_current_session(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> SessionPayload:
    """Verify the session credential and return its embedded user and GitLab token."""
    if not credentials:
        raise UnauthorizedError()

    try:
        return decode_session_token(
            credentials.credentials,
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
    except SessionTokenError as e:
        logger.info(f"Rejected session credential: {e}")
        raise UnauthorizedError() from e


# Type alias for cleaner dependency injection
CurrentSession = Annotated[SessionPayload, Depends(get_current_session)]
