"""
GitLab OAuth login endpoints.

/login redirects to GitLab; /callback finishes the exchange and hands the
session credential to the browser, which keeps it in localStorage.
"""

import json
import logging
from datetime import timedelta

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse

from app.config.settings import Settings, get_settings
from app.core.exceptions import BadRequestError, UpstreamError
from app.core.security import SessionTokenError, create_session_token
from app.services.gitlab import GitLabAPIError, GitLabOAuth

router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)


def store_token_page(token: str) -> str:
    """HTML page that stores the session credential and returns to the dashboard."""
    return f"""<html>
  <body>
    <script>
      localStorage.setItem('token', {json.dumps(token)});
      window.location.href = '/';
    </script>
  </body>
</html>
"""


def get_oauth(settings: Settings = Depends(get_settings)) -> GitLabOAuth:
    return GitLabOAuth(settings)


@router.get("/login")
async def login(oauth: GitLabOAuth = Depends(get_oauth)) -> RedirectResponse:
    """Redirect the browser to the GitLab authorization page."""
    return RedirectResponse(oauth.authorization_url())


@router.get("/callback", response_class=HTMLResponse)
async def callback(
    code: str | None = None,
    oauth: GitLabOAuth = Depends(get_oauth),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    """Complete the OAuth flow and deliver the session credential to the browser."""
    if not code:
        raise BadRequestError("Authorization code is missing")

    try:
        login_result = await oauth.complete_login(code)
    except GitLabAPIError as e:
        logger.warning(f"OAuth callback failed: {e.describe()}")
        raise UpstreamError("Error during OAuth flow") from e

    try:
        token = create_session_token(
            login_result.user,
            login_result.access_token,
            settings.jwt_secret,
            timedelta(minutes=settings.session_ttl_minutes),
            algorithm=settings.jwt_algorithm,
        )
    except SessionTokenError as e:
        logger.error(f"Could not mint session credential: {e}")
        raise UpstreamError("Error during OAuth flow") from e
    return HTMLResponse(store_token_page(token))
