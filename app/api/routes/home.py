"""
Dashboard endpoints.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from app.api.deps import CurrentSession
from app.config.settings import Settings, get_settings
from app.core.exceptions import UpstreamError
from app.services.dashboard import DashboardLimits, build_dashboard
from app.services.gitlab import GitLabAPIError, GitLabReadOperations

router = APIRouter(prefix="/home", tags=["home"])
logger = logging.getLogger(__name__)

LOGOUT_PAGE = """<html>
  <body>
    <script>
      localStorage.removeItem('token');
      window.location.href = '/';
    </script>
  </body>
</html>
"""


@router.get("/auth")
async def home(
    session: CurrentSession,
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Return the user's activities and groups with projects and latest commits."""
    gitlab = GitLabReadOperations(session.access_token, settings.api_base_url)

    try:
        dashboard = await build_dashboard(
            gitlab, session.user, DashboardLimits.from_settings(settings)
        )
    except GitLabAPIError as e:
        logger.warning(
            f"Dashboard fetch failed for {session.user.get('username')}: "
            f"{e.describe()}"
        )
        raise UpstreamError() from e

    return dashboard.to_dict()


@router.get("/logout", response_class=HTMLResponse)
async def logout() -> HTMLResponse:
    """Clear the browser-held credential and return to the landing page."""
    return HTMLResponse(LOGOUT_PAGE)
