"""
Pooled HTTP client shared by every GitLab call this service makes.

One dashboard request fans out to events pages, the group list, each group's
project list and each project's latest commit, and the OAuth callback adds the
token exchange and profile fetch. All of them reuse the connections held here
instead of opening a new TLS session per call.

The client stores no credentials: each user's access token travels in the
headers of the individual request.
"""

import logging

import httpx

from app.services.gitlab.constants import USER_AGENT

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


def get_gitlab_client() -> httpx.AsyncClient:
    """
    Return the shared GitLab client, creating it on first use or after close.

    Returns:
        httpx.AsyncClient with a User-Agent identifying this service and
        httpx's default timeout
    """
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
        )
        logger.debug("Created shared GitLab HTTP client")
    return _client


async def close_gitlab_client() -> None:
    """Close the shared client; called from the app lifespan on shutdown."""
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
        logger.debug("Closed shared GitLab HTTP client")
    _client = None
