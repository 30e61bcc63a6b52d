"""
GitLab OAuth2 authorization-code flow.

Two transitions:
- authorization_url(): where to send the browser to start the login
- complete_login(code): exchange the code for a token and fetch the profile
"""

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

import httpx

from app.config.settings import Settings
from app.services.gitlab.exceptions import GitLabAPIError
from app.services.gitlab.http_client import get_gitlab_client
from app.services.gitlab.read_operations import GitLabReadOperations

logger = logging.getLogger(__name__)


@dataclass
class OAuthLogin:
    """Outcome of a completed authorization-code exchange."""

    access_token: str
    user: dict[str, Any]


class GitLabOAuth:
    """OAuth client for a single GitLab application registration."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def authorization_url(self) -> str:
        """Build the provider authorize URL with client id, redirect target and scopes."""
        params = {
            "client_id": self.settings.client_id,
            "redirect_uri": self.settings.redirect_uri,
            "response_type": "code",
            "scope": " ".join(self.settings.oauth_scopes),
        }
        return f"{self.settings.authorize_url}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> str:
        """
        Exchange an authorization code for a GitLab access token.

        Raises:
            GitLabAPIError: On transport failure, a non-200 response, or a
                response without an access_token
        """
        client = get_gitlab_client()
        try:
            response = await client.post(
                self.settings.token_url,
                data={
                    "client_id": self.settings.client_id,
                    "client_secret": self.settings.client_secret,
                    "code": code,
                    "grant_type": "authorization_code",
                    "redirect_uri": self.settings.redirect_uri,
                },
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            raise GitLabAPIError(f"Token exchange request failed: {e}") from e

        if response.status_code != 200:
            raise GitLabAPIError(
                f"Token exchange rejected: {response.status_code}", response.status_code
            )

        try:
            access_token = response.json().get("access_token")
        except (ValueError, AttributeError) as e:
            raise GitLabAPIError("Invalid token response from GitLab") from e

        if not access_token:
            raise GitLabAPIError("Token response did not include an access_token")
        return access_token

    async def complete_login(self, code: str) -> OAuthLogin:
        """Exchange the code, then fetch the authenticated user's profile."""
        access_token = await self.exchange_code(code)
        reader = GitLabReadOperations(access_token, self.settings.api_base_url)
        user = await reader.get_current_user()
        logger.info(f"OAuth login completed for GitLab user {user.get('username')}")
        return OAuthLogin(access_token=access_token, user=user)
