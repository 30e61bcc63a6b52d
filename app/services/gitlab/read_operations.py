"""
GitLab API read operations.

Provides the read-only calls the dashboard needs:
- Authenticated user profile
- Activity events
- Groups and group projects
- Latest commit of a project
"""

import logging
from typing import Any

import httpx

from app.services.gitlab.constants import LATEST_COMMIT_PER_PAGE, MAX_PER_PAGE
from app.services.gitlab.exceptions import GitLabAPIError
from app.services.gitlab.helpers import handle_error_response
from app.services.gitlab.http_client import get_gitlab_client
from app.services.gitlab.types import CommitSummary

logger = logging.getLogger(__name__)


class GitLabReadOperations:
    """
    Read-only operations for the GitLab REST API v4.

    Every call attaches the user's access token as a bearer credential.
    There is no retry or backoff: any failing call raises GitLabAPIError.
    """

    def __init__(self, token: str, base_url: str):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }

    async def _get(self, path: str, params: dict[str, str | int] | None = None) -> Any:
        """GET a JSON resource relative to the API base URL."""
        client = get_gitlab_client()
        try:
            response = await client.get(
                f"{self.base_url}/{path}",
                headers=self._headers,
                params=params,
            )
        except httpx.HTTPError as e:
            raise GitLabAPIError(f"GitLab request failed for {path}: {e}") from e

        handle_error_response(response, path)

        try:
            return response.json()
        except ValueError as e:
            raise GitLabAPIError(f"Invalid JSON from GitLab for {path}", response.status_code) from e

    async def _get_list(
        self, path: str, params: dict[str, str | int] | None = None
    ) -> list[dict[str, Any]]:
        data = await self._get(path, params)
        if not isinstance(data, list):
            raise GitLabAPIError(f"Expected a list from GitLab for {path}")
        return data

    async def get_current_user(self) -> dict[str, Any]:
        """Fetch the profile of the token's owner."""
        data = await self._get("user")
        if not isinstance(data, dict):
            raise GitLabAPIError("Expected an object from GitLab for user")
        return data

    async def get_events(self, page: int = 1, per_page: int = MAX_PER_PAGE) -> list[dict[str, Any]]:
        """
        Fetch one page of the user's activity events, newest first.

        Args:
            page: Page number (1-indexed)
            per_page: Items per page (max 100)
        """
        return await self._get_list(
            "events",
            {"page": page, "per_page": min(per_page, MAX_PER_PAGE)},
        )

    async def get_groups(self, per_page: int) -> list[dict[str, Any]]:
        """Fetch the first page of groups visible to the user."""
        return await self._get_list("groups", {"per_page": min(per_page, MAX_PER_PAGE)})

    async def get_group_projects(self, group_id: int, per_page: int) -> list[dict[str, Any]]:
        """Fetch the first page of projects in a group."""
        return await self._get_list(
            f"groups/{group_id}/projects",
            {"per_page": min(per_page, MAX_PER_PAGE)},
        )

    async def get_latest_commit(self, project_id: int) -> CommitSummary | None:
        """
        Fetch the most recent commit on a project's default branch.

        Returns:
            CommitSummary, or None if the repository has no commits

        Raises:
            GitLabAPIError: If the request fails or the commit record is malformed
        """
        commits = await self._get_list(
            f"projects/{project_id}/repository/commits",
            {"per_page": LATEST_COMMIT_PER_PAGE},
        )
        if not commits:
            return None
        try:
            return CommitSummary.from_api(commits[0])
        except (KeyError, TypeError, AttributeError) as e:
            raise GitLabAPIError(f"Malformed commit from GitLab for project {project_id}") from e
