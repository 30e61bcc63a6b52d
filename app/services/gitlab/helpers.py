"""
GitLab API helper utilities.

Provides rate limit parsing and error response processing for GitLab API calls.
"""

import logging

import httpx

from app.services.gitlab.exceptions import GitLabAPIError

logger = logging.getLogger(__name__)


class RateLimitInfo:
    """Rate limit information from GitLab API response.

    Header values that are not integers are treated as absent.
    """

    def __init__(self, response: httpx.Response) -> None:
        self.remaining = _parse_int(response.headers.get("RateLimit-Remaining"))
        self.reset = _parse_int(response.headers.get("RateLimit-Reset"))

    @property
    def reset_timestamp(self) -> int | None:
        """Get reset timestamp as integer, or None if not available."""
        return self.reset

    @property
    def is_exhausted(self) -> bool:
        """Check if rate limit is exhausted."""
        return self.remaining == 0


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer rate limit header value: {value!r}")
        return None


def handle_error_response(response: httpx.Response, resource: str) -> None:
    """
    Handle common error responses from GitLab API.

    Args:
        response: The HTTP response from GitLab API
        resource: Resource description for error context (e.g. "groups/12/projects")

    Raises:
        GitLabAPIError: For authentication, authorization, rate limit or other API errors
    """
    rate_info = RateLimitInfo(response)

    if response.status_code == 401:
        raise GitLabAPIError("Invalid or expired GitLab token", 401)
    elif response.status_code == 404:
        raise GitLabAPIError(f"Resource not found: {resource}", 404)
    elif response.status_code == 429 or (
        response.status_code == 403 and rate_info.is_exhausted
    ):
        raise GitLabAPIError(
            "GitLab API rate limit exceeded",
            response.status_code,
            rate_limit_reset=rate_info.reset_timestamp,
        )
    elif response.status_code == 403:
        raise GitLabAPIError(f"GitLab API forbidden: {resource}", 403)
    elif response.status_code != 200:
        raise GitLabAPIError(
            f"GitLab API error: {response.status_code}", response.status_code
        )
