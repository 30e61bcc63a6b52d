"""
GitLab service package.

Usage: `from app.services.gitlab import GitLabReadOperations, GitLabOAuth`

Module structure:
- read_operations.py: Authenticated read-only REST calls
- oauth.py: Authorization-code exchange
- http_client.py: Shared httpx client lifecycle
- helpers.py: Rate limit handling and error utilities
- types.py: Commit summary and dashboard view types
- exceptions.py: Custom exceptions
- constants.py: API constants
"""

from app.services.gitlab.exceptions import GitLabAPIError
from app.services.gitlab.helpers import RateLimitInfo, handle_error_response
from app.services.gitlab.http_client import close_gitlab_client, get_gitlab_client
from app.services.gitlab.oauth import GitLabOAuth, OAuthLogin
from app.services.gitlab.read_operations import GitLabReadOperations
from app.services.gitlab.types import CommitSummary, DashboardView, GroupView, ProjectView

__all__ = [
    # Operation classes
    "GitLabReadOperations",
    "GitLabOAuth",
    "OAuthLogin",
    # HTTP client lifecycle
    "get_gitlab_client",
    "close_gitlab_client",
    # Utilities
    "handle_error_response",
    "RateLimitInfo",
    # Exceptions
    "GitLabAPIError",
    # Types
    "CommitSummary",
    "DashboardView",
    "GroupView",
    "ProjectView",
]
