"""
Dashboard aggregation pipeline.

Turns one GitLab access token into the nested dashboard view:

    events ─────────────────────────────────────────┐
    groups ─> projects per group ─> latest commit ──┴─> DashboardView

Activity events and the group fan-out run concurrently. Within the fan-out,
a group's commit fetches start only after that group's project list arrives.

Failure policy is all-or-nothing: the first GitLabAPIError propagates to the
caller and no partial view is returned. Sibling requests already in flight are
not cancelled and run to completion in the background of the gather.
"""

import asyncio
import logging
import math
from dataclasses import dataclass
from typing import Any

from app.config.settings import Settings
from app.services.gitlab.constants import MAX_PER_PAGE
from app.services.gitlab.exceptions import GitLabAPIError
from app.services.gitlab.read_operations import GitLabReadOperations
from app.services.gitlab.types import DashboardView, GroupView, ProjectView

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardLimits:
    """Fan-out bounds for one dashboard build."""

    activity_limit: int = 101
    group_limit: int = 3
    projects_per_group: int = 5

    @classmethod
    def from_settings(cls, settings: Settings) -> "DashboardLimits":
        return cls(
            activity_limit=settings.activity_limit,
            group_limit=settings.group_limit,
            projects_per_group=settings.projects_per_group,
        )


def _record_id(record: Any, kind: str) -> Any:
    """Id of an upstream group or project record, needed to build the next request."""
    if not isinstance(record, dict) or record.get("id") is None:
        raise GitLabAPIError(f"GitLab returned a {kind} without an id")
    return record["id"]


async def fetch_recent_activities(
    gitlab: GitLabReadOperations, limit: int
) -> list[dict[str, Any]]:
    """
    Fetch the latest `limit` events, newest first.

    Requests ceil(limit / 100) full pages concurrently, concatenates them in
    page order and truncates to `limit`.
    """
    if limit <= 0:
        return []

    pages = math.ceil(limit / MAX_PER_PAGE)
    results = await asyncio.gather(
        *[gitlab.get_events(page=page, per_page=MAX_PER_PAGE) for page in range(1, pages + 1)]
    )

    activities: list[dict[str, Any]] = []
    for page_events in results:
        activities.extend(page_events)
    return activities[:limit]


async def fetch_project_view(
    gitlab: GitLabReadOperations, project: dict[str, Any]
) -> ProjectView:
    """Attach the latest commit to a project."""
    latest_commit = await gitlab.get_latest_commit(_record_id(project, "project"))
    return ProjectView(project=project, latest_commit=latest_commit)


async def fetch_group_view(
    gitlab: GitLabReadOperations, group: dict[str, Any], projects_per_group: int
) -> GroupView:
    """Fetch a group's projects, then all of their latest commits in parallel."""
    group_id = _record_id(group, "group")
    projects = await gitlab.get_group_projects(group_id, per_page=projects_per_group)
    # gather preserves argument order, so projects keep upstream order
    project_views = await asyncio.gather(
        *[fetch_project_view(gitlab, project) for project in projects]
    )
    return GroupView(group=group, projects=list(project_views))


async def fetch_group_views(
    gitlab: GitLabReadOperations, limits: DashboardLimits
) -> list[GroupView]:
    groups = await gitlab.get_groups(per_page=limits.group_limit)
    group_views = await asyncio.gather(
        *[fetch_group_view(gitlab, group, limits.projects_per_group) for group in groups]
    )
    return list(group_views)


async def build_dashboard(
    gitlab: GitLabReadOperations,
    user: dict[str, Any],
    limits: DashboardLimits,
) -> DashboardView:
    """
    Compose the dashboard for the owner of `gitlab`'s token.

    Args:
        gitlab: Read operations bound to the user's access token
        user: Profile snapshot from the session credential
        limits: Fan-out bounds

    Returns:
        DashboardView with activities and groups-with-projects-with-commits

    Raises:
        GitLabAPIError: If any single upstream call fails
    """
    activities, groups = await asyncio.gather(
        fetch_recent_activities(gitlab, limits.activity_limit),
        fetch_group_views(gitlab, limits),
    )

    project_count = sum(len(g.projects) for g in groups)
    logger.debug(
        f"Dashboard built: {len(activities)} activities, "
        f"{len(groups)} groups, {project_count} projects"
    )
    return DashboardView(user=user, activities=activities, groups=groups)
