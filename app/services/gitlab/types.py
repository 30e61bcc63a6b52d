"""Data types for GitLab API responses and the composed dashboard view."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class CommitSummary:
    """Normalized summary of a single commit."""

    id: str
    short_id: str
    title: str
    message: str
    author_name: str
    author_email: str | None
    committed_date: str  # ISO 8601 date string
    web_url: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "CommitSummary":
        """Build from a /projects/:id/repository/commits item."""
        return cls(
            id=data["id"],
            short_id=data.get("short_id") or data["id"][:8],
            title=data.get("title", ""),
            message=data.get("message", ""),
            author_name=data.get("author_name", ""),
            author_email=data.get("author_email"),
            committed_date=data.get("committed_date") or data.get("created_at", ""),
            web_url=data.get("web_url"),
        )


@dataclass
class ProjectView:
    """Upstream project record with its latest commit, if any."""

    project: dict[str, Any]
    latest_commit: CommitSummary | None = None

    def to_dict(self) -> dict[str, Any]:
        # Projects without commits carry no latest_commit key at all
        data = dict(self.project)
        if self.latest_commit is not None:
            data["latest_commit"] = asdict(self.latest_commit)
        return data


@dataclass
class GroupView:
    """Upstream group record with its projects, in upstream order."""

    group: dict[str, Any]
    projects: list[ProjectView] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {**self.group, "projects": [p.to_dict() for p in self.projects]}


@dataclass
class DashboardView:
    """Composed dashboard payload for one authenticated request."""

    user: dict[str, Any]
    activities: list[dict[str, Any]]
    groups: list[GroupView]

    def to_dict(self) -> dict[str, Any]:
        return {
            "user": self.user,
            "activities": self.activities,
            "groups": [g.to_dict() for g in self.groups],
        }
