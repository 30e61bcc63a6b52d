"""Constants for GitLab service."""

# GitLab caps per_page at 100 for every paginated list endpoint
MAX_PER_PAGE = 100

# Commits endpoint returns newest first, so one item is the latest commit
LATEST_COMMIT_PER_PAGE = 1

USER_AGENT = "gitlab-dashboard/0.1.0"
