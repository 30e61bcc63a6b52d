"""Exceptions raised by the GitLab client layer.

Every failure talking to GitLab, whether a non-200 status, a transport error,
an undecodable body or a record missing the fields the dashboard needs,
surfaces as GitLabAPIError. Route handlers catch only this type and turn it
into a generic 500, so nothing upstream-specific reaches the browser.
"""


class GitLabAPIError(Exception):
    """A GitLab REST or OAuth call could not produce usable data.

    Attributes:
        message: Operator-facing description, logged but never returned to clients
        status_code: Upstream HTTP status, or None when no response was received
            or the response body was malformed
        rate_limit_reset: Unix time from RateLimit-Reset when GitLab throttled the call
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        rate_limit_reset: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.rate_limit_reset = rate_limit_reset
        super().__init__(message)

    def describe(self) -> str:
        """One-line summary for log records."""
        parts = [self.message, f"status={self.status_code}"]
        if self.rate_limit_reset is not None:
            parts.append(f"rate_limit_reset={self.rate_limit_reset}")
        return " ".join(parts)
