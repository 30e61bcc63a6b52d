from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # GitLab OAuth application (Settings > Applications on the GitLab instance)
    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = "http://localhost:3000/callback"
    oauth_scopes: list[str] = ["read_user", "read_api", "read_repository"]

    # GitLab instance
    gitlab_url: str = "https://gitlab.lnu.se"

    # Session credential - HS256 signing secret for the browser-held JWT
    # Generate with: python -c "import secrets; print(secrets.token_urlsafe(32))"
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    session_ttl_minutes: int = 60

    # Dashboard fan-out bounds
    activity_limit: int = 101
    group_limit: int = 3
    projects_per_group: int = 5

    # Application
    environment: str = "development"
    debug: bool = False

    @property
    def api_base_url(self) -> str:
        """Base URL of the GitLab REST API v4."""
        return f"{self.gitlab_url.rstrip('/')}/api/v4"

    @property
    def authorize_url(self) -> str:
        return f"{self.gitlab_url.rstrip('/')}/oauth/authorize"

    @property
    def token_url(self) -> str:
        return f"{self.gitlab_url.rstrip('/')}/oauth/token"

    @property
    def is_production(self) -> bool:
        """Check if running behind the production proxy."""
        return self.environment.lower() == "production"


settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings."""
    return settings
