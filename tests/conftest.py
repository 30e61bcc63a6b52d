"""Root conftest — test infrastructure for all backend tests.

Provides:
- anyio backend selection (asyncio only)
- Test settings with a known signing secret and GitLab URL
- FakeGitLab wired in place of the shared GitLab HTTP client
- API client with the settings dependency overridden
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from app.config.settings import Settings, get_settings
from tests.helpers.gitlab_transport import TEST_GITLAB_URL, FakeGitLab


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the developer's environment and .env file."""
    return Settings(
        _env_file=None,
        client_id="test-client-id",
        client_secret="test-client-secret",
        redirect_uri="http://testserver/callback",
        jwt_secret="test-jwt-secret",
        gitlab_url=TEST_GITLAB_URL,
        environment="test",
    )


@pytest.fixture
def fake_gitlab():
    """SAFETY: route every GitLab call to an in-memory fake.

    Both the REST reader and the OAuth client resolve the shared client
    through their own module namespace, so both are patched.
    """
    fake = FakeGitLab()
    client = fake.client()
    with (
        patch("app.services.gitlab.read_operations.get_gitlab_client", return_value=client),
        patch("app.services.gitlab.oauth.get_gitlab_client", return_value=client),
    ):
        yield fake


@pytest.fixture
async def api_client(test_settings: Settings, fake_gitlab: FakeGitLab):
    """HTTP client against the ASGI app with test settings and a fake GitLab."""
    from app.main import app

    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    app.dependency_overrides.clear()
