"""OAuth login and callback endpoint tests."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest
from httpx import AsyncClient

from app.config.settings import get_settings
from app.core.security import decode_session_token
from app.main import app

from tests.helpers.mock_factories import make_user_json


def _stored_token(html: str) -> str:
    """Pull the credential out of the localStorage.setItem call."""
    marker = "localStorage.setItem('token', \""
    start = html.index(marker) + len(marker)
    return html[start : html.index('"', start)]


class TestLogin:
    @pytest.mark.anyio
    async def test_redirects_to_gitlab_authorize(self, api_client: AsyncClient):
        resp = await api_client.get("/login")

        assert resp.status_code == 307
        location = urlsplit(resp.headers["location"])
        assert location.netloc == "gitlab.example.com"
        assert location.path == "/oauth/authorize"
        query = parse_qs(location.query)
        assert query["client_id"] == ["test-client-id"]
        assert query["response_type"] == ["code"]
        assert query["scope"] == ["read_user read_api read_repository"]


class TestCallback:
    @pytest.mark.anyio
    async def test_missing_code_returns_400_without_exchange(self, api_client, fake_gitlab):
        resp = await api_client.get("/callback")

        assert resp.status_code == 400
        assert resp.json() == {"detail": "Authorization code is missing"}
        assert fake_gitlab.requests == []

    @pytest.mark.anyio
    async def test_empty_code_returns_400(self, api_client, fake_gitlab):
        resp = await api_client.get("/callback", params={"code": ""})

        assert resp.status_code == 400
        assert fake_gitlab.requests == []

    @pytest.mark.anyio
    async def test_success_stores_session_credential(self, api_client, fake_gitlab, test_settings):
        user = make_user_json()
        fake_gitlab.add("POST", "/oauth/token", json={"access_token": "glpat-fresh"})
        fake_gitlab.add("GET", "/api/v4/user", json=user)

        resp = await api_client.get("/callback", params={"code": "auth-code"})

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "window.location.href = '/'" in resp.text

        session = decode_session_token(_stored_token(resp.text), test_settings.jwt_secret)
        assert session.user == user
        assert session.access_token == "glpat-fresh"

    @pytest.mark.anyio
    async def test_invalid_code_returns_500(self, api_client, fake_gitlab):
        fake_gitlab.add("POST", "/oauth/token", status_code=401, json={"error": "invalid_grant"})

        resp = await api_client.get("/callback", params={"code": "expired-code"})

        assert resp.status_code == 500
        assert resp.json() == {"detail": "Error during OAuth flow"}
        assert fake_gitlab.requests_to("/api/v4/user") == []

    @pytest.mark.anyio
    async def test_profile_fetch_failure_returns_500(self, api_client, fake_gitlab):
        fake_gitlab.add("POST", "/oauth/token", json={"access_token": "glpat-fresh"})
        fake_gitlab.add("GET", "/api/v4/user", status_code=503)

        resp = await api_client.get("/callback", params={"code": "auth-code"})

        assert resp.status_code == 500
        assert "localStorage" not in resp.text

    @pytest.mark.anyio
    async def test_unconfigured_secret_returns_500(self, api_client, fake_gitlab, test_settings):
        unconfigured = test_settings.model_copy(update={"jwt_secret": ""})
        app.dependency_overrides[get_settings] = lambda: unconfigured
        fake_gitlab.add("POST", "/oauth/token", json={"access_token": "glpat-fresh"})
        fake_gitlab.add("GET", "/api/v4/user", json=make_user_json())

        resp = await api_client.get("/callback", params={"code": "auth-code"})

        assert resp.status_code == 500
        assert resp.json() == {"detail": "Error during OAuth flow"}
        assert "localStorage" not in resp.text
