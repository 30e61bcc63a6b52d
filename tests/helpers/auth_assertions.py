"""Shared assertion helpers for authorization boundary tests.

Usage:
    await assert_requires_auth(client, "get", "/home/auth")
"""

from __future__ import annotations

from httpx import AsyncClient


async def assert_requires_auth(
    client: AsyncClient, method: str, url: str, **kwargs
) -> None:
    """Verify endpoint returns 401 with a Bearer challenge."""
    resp = await getattr(client, method)(url, **kwargs)
    assert resp.status_code == 401, (
        f"{method.upper()} {url} expected 401, got {resp.status_code}: {resp.text}"
    )
    assert resp.json() == {"detail": "Unauthorized"}
    assert resp.headers.get("www-authenticate") == "Bearer"
