"""In-memory GitLab for tests, built on httpx.MockTransport.

Usage:
    fake = FakeGitLab()
    fake.add("GET", "/api/v4/groups", json=[...])
    client = fake.client()  # patch get_gitlab_client to return this
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import httpx

Responder = Callable[[httpx.Request], httpx.Response]

TEST_GITLAB_URL = "https://gitlab.example.com"


class FakeGitLab:
    """Routes requests by (method, path) and records every request it sees.

    Set `latency` to hold each request open for that many seconds; `overlapped`
    then tells whether two paths were ever in flight at the same time.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Responder] = {}
        self.requests: list[httpx.Request] = []
        self.latency: float = 0
        self.in_flight: list[str] = []
        # (path, paths already in flight when it started)
        self.starts: list[tuple[str, tuple[str, ...]]] = []

    def add(
        self,
        method: str,
        path: str,
        json: Any = None,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
    ) -> None:
        def respond(_request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=json, headers=headers or {})

        self.routes[(method, path)] = respond

    def add_responder(self, method: str, path: str, responder: Responder) -> None:
        self.routes[(method, path)] = responder

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        self.starts.append((path, tuple(self.in_flight)))
        self.in_flight.append(path)
        try:
            await asyncio.sleep(self.latency)
        finally:
            self.in_flight.remove(path)

        responder = self.routes.get((request.method, request.url.path))
        if responder is None:
            return httpx.Response(404, json={"message": "404 Not Found"})
        return responder(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def overlapped(self, a: str, b: str) -> bool:
        return any(
            (path == a and b in active) or (path == b and a in active)
            for path, active in self.starts
        )
