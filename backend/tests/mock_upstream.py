"""A mocked listing API for tests, built on httpx.MockTransport."""

from __future__ import annotations

import json

import httpx

UPSTREAM_URL = "http://upstream.test/gyms"


def upstream(status_code: int = 200, body: object = None, *, calls: list | None = None) -> httpx.MockTransport:
    """A listing API that answers every request with the given status and JSON body."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(
            status_code,
            content=json.dumps(body).encode(),
            headers={"Content-Type": "application/json"},
        )

    return httpx.MockTransport(handler)
