"""
Request id middleware.

Every request gets a correlation id: the incoming X-Request-ID header when the
caller sent one, otherwise a fresh uuid4 hex. The id is stored on
request.state and echoed back on the response.
"""

from __future__ import annotations

import re
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Caller-supplied ids are accepted only if they look like an id, not arbitrary text
_VALID_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")


def new_request_id() -> str:
    return uuid4().hex


def get_request_id(request: Request) -> str:
    """Return the request's correlation id, assigning one if the middleware did not run."""
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        request_id = new_request_id()
        request.state.request_id = request_id
    return request_id


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Assigns and echoes the X-Request-ID correlation header."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        incoming = request.headers.get(REQUEST_ID_HEADER, "")
        request.state.request_id = incoming if _VALID_ID.match(incoming) else new_request_id()

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        return response
