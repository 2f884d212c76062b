"""
Quotes API - Request ID Middleware
===================================

What:  Assigns a correlation ID to each request and returns it in the
       `X-Request-ID` response header.
How:   A client-supplied X-Request-ID is reused when it is a short token of
       letters, digits, dots, dashes and underscores; anything else is
       replaced by the first 8 characters of a UUID4. The ID lives in a
       ContextVar so the access log, the auth dependency and the error
       envelopes ({"success": false, ..., "request_id": ...}) can read it
       without access to the request.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one thread each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"

# IDs are echoed into log lines and JSON bodies
_VALID_REQUEST_ID = re.compile(r"[A-Za-z0-9._-]{1,64}")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def resolve_request_id(incoming: str | None) -> str:
    """Return the client's ID if it is a safe token, otherwise a fresh one."""
    if incoming and _VALID_REQUEST_ID.fullmatch(incoming):
        return incoming
    return new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Stores the request ID in request_id_var and request.state."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
