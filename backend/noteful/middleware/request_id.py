"""
Noteful Backend — Request ID Middleware
=========================================

What:  Assigns a correlation ID to each request and returns it in X-Request-ID.
Why:   Every log line written while handling a request can be tied back to it,
       and clients can quote the ID when reporting a failed call.
How:   Reuses a client-supplied X-Request-ID, otherwise generates a short UUID.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# ContextVar, not threading.local: concurrent requests share one thread
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Use the client's X-Request-ID header if present
        2. Otherwise generate an 8-character ID
        3. Store it in request_id_var for log lines and error handlers
        4. Echo it on the response
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        token = request_id_var.set(rid)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
