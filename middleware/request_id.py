"""
Request ID middleware.

Every request gets an id (client supplied ``X-Request-ID`` or a fresh UUID)
that is echoed in the response and stamped on every log record emitted
while the request is handled. The id lives in a context variable, so
overlapping requests never see each other's id.
"""

import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from utils.logger import request_id_var


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        token = request_id_var.set(request_id)
        try:
            response: Response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            request_id_var.reset(token)


def get_request_id(request: Request) -> str:
    """Request id of the current request, or "no-request-id" outside the middleware."""
    return getattr(request.state, "request_id", "no-request-id")
