"""
Rollcall Backend — Request ID Middleware
========================================

What:  Tags each request with a short correlation id and echoes it in the
       X-Request-ID response header.
How:   Reuses a client-sent X-Request-ID, otherwise generates 8 hex chars.
       The id is published through a ContextVar (for loggers and exception
       handlers) and request.state (for route handlers).
When:  Outermost middleware, so every response carries the header: 429s
       from the rate limiter and 500s for unhandled exceptions included.
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Any, Dict, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

# Coroutine-local: concurrent requests on one thread each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def error_body(error: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """JSON body shared by every error response (see schemas.common.ErrorResponse)."""
    body = {
        "error": error,
        "message": message,
        "request_id": request_id_var.get(""),
    }
    if details:
        body["details"] = details
    return body


def unexpected_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=error_body(
            "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
        ),
    )


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Assigns a request id before the handler runs and returns it in the response.

    Exceptions no handler claimed propagate through BaseHTTPMiddleware to this
    layer; they are logged with the id and answered with a generic 500.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()

        request_id_var.set(rid)
        request.state.request_id = rid

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error("[%s] Unexpected error: %s", rid, str(e), exc_info=True)
            response = unexpected_error_response()

        response.headers[REQUEST_ID_HEADER] = rid
        return response
