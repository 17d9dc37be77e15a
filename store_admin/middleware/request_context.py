"""
Request context middleware for request logging.

WHAT: Middleware that gives every request an ID, makes it available
throughout the request lifecycle and writes one access log line per request.

WHY: Admin operations perform several sequential database calls; when one
fails, the log lines of that request need a common ID to be read together.
The ID is echoed back in the X-Request-ID header so a caller can quote it.

HOW: Stores a RequestContext in a ContextVar, which the logging filter in
core.logging_config reads, and in request.state for handlers.
"""

import logging
import time
import uuid
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Optional, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@dataclass
class RequestContext:
    """
    Container for request-scoped context data.

    Fields:
    - request_id: Identifier for log correlation (client-supplied or generated)
    - client_ip: Direct peer address, if known
    - path: Request path
    - method: HTTP method
    """

    request_id: str
    client_ip: Optional[str]
    path: str
    method: str


_request_context: ContextVar[Optional[RequestContext]] = ContextVar(
    "request_context", default=None
)


def get_request_context() -> Optional[RequestContext]:
    """
    Get the current request context.

    Returns:
        RequestContext if within a request, None otherwise
    """
    return _request_context.get()


def get_request_id(request: Request) -> str:
    """
    Reuse the caller's X-Request-ID when present, otherwise generate one.

    Args:
        request: The incoming request

    Returns:
        Request ID string
    """
    supplied = request.headers.get(REQUEST_ID_HEADER)
    if supplied and supplied.strip():
        return supplied.strip()[:128]
    return str(uuid.uuid4())


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware that captures request context and logs each request.

    Example:
        ctx = get_request_context()
        logger.info(f"Request {ctx.request_id} on {ctx.path}")
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and add context.

        Args:
            request: Incoming request
            call_next: Next middleware/handler

        Returns:
            Response with request ID header added
        """
        context = RequestContext(
            request_id=get_request_id(request),
            client_ip=request.client.host if request.client else None,
            path=request.url.path,
            method=request.method,
        )
        request.state.context = context
        token = _request_context.set(context)
        started = time.perf_counter()

        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = context.request_id

            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{context.method} {context.path} -> {response.status_code} "
                f"({elapsed_ms:.1f} ms)"
            )
            return response

        finally:
            _request_context.reset(token)
