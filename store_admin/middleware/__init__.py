"""
Middleware package.

WHY: Middleware provides cross-cutting concerns (request IDs, access logging)
that apply to all requests.
"""

from store_admin.middleware.request_context import (
    RequestContextMiddleware,
    RequestContext,
    get_request_context,
    get_request_id,
)

__all__ = [
    "RequestContextMiddleware",
    "RequestContext",
    "get_request_context",
    "get_request_id",
]
