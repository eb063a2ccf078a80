"""Request and assessment context for the API.

Every HTTP request gets a trace ID: the inbound `x-request-id` header when the
caller sends one, otherwise a freshly generated ID. The ID is echoed on the
response and held in a context variable, alongside the assessment being run,
so log filters can stamp each record with it.
"""

import contextvars
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from logging import getLogger

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = getLogger(__name__)

TRACE_HEADER = "x-request-id"

# Request-scoped context
ctx_trace_id: contextvars.ContextVar[str] = contextvars.ContextVar("trace_id", default="")
ctx_request: contextvars.ContextVar[dict | None] = contextvars.ContextVar("request", default=None)
ctx_response: contextvars.ContextVar[dict | None] = contextvars.ContextVar(
    "response", default=None
)
ctx_assessment: contextvars.ContextVar[dict | None] = contextvars.ContextVar(
    "assessment", default=None
)


def new_trace_id() -> str:
    return uuid.uuid4().hex


@contextmanager
def assessment_context(assessment_type: str, structure_type: str) -> Iterator[None]:
    """Tag log records emitted inside the block with the running assessment."""
    token = ctx_assessment.set({"type": assessment_type, "structure_type": structure_type})
    try:
        yield
    finally:
        ctx_assessment.reset(token)


class TraceIdMiddleware(BaseHTTPMiddleware):
    """Assigns a trace ID to each request and returns it in `x-request-id`."""

    async def dispatch(self, request: Request, call_next):
        trace_id = request.headers.get(TRACE_HEADER) or new_trace_id()
        trace_token = ctx_trace_id.set(trace_id)
        request_token = ctx_request.set({"url": str(request.url), "method": request.method})

        try:
            response = await call_next(request)
            ctx_response.set({"status_code": response.status_code})
            response.headers[TRACE_HEADER] = trace_id
            return response
        finally:
            ctx_request.reset(request_token)
            ctx_trace_id.reset(trace_token)
