import logging
import re
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("mentorship_admin.requests")

CORRELATION_HEADER = "X-Correlation-ID"
# Client-supplied ids outside this shape are replaced, never logged or echoed
VALID_CORRELATION_ID = re.compile(r"[A-Za-z0-9-]{1,64}")


def correlation_id_for(request: Request) -> str:
    incoming = request.headers.get(CORRELATION_HEADER)
    if incoming and VALID_CORRELATION_ID.fullmatch(incoming):
        return incoming
    return uuid.uuid4().hex[:12]


class LoggingMiddleware(BaseHTTPMiddleware):
    """Tag every request with a correlation id and log its outcome."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = correlation_id_for(request)
        request.state.correlation_id = correlation_id
        start = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"[{correlation_id}] {request.method} {request.url.path} "
            f"-> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
