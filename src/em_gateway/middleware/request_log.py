"""Request logging middleware.

Logs every HTTP request with method, path, status code, latency, caller and
a short request ID for correlation. The request_id is also injected into
request.state so router handlers can include it in ApiResponse.

Log format:
    INFO [POST] /api/v1/matching/run → 200 (3ms) caller=alice req_a1b2c3d4e5f6
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from config.settings import settings

logger = logging.getLogger("em.request")


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.request_id = f"req_{uuid.uuid4().hex[:12]}"

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "[%s] %s → %d (%.0fms) caller=%s %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request.headers.get(settings.CALLER_HEADER, "-"),
            request.state.request_id,
        )
        return response
