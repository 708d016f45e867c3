"""Request ID propagation and access logging"""
import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


logger = structlog.get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag every request and response with an X-Request-Id"""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        response = await call_next(request)
        response.headers["X-Request-Id"] = request_id
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log request start and completion with latency"""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        method = request.method
        path = request.url.path

        logger.info("request_started", method=method, path=path)

        response = await call_next(request)

        latency_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "request_completed",
            method=method,
            path=path,
            status_code=response.status_code,
            latency_ms=round(latency_ms, 2),
        )
        return response
