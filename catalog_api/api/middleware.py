"""API middleware for the catalog API.

Tags every request with a correlation ID and writes one access log
line per request.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


def _access_log_method(status_code: int) -> Callable[..., None]:
    if status_code >= 500:
        return logger.error
    if status_code >= 400:
        return logger.warning
    return logger.info


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Correlates logs and error bodies with a request ID.

    The caller's X-Request-ID is reused when present, otherwise a UUID
    is generated. The ID is kept on request.state for error responses,
    bound into the structlog context together with method and path for
    every log line written while the request runs, and echoed back in
    the response headers.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id

        with structlog.contextvars.bound_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        ):
            started = time.perf_counter()
            status_code = 500
            try:
                response = await call_next(request)
                status_code = response.status_code
            finally:
                _access_log_method(status_code)(
                    "Request completed",
                    status_code=status_code,
                    query=str(request.query_params) or None,
                    duration_ms=round((time.perf_counter() - started) * 1000, 2),
                )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(RequestIdMiddleware)
