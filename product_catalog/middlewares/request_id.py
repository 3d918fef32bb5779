from __future__ import annotations

import time
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from product_catalog.core.logging import get_logger

logger = get_logger(__name__)


def internal_error_response(request_id) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "message": "Unexpected error", "requestId": request_id},
    )


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Correlation id (X-Request-Id) for every request, echoed on the response."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()

        logger.info(
            "request start",
            extra={"requestId": request_id, "method": request.method, "path": request.url.path},
        )

        try:
            response: Response = await call_next(request)
        except Exception:
            # Unhandled errors never leak internal details to the client.
            logger.exception("Unhandled exception", extra={"requestId": request_id})
            response = internal_error_response(request_id)
        response.headers["X-Request-Id"] = request_id

        logger.info(
            "request end",
            extra={
                "requestId": request_id,
                "status": response.status_code,
                "durationMs": round((time.perf_counter() - started) * 1000, 2),
            },
        )

        return response
