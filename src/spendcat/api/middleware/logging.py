"""Request logging middleware.

Every request gets an ID (the caller's ``X-Request-ID`` when supplied) that
is echoed back on the response. Completion records carry the category and
question IDs matched from the path.
"""

import logging
import time
import uuid
from typing import Any, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
_RESOURCE_PARAMS = ("category_id", "question_id")


def _resource_ids(request: Request) -> dict[str, Any]:
    # path_params is filled in by the router, so this is only useful after call_next
    return {k: request.path_params[k] for k in _RESOURCE_PARAMS if k in request.path_params}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its ID, outcome and duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        fields = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
        }

        logger.debug(
            "Request started",
            extra={**fields, "client_ip": request.client.host if request.client else None},
        )
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"Request failed: {type(exc).__name__}",
                extra={**fields, **_resource_ids(request), "duration_ms": _elapsed_ms(start)},
            )
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={
                **fields,
                **_resource_ids(request),
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(start),
            },
        )
        return response


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)
