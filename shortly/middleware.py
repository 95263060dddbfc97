"""Request logging middleware."""

import logging
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("shortly.http")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs ``[METHOD] path`` for every request, then the status it got."""

    async def dispatch(self, request: Request, call_next: Callable):
        logger.info("[%s] %s", request.method, request.url.path)
        response = await call_next(request)
        logger.debug("[%s] %s -> %d", request.method, request.url.path, response.status_code)
        return response
