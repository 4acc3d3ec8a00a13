"""
HTTP middleware for request logging and correlation ids.

``CorrelationIdMiddleware`` takes the correlation id from the request
header (``settings.correlation_header``), or generates one, and binds
it to :data:`~task_board_api.app.core.logging_config.correlation_id_var`
for the duration of the request so that every log line written while
serving it carries the id.  The id is echoed back in the same response
header.

``RequestLoggingMiddleware`` logs the method and path of each request
and the resulting status code.
"""

import logging
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from .logging_config import correlation_id_var

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, header_name: str = "Correlation-Id-Header") -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)
        response.headers[self.header_name] = correlation_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        logger.info("Request: %s %s", request.method, request.url.path)
        response = await call_next(request)
        logger.info("Status Code: %s", response.status_code)
        return response
