"""
Access log middleware.

Logs one line per request with the method, path, status code, client address
and processing time. Request bodies are never logged since uploads can be
arbitrarily large.
"""

import time
from typing import Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from .config import settings
from .logger import logger


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Request access logging"""

    def _get_client_ip(self, request: Request) -> Optional[str]:
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip

        if request.client:
            return request.client.host

        return None

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not settings.access_log.enabled:
            return await call_next(request)

        start_time = time.time()
        response = await call_next(request)
        processing_time = (time.time() - start_time) * 1000

        logger.info(
            f"{request.method} {request.url.path} {response.status_code} "
            f"client={self._get_client_ip(request)} {processing_time:.2f}ms"
        )
        return response
