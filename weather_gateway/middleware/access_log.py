"""Per-request access logging."""

import logging
import time

from starlette.responses import Response

from weather_gateway.middleware.chain import GatewayRequest, Interceptor, NextHandler

logger = logging.getLogger(__name__)


class AccessLogger(Interceptor):
    """Log method, path, status and duration of every request passing through."""

    async def handle(self, request: GatewayRequest, call_next: NextHandler) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        # Responses default to 200 unless the handler set a status
        status = getattr(response, "status_code", None) or 200
        method = request.request.method
        path = request.request.url.path

        logger.info(
            f"Method: {method}, URI: {path}, Status: {status}, Duration: {duration_ms:.2f}ms",
            extra={
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response
