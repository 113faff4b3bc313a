"""Global request rate limiting."""

import logging
import threading
import time
from typing import Callable, Optional

from starlette.responses import Response

from weather_gateway.middleware.chain import GatewayRequest, Interceptor, NextHandler
from weather_gateway.responses import error_response

logger = logging.getLogger(__name__)


class RateLimiter(Interceptor):
    """
    Admit at most one request per interval across the whole service.

    The interval is 1 second divided by the configured requests per second.
    There is no burst capacity and no per-client accounting. A rejected
    request does not move the last admission time.
    """

    def __init__(
        self,
        rate_limit_per_second: int,
        clock: Callable[[], float] = time.monotonic,
    ):
        if rate_limit_per_second <= 0:
            raise ValueError("rate_limit_per_second must be positive")
        self.interval = 1.0 / rate_limit_per_second
        self._clock = clock
        self._lock = threading.Lock()
        self._last_admitted: Optional[float] = None

    def acquire(self) -> Optional[int]:
        """
        Try to admit a request.

        Returns None when admitted, otherwise the number of whole seconds the
        caller should wait before retrying.
        """
        with self._lock:
            now = self._clock()
            if self._last_admitted is not None:
                elapsed = now - self._last_admitted
                if elapsed < self.interval:
                    return int(self.interval - elapsed) + 1
            self._last_admitted = now
            return None

    async def handle(self, request: GatewayRequest, call_next: NextHandler) -> Response:
        retry_after = self.acquire()
        if retry_after is not None:
            logger.debug(f"Rate limit exceeded, retry after {retry_after}s")
            return error_response(
                f"Rate limit exceeded. Please wait {retry_after} seconds before retrying.",
                429,
                headers={"Retry-After": str(retry_after)},
            )
        return await call_next(request)
