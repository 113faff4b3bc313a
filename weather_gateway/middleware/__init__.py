"""Request gates applied in front of the weather handler."""

from weather_gateway.middleware.access_log import AccessLogger
from weather_gateway.middleware.auth import API_KEY_HEADER, CredentialExtractor
from weather_gateway.middleware.chain import GateChain, GatewayRequest, Interceptor, NextHandler
from weather_gateway.middleware.rate_limit import RateLimiter


def build_gate_chain(rate_limiter: RateLimiter, handler: NextHandler) -> GateChain:
    """
    Compose the application's gates around the handler.

    Order, outermost first: rate limiter, API key extractor, access logger.
    Requests are throttled before anything else looks at them.
    """
    return GateChain([rate_limiter, CredentialExtractor(), AccessLogger()], handler)


__all__ = [
    "API_KEY_HEADER",
    "AccessLogger",
    "CredentialExtractor",
    "GateChain",
    "GatewayRequest",
    "Interceptor",
    "NextHandler",
    "RateLimiter",
    "build_gate_chain",
]
