"""OpenWeatherMap API key extraction."""

from starlette.responses import Response

from weather_gateway.middleware.chain import GatewayRequest, Interceptor, NextHandler
from weather_gateway.responses import error_response

API_KEY_HEADER = "X-API-Key"

MISSING_API_KEY_MESSAGE = (
    f"Missing '{API_KEY_HEADER}' header. Include your OpenWeatherMap API key in the "
    f"'{API_KEY_HEADER}' header. See documentation for more details."
)


class CredentialExtractor(Interceptor):
    """Require the caller's OpenWeatherMap API key and pass it down the chain."""

    header_name = API_KEY_HEADER

    async def handle(self, request: GatewayRequest, call_next: NextHandler) -> Response:
        api_key = request.request.headers.get(self.header_name)
        if not api_key:
            return error_response(MISSING_API_KEY_MESSAGE, 400)
        return await call_next(request.with_credential(api_key))
