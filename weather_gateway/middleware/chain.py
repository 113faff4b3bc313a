"""Ordered request gate chain.

Each gate is an Interceptor whose handle() receives the request and the rest
of the chain. A gate either answers on its own (rejecting the request) or
awaits call_next, optionally with a modified request value.
"""

from dataclasses import dataclass, replace
from functools import partial
from typing import Awaitable, Callable, List, Optional, Sequence

from starlette.requests import Request
from starlette.responses import Response


@dataclass(frozen=True)
class GatewayRequest:
    """Inbound request plus the values gates hand down to the handler."""
    request: Request
    credential: Optional[str] = None

    def with_credential(self, credential: str) -> "GatewayRequest":
        return replace(self, credential=credential)


NextHandler = Callable[[GatewayRequest], Awaitable[Response]]


class Interceptor:
    """Base class for request gates."""

    async def handle(self, request: GatewayRequest, call_next: NextHandler) -> Response:
        raise NotImplementedError


class GateChain:
    """Applies interceptors in order (first is outermost) around a handler."""

    def __init__(self, interceptors: Sequence[Interceptor], handler: NextHandler):
        self.interceptors: List[Interceptor] = list(interceptors)
        self.handler = handler

    async def dispatch(self, request: Request) -> Response:
        return await self._call(0, GatewayRequest(request=request))

    async def _call(self, index: int, request: GatewayRequest) -> Response:
        if index == len(self.interceptors):
            return await self.handler(request)
        interceptor = self.interceptors[index]
        return await interceptor.handle(request, partial(self._call, index + 1))
