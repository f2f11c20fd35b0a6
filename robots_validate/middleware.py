# robots_validate/middleware.py
"""
aiohttp middleware that tags each request with its verified robot identity.
"""
from __future__ import annotations

from typing import Awaitable, Callable, Optional

from aiohttp import web

from robots_validate.config import ErrorPolicy
from robots_validate.errors import RequestAdaptError, ResolverError
from robots_validate.logger import logger
from robots_validate.request import validate_request
from robots_validate.verifier import Verifier

__all__ = ("ROBOT_KEY", "robots_middleware")

ROBOT_KEY = "robot"

_Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


def robots_middleware(verifier: Verifier, policy: Optional[ErrorPolicy] = None):
    """
    Build a middleware storing the VerificationResult (or None) in ``request["robot"]``.

    Under a strict policy a DNS failure answers 503 instead of reaching the handler.
    """

    @web.middleware
    async def middleware(request: web.Request, handler: _Handler) -> web.StreamResponse:
        try:
            request[ROBOT_KEY] = await validate_request(verifier, request, policy)
        except RequestAdaptError:
            # unix sockets and some proxies give no peer address
            logger.debug("No remote address for %s, skipping robot check", request.path)
            request[ROBOT_KEY] = None
        except ResolverError as exc:
            logger.error("Robot check failed for %s: %s", request.remote, exc)
            raise web.HTTPServiceUnavailable(text="DNS verification unavailable") from exc
        return await handler(request)

    return middleware
