# File: robots_validate/request.py
"""robots_validate.request: извлечение (IP, User-Agent) из объекта запроса и проверка клиента."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Tuple

from robots_validate.config import ErrorPolicy
from robots_validate.errors import RequestAdaptError
from robots_validate.rules import VerificationResult
from robots_validate.verifier import Verifier

__all__ = ["extract_client", "validate_request"]

# поля WSGI/PSGI environ
_ENV_ADDR = "REMOTE_ADDR"
_ENV_AGENT = "HTTP_USER_AGENT"
# атрибуты объектов запроса: aiohttp (remote), werkzeug/Flask (remote_addr)
_ADDR_ATTRS = ("remote", "remote_addr")
_AGENT_HEADER = "User-Agent"


def extract_client(request: Any) -> Tuple[str, Optional[str]]:
    """
    Возвращает пару (ip_address, agent) из environ-словаря или объекта запроса.

    Бросает RequestAdaptError, если адрес клиента не найден.
    """
    # aiohttp.web.Request is itself a Mapping, so attributes are checked first
    if isinstance(request, Mapping) and not hasattr(request, "headers"):
        ip_address = request.get(_ENV_ADDR)
        agent = request.get(_ENV_AGENT)
    else:
        ip_address = next(
            (getattr(request, attr) for attr in _ADDR_ATTRS if getattr(request, attr, None)),
            None,
        )
        headers = getattr(request, "headers", None) or {}
        agent = headers.get(_AGENT_HEADER)

    if not ip_address:
        raise RequestAdaptError(f"Адрес клиента не найден в {type(request).__name__}")
    return str(ip_address), agent or None


async def validate_request(
    verifier: Verifier,
    request: Any,
    policy: Optional[ErrorPolicy] = None,
) -> Optional[VerificationResult]:
    """Проверяет клиента запроса через Verifier.validate."""
    ip_address, agent = extract_client(request)
    return await verifier.validate(ip_address, agent=agent, policy=policy)
