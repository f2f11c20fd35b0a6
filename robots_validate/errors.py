# robots_validate/errors.py
"""
Exceptions raised by robots_validate.

A negative verification is not an error: it is reported as ``None``.
"""
from __future__ import annotations

from typing import Optional

__all__ = ("RobotsValidateError", "ResolverError", "RequestAdaptError")


class RobotsValidateError(Exception):
    """Base class for every error raised by the package."""


class ResolverError(RobotsValidateError):
    """A DNS query failed (timeout, SERVFAIL, no reachable nameserver, ...)."""

    def __init__(self, message: str, query: Optional[str] = None) -> None:
        super().__init__(message)
        self.query = query


class RequestAdaptError(RobotsValidateError, ValueError):
    """The request-like object carries no usable remote address."""
