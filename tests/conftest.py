# File: tests/conftest.py
from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

import pytest

from robots_validate.config import VerifierConfig
from robots_validate.errors import ResolverError
from robots_validate.verifier import Verifier

_Answer = Union[List[str], BaseException]


class StubResolver:
    """
    Deterministic in-memory resolver.

    ``ptr`` maps IP -> names, ``forward`` maps (hostname, rdtype) or hostname -> addresses.
    A value that is an exception instance is raised instead of returned.
    Every query is recorded in ``calls``.
    """

    def __init__(
        self,
        ptr: Optional[Dict[str, _Answer]] = None,
        forward: Optional[Dict[Union[str, Tuple[str, str]], _Answer]] = None,
    ) -> None:
        self.ptr = ptr or {}
        self.forward = forward or {}
        self.calls: List[Tuple[str, str]] = []

    async def query_reverse(self, ip_address: str) -> List[str]:
        self.calls.append(("PTR", ip_address))
        return self._answer(self.ptr.get(ip_address, []))

    async def query_forward(self, hostname: str, rdtype: str = "A") -> List[str]:
        self.calls.append((rdtype, hostname))
        answer = self.forward.get((hostname, rdtype), self.forward.get(hostname, []))
        return self._answer(answer)

    @staticmethod
    def _answer(answer: _Answer) -> List[str]:
        if isinstance(answer, BaseException):
            raise answer
        return list(answer)


@pytest.fixture()
def stub_resolver() -> StubResolver:
    """
    Resolver stub preloaded with the reference scenarios:
    a real Googlebot, a non-robot host and a forward-DNS mismatch.
    """
    return StubResolver(
        ptr={
            "66.249.66.1": ["crawl-66-249-66-1.googlebot.com"],
            "203.0.113.5": ["host.example.com"],
            "198.51.100.9": ["fake.google.com"],
            "157.55.39.1": ["msnbot-157-55-39-1.search.msn.com"],
            "192.0.2.1": ResolverError("SERVFAIL", query="192.0.2.1"),
        },
        forward={
            "crawl-66-249-66-1.googlebot.com": ["66.249.66.1"],
            "host.example.com": ["203.0.113.5"],
            "fake.google.com": ["10.0.0.1"],
            "msnbot-157-55-39-1.search.msn.com": ["157.55.39.1"],
        },
    )


@pytest.fixture()
def verifier(stub_resolver: StubResolver) -> Verifier:
    """Lenient verifier wired to the stub resolver and the built-in robot table."""
    return Verifier(resolver=stub_resolver, config=VerifierConfig())


@pytest.fixture()
def make_resolver():
    """Factory for custom StubResolver instances."""
    return StubResolver
