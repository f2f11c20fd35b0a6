# robots_validate/resolver.py
"""
DNS resolver: PTR and address lookups used by the verifier.
"""
from __future__ import annotations

from typing import List, Optional, Protocol

import dns.asyncresolver
import dns.exception
import dns.resolver

from robots_validate.config import VerifierConfig
from robots_validate.errors import ResolverError
from robots_validate.logger import logger

__all__ = ("Resolver", "DnsResolver", "build_resolver")


class Resolver(Protocol):
    """What the verifier needs from a resolver. Failures raise ResolverError."""

    async def query_reverse(self, ip_address: str) -> List[str]:
        ...

    async def query_forward(self, hostname: str, rdtype: str = "A") -> List[str]:
        ...


class DnsResolver:
    """
    Resolver backed by dnspython's asyncio resolver.

    "No such name" and "no answer" are empty results; any other DNS failure
    (timeout, SERVFAIL, unreachable nameservers) is raised as ResolverError.
    """

    def __init__(self, config: Optional[VerifierConfig] = None) -> None:
        self.config = config or VerifierConfig()
        self._resolver: Optional[dns.asyncresolver.Resolver] = None

    @property
    def resolver(self) -> dns.asyncresolver.Resolver:
        # built on first use so a missing resolv.conf surfaces as a query failure
        if self._resolver is None:
            res = dns.asyncresolver.Resolver(configure=not self.config.nameservers)
            # set before nameservers: some dnspython releases copy it into each entry
            res.port = self.config.port
            if self.config.nameservers:
                res.nameservers = list(self.config.nameservers)
            res.timeout = self.config.timeout
            res.lifetime = self.config.lifetime
            self._resolver = res
        return self._resolver

    async def query_reverse(self, ip_address: str) -> List[str]:
        """Return PTR names for *ip_address*, without the trailing dot, in answer order."""
        try:
            answer = await self.resolver.resolve_address(ip_address)
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
            logger.debug("No PTR record for %s", ip_address)
            return []
        except (dns.exception.DNSException, ValueError) as exc:
            raise ResolverError(f"PTR lookup for {ip_address} failed: {exc}", query=ip_address) from exc
        return [rr.target.to_text(omit_final_dot=True) for rr in answer]

    async def query_forward(self, hostname: str, rdtype: str = "A") -> List[str]:
        """Return the addresses *hostname* resolves to for *rdtype* (A or AAAA)."""
        try:
            answer = await self.resolver.resolve(hostname, rdtype)
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
            logger.debug("No %s record for %s", rdtype, hostname)
            return []
        except dns.exception.DNSException as exc:
            raise ResolverError(f"{rdtype} lookup for {hostname} failed: {exc}", query=hostname) from exc
        return [rr.address for rr in answer]


def build_resolver(config: Optional[VerifierConfig] = None) -> DnsResolver:
    """Default resolver factory used when none is injected."""
    return DnsResolver(config)
