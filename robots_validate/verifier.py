# robots_validate/verifier.py
"""
Forward-confirmed reverse DNS verification of crawler IP addresses.

The address is resolved to a hostname (PTR), the hostname is resolved back
(A records, or AAAA for IPv6 when ``forward_ipv6`` is set) and must include
the original address, then the hostname is matched against the robot table.
"""
from __future__ import annotations

import asyncio
from typing import Awaitable, List, Optional, Sequence

from robots_validate.config import ErrorPolicy, VerifierConfig
from robots_validate.errors import ResolverError
from robots_validate.logger import logger
from robots_validate.resolver import Resolver, build_resolver
from robots_validate.rules import RobotRule, VerificationResult, filter_by_agent, load_rules

__all__ = ["Verifier"]


class Verifier:
    """Confirms that an IP address belongs to a known robot."""

    def __init__(
        self,
        resolver: Optional[Resolver] = None,
        config: Optional[VerifierConfig] = None,
        rules: Optional[Sequence[RobotRule]] = None,
    ) -> None:
        self.config = config or VerifierConfig()
        self.resolver = resolver if resolver is not None else build_resolver(self.config)
        self._rules = tuple(rules) if rules is not None else None

    @property
    def rules(self) -> Sequence[RobotRule]:
        return self._rules if self._rules is not None else load_rules()

    async def validate(
        self,
        ip_address: str,
        agent: Optional[str] = None,
        policy: Optional[ErrorPolicy] = None,
    ) -> Optional[VerificationResult]:
        """
        Return the matched robot for *ip_address*, or None when it cannot be confirmed.

        Only the first PTR record is used, and forward addresses are compared
        with the input as exact strings. The forward lookup asks for A records;
        with ``config.forward_ipv6`` set, IPv6 addresses are checked against
        AAAA records instead. With ``ErrorPolicy.STRICT`` a failed
        DNS query raises ResolverError; otherwise it yields None. *policy*
        defaults to the one derived from ``config.fail_on_error``.
        """
        policy = policy or self.config.policy

        hostnames = await self._query(self.resolver.query_reverse(ip_address), policy)
        if not hostnames:
            logger.debug("%s: no reverse DNS name", ip_address)
            return None
        hostname = hostnames[0]
        logger.debug("%s: reverse DNS -> %s", ip_address, hostname)

        candidates = filter_by_agent(self.rules, agent)

        rdtype = "AAAA" if self.config.forward_ipv6 and ":" in ip_address else "A"
        addresses = await self._query(self.resolver.query_forward(hostname, rdtype), policy)
        if not addresses:
            logger.debug("%s: %s has no %s records", ip_address, hostname, rdtype)
            return None
        if ip_address not in addresses:
            logger.warning(
                "Forward DNS mismatch: %s -> %s -> %s", ip_address, hostname, ", ".join(addresses)
            )
            return None

        for rule in candidates:
            if rule.matches_hostname(hostname):
                logger.info("%s confirmed as %s (%s)", ip_address, rule.name, hostname)
                return VerificationResult.from_rule(rule, hostname, ip_address)

        logger.debug("%s: %s matches no robot rule", ip_address, hostname)
        return None

    @staticmethod
    async def _query(lookup: Awaitable[List[str]], policy: ErrorPolicy) -> List[str]:
        try:
            return await lookup
        except (ResolverError, asyncio.TimeoutError) as exc:
            if policy is ErrorPolicy.STRICT:
                if isinstance(exc, ResolverError):
                    raise
                raise ResolverError(f"DNS lookup timed out: {exc!r}") from exc
            logger.warning("DNS lookup failed, treating as no match: %s", exc)
            return []
