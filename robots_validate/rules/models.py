# robots_validate/rules/models.py
"""
Data models for robot identity rules and verification results.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True, slots=True)
class RobotRule:
    """Identity of a declared crawler: its name, user-agent and hostname patterns."""

    name: str
    domain: re.Pattern[str]
    agent: Optional[re.Pattern[str]] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("RobotRule requires a non-empty name")
        if not self.domain.pattern:
            raise ValueError(f"RobotRule {self.name!r} requires a domain pattern")

    def matches_agent(self, agent: str) -> bool:
        """Rules without an agent pattern accept any user-agent."""
        return self.agent is None or self.agent.search(agent) is not None

    def matches_hostname(self, hostname: str) -> bool:
        return self.domain.search(hostname) is not None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "agent": self.agent.pattern if self.agent is not None else None,
            "domain": self.domain.pattern,
        }


@dataclass(frozen=True, slots=True)
class VerificationResult:
    """
    A confirmed robot: the matched rule's fields plus the DNS evidence.

    Compiled patterns are immutable, so sharing them with the rule table is safe.
    """

    name: str
    agent: Optional[re.Pattern[str]]
    domain: re.Pattern[str]
    hostname: str
    ip_address: str

    @classmethod
    def from_rule(cls, rule: RobotRule, hostname: str, ip_address: str) -> VerificationResult:
        return cls(
            name=rule.name,
            agent=rule.agent,
            domain=rule.domain,
            hostname=hostname,
            ip_address=ip_address,
        )

    def as_dict(self) -> Dict[str, Any]:
        """JSON-friendly form; patterns are reduced to their source text."""
        return {
            "name": self.name,
            "agent": self.agent.pattern if self.agent is not None else None,
            "domain": self.domain.pattern,
            "hostname": self.hostname,
            "ip_address": self.ip_address,
        }
