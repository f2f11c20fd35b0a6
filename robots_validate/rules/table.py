# robots_validate/rules/table.py
"""
Built-in table of known robots and the user-agent pre-filter.

Verification procedures published by the search engines:
  * https://developers.google.com/search/docs/crawling-indexing/verifying-googlebot
  * https://www.bing.com/webmaster/help/how-to-verify-bingbot-3905dc26
  * https://yandex.com/support/webmaster/robot-workings/check-yandex-robots.html
  * https://support.apple.com/en-us/119829
"""
from __future__ import annotations

import re
import threading
from typing import Optional, Sequence, Tuple

from robots_validate.logger import logger
from robots_validate.rules.models import RobotRule

__all__ = ("load_rules", "filter_by_agent")

# name, agent pattern, domain pattern. Order matters: the first domain match wins.
_ROBOTS: Tuple[Tuple[str, Optional[re.Pattern[str]], re.Pattern[str]], ...] = (
    (
        "Apple",
        re.compile(r"\bApplebot\b"),
        re.compile(r"\.applebot\.apple\.com$"),
    ),
    (
        "Baidu",
        re.compile(r"\bBaiduspider\b"),
        re.compile(r"\.crawl\.baidu\.com$"),
    ),
    (
        "Bing",
        re.compile(r"\b(?:Bingbot|MSNBot|AdIdxBot|BingPreview)\b", re.IGNORECASE),
        re.compile(r"\.search\.msn\.com$"),
    ),
    (
        "Google",
        re.compile(r"\bGoogle(?:bot)?\b", re.IGNORECASE),
        re.compile(r"\.google(?:bot)?\.com$"),
    ),
    (
        "Yahoo",
        re.compile(r"yahoo", re.IGNORECASE),
        re.compile(r"\.crawl\.yahoo\.net$"),
    ),
    (
        "Yandex",
        re.compile(r"Yandex"),
        re.compile(r"\.yandex\.(?:com|ru|net)$"),
    ),
)

_rules: Optional[Tuple[RobotRule, ...]] = None
_rules_lock = threading.Lock()


def load_rules() -> Tuple[RobotRule, ...]:
    """Return the robot table, building it on first use (exactly once across threads)."""
    global _rules
    if _rules is None:
        with _rules_lock:
            if _rules is None:
                _rules = tuple(
                    RobotRule(name=name, agent=agent, domain=domain)
                    for name, agent, domain in _ROBOTS
                )
                logger.debug("Robot table built: %d rules", len(_rules))
    return _rules


def filter_by_agent(rules: Sequence[RobotRule], agent: Optional[str]) -> Tuple[RobotRule, ...]:
    """
    Keep the rules that could belong to a client presenting *agent*.

    An empty or missing agent skips filtering altogether; rules without an
    agent pattern always pass.
    """
    if not agent:
        return tuple(rules)
    return tuple(rule for rule in rules if rule.matches_agent(agent))
