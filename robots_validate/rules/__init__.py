# File: robots_validate/rules/__init__.py
"""robots_validate.rules: robot identity rules, the built-in table and the agent filter."""

from .models import RobotRule, VerificationResult
from .table import filter_by_agent, load_rules

__all__ = ["RobotRule", "VerificationResult", "filter_by_agent", "load_rules"]
