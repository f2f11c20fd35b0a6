# robots_validate/__init__.py
"""
robots_validate package initializer.
Confirms that an IP address belongs to a known web crawler via
forward-confirmed reverse DNS and exposes the CLI.
"""
__version__ = "0.1.2"

from robots_validate.config import ErrorPolicy, VerifierConfig, load_config
from robots_validate.errors import RequestAdaptError, ResolverError, RobotsValidateError
from robots_validate.rules import RobotRule, VerificationResult, filter_by_agent, load_rules
from robots_validate.verifier import Verifier
from robots_validate.request import extract_client, validate_request

# Expose CLI entry point
from .cli import cli as main_cli

__all__ = [
    "ErrorPolicy",
    "RequestAdaptError",
    "ResolverError",
    "RobotRule",
    "RobotsValidateError",
    "VerificationResult",
    "Verifier",
    "VerifierConfig",
    "main_cli",
    "extract_client",
    "filter_by_agent",
    "load_config",
    "load_rules",
    "validate_request",
]
