"""
Pre-flight Check Module

Validates the runtime environment before the playground is launched.
"""

from .models import CheckResult, CheckSeverity
from .checker import PreconditionChecker, PreflightResult

__all__ = [
    "PreconditionChecker",
    "PreflightResult",
    "CheckResult",
    "CheckSeverity",
]
