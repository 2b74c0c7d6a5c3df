"""
Pre-flight Check Models

Shared data types for pre-flight validation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..errors import PreconditionFailed


class CheckSeverity(str, Enum):
    """Severity levels for check results."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class CheckResult:
    """Result of a single pre-flight check."""
    name: str
    passed: bool
    severity: CheckSeverity
    message: str
    details: List[str] = field(default_factory=list)
    error: Optional[PreconditionFailed] = None

    @classmethod
    def ok(cls, name: str, message: str, details: Optional[List[str]] = None) -> "CheckResult":
        return cls(name=name, passed=True, severity=CheckSeverity.INFO,
                   message=message, details=details or [])

    @classmethod
    def fail(
        cls,
        name: str,
        message: str,
        details: Optional[List[str]] = None,
        error: Optional[PreconditionFailed] = None,
    ) -> "CheckResult":
        return cls(name=name, passed=False, severity=CheckSeverity.ERROR,
                   message=message, details=details or [], error=error)

    def as_error(self) -> PreconditionFailed:
        """The exception that aborts the pipeline on this result."""
        return self.error or PreconditionFailed(self.name, self.message)

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] {self.name}: {self.message}"
