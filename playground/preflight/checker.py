"""
Pre-flight Checker

Runs the check pipeline for a runtime, stopping at the first failure.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from rich.console import Console

from .. import output
from ..config.models import PlaygroundConfig, RuntimeKind
from ..host import Host
from .checks import COMPOSE_CHECKS, KUBERNETES_CHECKS
from .models import CheckResult, CheckSeverity

Pipeline = List[Tuple[str, Callable[[Host, PlaygroundConfig], CheckResult]]]

PIPELINES: Dict[RuntimeKind, Pipeline] = {
    RuntimeKind.COMPOSE: COMPOSE_CHECKS,
    RuntimeKind.KUBERNETES: KUBERNETES_CHECKS,
}


@dataclass
class PreflightResult:
    """Results of one pipeline run, in execution order."""
    runtime: RuntimeKind
    checks: List[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(c.passed for c in self.checks)

    @property
    def warnings(self) -> List[CheckResult]:
        return [c for c in self.checks if c.severity == CheckSeverity.WARNING]

    def summary(self) -> str:
        total = len(self.checks)
        passed = len([c for c in self.checks if c.passed])
        status = "PASSED" if self.passed else "FAILED"
        return f"{status}: {passed}/{total} checks passed ({len(self.warnings)} warnings)"


class PreconditionChecker:
    """
    Verifies the host or cluster can run the playground.

    The pipeline is fail-fast: the first failing check is reported and
    raised as its PreconditionFailed error; later checks do not run.
    """

    def __init__(
        self,
        host: Host,
        config: PlaygroundConfig,
        console: Optional[Console] = None,
    ):
        self.host = host
        self.config = config
        self.console = console

    def run(self, runtime: RuntimeKind) -> PreflightResult:
        """
        Run every check for a runtime.

        Returns:
            PreflightResult when all checks pass

        Raises:
            PreconditionFailed: on the first failing check
        """
        result = PreflightResult(runtime=runtime)

        for _, check in PIPELINES[runtime]:
            check_result = check(self.host, self.config)
            result.checks.append(check_result)
            self._report(check_result)

            if not check_result.passed:
                raise check_result.as_error()

        return result

    def run_check(self, runtime: RuntimeKind, name: str) -> Optional[CheckResult]:
        """
        Run a single check by name without raising.

        Returns:
            CheckResult or None if the runtime has no such check
        """
        for check_name, check in PIPELINES[runtime]:
            if check_name == name:
                return check(self.host, self.config)
        return None

    def _report(self, check: CheckResult) -> None:
        if not check.passed:
            for line in check.details:
                output.info(line, self.console)
            return

        if check.severity == CheckSeverity.WARNING:
            output.warn(f"{check.name} check: {check.message}", self.console)
        else:
            output.info(f"{check.name} check passed: {check.message}", self.console)
        for line in check.details:
            output.info(line, self.console)
