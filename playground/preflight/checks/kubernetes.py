"""
Kubernetes Environment Checks

Validates cluster reachability and the helm version.
"""

import re
from typing import Callable, List, NamedTuple, Optional, Tuple

from ...config.models import PlaygroundConfig
from ...errors import ClusterUnreachable, PreconditionFailed, ToolMissing
from ...host import Host
from ..models import CheckResult, CheckSeverity

# helm version prints e.g.
#   version.BuildInfo{Version:"v3.15.2", GitCommit:"...", GoVersion:"go1.22.4"}
HELM_VERSION_PATTERN = re.compile(r'Version:"v(\d+)\.(\d+)\.(\d+)"')

REQUIRED_HELM_MAJOR = 3


class HelmVersion(NamedTuple):
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"v{self.major}.{self.minor}.{self.patch}"


def parse_helm_version(text: str) -> Optional[HelmVersion]:
    """Extract the version from ``helm version`` output, or None."""
    match = HELM_VERSION_PATTERN.search(text or "")
    if not match:
        return None
    return HelmVersion(*(int(part) for part in match.groups()))


def check_cluster(host: Host, config: PlaygroundConfig) -> CheckResult:
    result = host.run(["kubectl", "cluster-info"])

    if result.ok:
        return CheckResult.ok("K8s", "K8s is working correctly!")

    detail = "There was an issue running kubectl cluster-info, please check your K8s cluster."
    return CheckResult.fail(
        "K8s",
        detail,
        details=[result.output] if result.output else [],
        error=ClusterUnreachable(detail),
    )


def check_helm(host: Host, config: PlaygroundConfig) -> CheckResult:
    """Require helm with major version 3."""
    if not host.which("helm"):
        detail = "Helm command not found, Please install helm v3."
        return CheckResult.fail("Helm", detail, error=ToolMissing("helm", detail))

    output = host.run(["helm", "version"]).stdout
    return evaluate_helm_version(output, strict=config.strict_helm_version)


def evaluate_helm_version(output: str, strict: bool = False) -> CheckResult:
    version = parse_helm_version(output)

    if version is None:
        detail = f"Could not parse helm version from: {output.strip() or '<empty>'}"
        if strict:
            return CheckResult.fail("Helm", detail, error=PreconditionFailed("Helm", detail))
        return CheckResult(
            name="Helm",
            passed=True,
            severity=CheckSeverity.WARNING,
            message=detail,
            details=["Continuing without a version check"],
        )

    if version.major != REQUIRED_HELM_MAJOR:
        return CheckResult.fail(
            "Helm",
            f"Found helm {version}. Please install helm v{REQUIRED_HELM_MAJOR}",
        )

    return CheckResult.ok("Helm", f"helm {version} check PASS.")


KUBERNETES_CHECKS: List[Tuple[str, Callable[[Host, PlaygroundConfig], CheckResult]]] = [
    ("cluster", check_cluster),
    ("helm", check_helm),
]
