"""
Running Playground Detection

Finds which runtime, if any, currently hosts the playground. Nothing is
remembered between invocations; every call asks docker and kubectl.
"""

import json
from dataclasses import dataclass
from typing import Any, List, Optional

from ..config.defaults import PROJECT_NAME
from ..config.models import RuntimeKind
from ..host import Host


@dataclass(frozen=True)
class PlaygroundState:
    """Where the playground is running right now."""
    active: bool
    kind: Optional[RuntimeKind] = None

    @classmethod
    def inactive(cls) -> "PlaygroundState":
        return cls(active=False)


class RuntimeDetector:
    """
    Detects the active playground.

    Detection order:
    1. Docker compose project named after the playground
    2. Kubernetes namespace with at least one Running pod

    The first runtime that reports the playground wins; a playground
    somehow running on both is reported as compose.
    """

    def __init__(self, host: Host, project_name: str = PROJECT_NAME):
        self.host = host
        self.project_name = project_name

    def detect(self) -> PlaygroundState:
        if self._compose_running():
            return PlaygroundState(active=True, kind=RuntimeKind.COMPOSE)

        if self._kubernetes_running():
            return PlaygroundState(active=True, kind=RuntimeKind.KUBERNETES)

        return PlaygroundState.inactive()

    def _compose_running(self) -> bool:
        if not self.host.which("docker"):
            return False

        result = self.host.run(["docker", "compose", "ls", "--all", "--format", "json"])
        if not result.ok:
            return False

        projects = self._parse_compose_ls(result.stdout)
        if projects is None:
            return self._scan_compose_table(result.stdout)

        for project in projects:
            if not isinstance(project, dict):
                continue
            if project.get("Name") == self.project_name:
                return "running" in str(project.get("Status", "")).lower()
        return False

    @staticmethod
    def _parse_compose_ls(text: str) -> Optional[List[Any]]:
        text = text.strip()
        if not text:
            return []
        try:
            data = json.loads(text)
        except ValueError:
            return None
        return data if isinstance(data, list) else None

    def _scan_compose_table(self, text: str) -> bool:
        """Fallback for compose versions that ignore --format json."""
        for line in text.splitlines():
            fields = line.split()
            if fields and fields[0] == self.project_name:
                return any(f.lower().startswith("running") for f in fields[1:])
        return False

    def _kubernetes_running(self) -> bool:
        if not self.host.which("kubectl"):
            return False

        namespace = self.host.run(["kubectl", "get", "namespace", self.project_name])
        if not namespace.ok:
            return False

        pods = self.host.run([
            "kubectl", "-n", self.project_name, "get", "pods",
            "--field-selector=status.phase=Running", "-o", "name",
        ])
        return pods.ok and bool(pods.stdout.strip())
