"""
Kubernetes adapter.

Installs the playground chart as a helm release in its own namespace;
release and namespace share the playground name.
"""

from pathlib import Path
from typing import Optional

from .. import output
from ..config.models import RuntimeKind
from ..errors import CommandFailed
from ..host import CommandResult
from .base import RuntimeAdapter


class KubernetesAdapter(RuntimeAdapter):
    """Kubernetes runtime driven by helm and kubectl."""

    kind = RuntimeKind.KUBERNETES

    def apply(self) -> Optional[Path]:
        # The chart mounts files from the checkout, so it needs an absolute path
        project_root = self.config.playground_dir.resolve()

        self._run_checked([
            "helm", "upgrade", "--install", self.project_name, str(self.config.chart_path),
            "--create-namespace", "--namespace", self.project_name,
            "--set", f"projectRoot={project_root}",
        ])

    def query(self) -> CommandResult:
        return self._run_checked(["kubectl", "-n", self.project_name, "get", "pods", "-o", "wide"])

    def teardown(self) -> None:
        args = ["helm", "uninstall", "--namespace", self.project_name, self.project_name]
        result = self.host.run(args, cwd=self.config.playground_dir)

        if result.ok:
            output.info("Playground stopped!", self.console)
            return

        if "not found" in result.output.lower():
            output.info(f"Release {self.project_name} is already uninstalled", self.console)
            return

        raise CommandFailed(args, result.returncode, result.output)
