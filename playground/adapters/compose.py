"""
Docker Compose adapter.

Runs the playground as a compose project named after the playground.
After ``up`` a detached ``logs -f`` keeps writing every service's output
to a timestamped file next to the compose file.
"""

from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .. import output
from ..config.models import RuntimeKind
from ..host import CommandResult
from .base import RuntimeAdapter


class ComposeAdapter(RuntimeAdapter):
    """Docker compose runtime."""

    kind = RuntimeKind.COMPOSE

    def _compose(self, *args: str) -> List[str]:
        return ["docker", "compose", "-p", self.project_name, *args]

    def apply(self) -> Path:
        """
        Bring the project up and start streaming its logs.

        Returns:
            Path of the log file being written
        """
        self._run_checked(self._compose("up", "--detach"))
        return self.stream_logs()

    def stream_logs(self, now: Optional[datetime] = None) -> Path:
        """Start the background log follower; it is never waited on."""
        suffix = (now or datetime.now()).strftime("%Y%m%d%H%M%S")
        log_path = self.config.playground_dir / f"playground-{suffix}.log"

        self.host.spawn_detached(
            self._compose("logs", "-f"),
            log_path,
            cwd=self.config.playground_dir,
        )
        output.info(f"Check log details: {log_path}", self.console)
        return log_path

    def query(self) -> CommandResult:
        return self._run_checked(self._compose("ps", "-a"))

    def teardown(self) -> None:
        self._run_checked(self._compose("down"))
        output.info("Playground stopped!", self.console)
