"""Base runtime adapter."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ..config.models import PlaygroundConfig, RuntimeKind
from ..errors import CommandFailed
from ..host import CommandResult, Host


class RuntimeAdapter(ABC):
    """
    Launches, inspects and removes the playground on one runtime.

    ``apply`` and ``teardown`` are idempotent: applying twice leaves one
    playground, tearing down when nothing runs is not an error here.
    Whether ``stop`` should run at all is decided by the caller.
    """

    # Override in subclasses
    kind: RuntimeKind

    def __init__(
        self,
        host: Host,
        config: PlaygroundConfig,
        console: Optional[Console] = None,
    ):
        self.host = host
        self.config = config
        self.console = console

    @property
    def project_name(self) -> str:
        return self.config.project_name

    @abstractmethod
    def apply(self) -> Optional[Path]:
        """Launch or update the full topology. Returns the log file, if any."""
        pass

    @abstractmethod
    def query(self) -> CommandResult:
        """Show workload status without changing anything."""
        pass

    @abstractmethod
    def teardown(self) -> None:
        """Remove everything the playground created."""
        pass

    def _run_checked(self, args: List[str], capture: bool = False) -> CommandResult:
        """Run in the playground directory, raising CommandFailed on non-zero exit."""
        result = self.host.run(args, cwd=self.config.playground_dir, capture=capture)
        if not result.ok:
            raise CommandFailed(args, result.returncode, result.output)
        return result
