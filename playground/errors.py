"""
Playground Errors

Every failure the tool can report. All of them end the current
invocation with exit code 1; nothing is retried or rolled back.
"""

from typing import List, Optional


class PlaygroundError(Exception):
    """Base class for failures that abort a playground command."""

    exit_code = 1


class NoRuntimeAvailable(PlaygroundError):
    """Neither docker nor kubectl is installed."""

    def __init__(self, message: str = "No runtime found. Please install Docker or Kubernetes."):
        super().__init__(message)


class PreconditionFailed(PlaygroundError):
    """A pre-flight check did not pass."""

    def __init__(self, check_name: str, detail: str):
        self.check_name = check_name
        self.detail = detail
        super().__init__(f"{check_name} check failed: {detail}")


class ToolMissing(PreconditionFailed):
    """A required command-line tool could not be resolved."""

    def __init__(self, tool: str, detail: Optional[str] = None):
        self.tool = tool
        super().__init__(tool, detail or f"{tool} not found")


class EngineUnreachable(PreconditionFailed):
    """The container engine could not run a container."""

    def __init__(self, detail: str):
        super().__init__("Docker", detail)


class ClusterUnreachable(PreconditionFailed):
    """kubectl could not reach the cluster."""

    def __init__(self, detail: str):
        super().__init__("K8s", detail)


class NotRunning(PlaygroundError):
    """No active playground was found on either runtime."""

    def __init__(self, project_name: str):
        self.project_name = project_name
        super().__init__(f"{project_name} is not currently running")


class InvalidUsage(PlaygroundError):
    """The command line could not be understood."""
    pass


class CommandFailed(PlaygroundError):
    """An external command exited non-zero."""

    def __init__(self, command: List[str], returncode: int, output: str = ""):
        self.command = command
        self.returncode = returncode
        self.output = output
        message = f"Command failed with exit code {returncode}: {' '.join(command)}"
        if output:
            message += f"\n{output.strip()}"
        super().__init__(message)


class DependencyPreparationFailed(CommandFailed):
    """A dependency-preparation script was missing or failed."""
    pass


class ConfigError(PlaygroundError):
    """Configuration loading or validation error."""
    pass
