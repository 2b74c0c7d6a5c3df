"""
Runtime Selection

Chooses the backend for ``start`` from what is installed and, when both
are installed, what the user types.
"""

from typing import Callable, Optional, Tuple

from rich.console import Console

from .. import output
from ..config.models import RuntimeKind
from ..errors import NoRuntimeAvailable
from ..host import Host

PROMPT_TEXT = (
    "Both Docker and K8s are available. Which runtime would you like to use? "
    "\\[docker/k8s] (default: docker)"
)


def detect_available_runtimes(host: Host) -> Tuple[bool, bool]:
    """Return (docker_available, k8s_available) from tools on PATH."""
    return host.which("docker") is not None, host.which("kubectl") is not None


def select_runtime(
    docker_available: bool,
    k8s_available: bool,
    prompt_fn: Callable[[], str],
    console: Optional[Console] = None,
) -> RuntimeKind:
    """
    Decide which runtime to start the playground on.

    Args:
        docker_available: docker is installed
        k8s_available: kubectl is installed
        prompt_fn: Asks the user; only called when both are available
        console: Where to print the invalid-choice warning

    Returns:
        The chosen RuntimeKind

    Raises:
        NoRuntimeAvailable: if neither runtime is installed
    """
    if not docker_available and not k8s_available:
        raise NoRuntimeAvailable()

    if docker_available and not k8s_available:
        return RuntimeKind.COMPOSE

    if k8s_available and not docker_available:
        return RuntimeKind.KUBERNETES

    choice = (prompt_fn() or "").strip()

    if choice == RuntimeKind.KUBERNETES.value:
        return RuntimeKind.KUBERNETES
    if choice in ("", RuntimeKind.COMPOSE.value):
        return RuntimeKind.COMPOSE

    # Unknown answers fall back to the default instead of failing
    output.error(f"Invalid choice. Using default: {RuntimeKind.COMPOSE.value}", console)
    return RuntimeKind.COMPOSE
