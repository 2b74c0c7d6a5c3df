"""Runtime adapters, one per RuntimeKind."""

from typing import Dict, Optional, Type

from rich.console import Console

from ..config.models import PlaygroundConfig, RuntimeKind
from ..host import Host
from .base import RuntimeAdapter
from .compose import ComposeAdapter
from .kubernetes import KubernetesAdapter

ADAPTERS: Dict[RuntimeKind, Type[RuntimeAdapter]] = {
    RuntimeKind.COMPOSE: ComposeAdapter,
    RuntimeKind.KUBERNETES: KubernetesAdapter,
}


def get_adapter(
    kind: RuntimeKind,
    host: Host,
    config: PlaygroundConfig,
    console: Optional[Console] = None,
) -> RuntimeAdapter:
    """Get the adapter for a runtime."""
    return ADAPTERS[kind](host, config, console)


__all__ = [
    "RuntimeAdapter",
    "ComposeAdapter",
    "KubernetesAdapter",
    "ADAPTERS",
    "get_adapter",
]
