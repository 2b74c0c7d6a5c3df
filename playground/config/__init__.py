"""Configuration handling for the playground manager."""

from .models import PlaygroundConfig, RuntimeKind
from .loader import ConfigLoader

__all__ = [
    "PlaygroundConfig",
    "RuntimeKind",
    "ConfigLoader",
]
