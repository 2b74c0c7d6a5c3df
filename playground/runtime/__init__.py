"""
Runtime Selection and Detection

Picks a runtime for ``start`` and finds the active one for
``status`` and ``stop``.
"""

from .selector import detect_available_runtimes, select_runtime
from .detector import PlaygroundState, RuntimeDetector

__all__ = [
    "detect_available_runtimes",
    "select_runtime",
    "PlaygroundState",
    "RuntimeDetector",
]
