"""
Pre-flight Check Implementations

One module per runtime; each exposes its ordered pipeline.
"""

from .compose import COMPOSE_CHECKS
from .kubernetes import KUBERNETES_CHECKS, HelmVersion, parse_helm_version

__all__ = [
    "COMPOSE_CHECKS",
    "KUBERNETES_CHECKS",
    "HelmVersion",
    "parse_helm_version",
]
