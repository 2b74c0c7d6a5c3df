"""
Gravitino Playground Manager

Selects a runtime, checks the environment and drives the
start/status/stop lifecycle of the Gravitino playground.
"""

__version__ = "1.0.0"
