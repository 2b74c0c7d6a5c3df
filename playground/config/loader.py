"""
Configuration loader for YAML files and environment overrides.

Precedence, highest first: explicit arguments, PLAYGROUND_* environment
variables, the YAML file, model defaults.
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from ..errors import ConfigError
from .defaults import CONFIG_FILENAMES
from .models import PlaygroundConfig

ENV_PREFIX = "PLAYGROUND"


class ConfigLoader:
    """
    Loads and validates the playground configuration.

    The YAML file is optional. When no path is given, ``playground.yaml``
    in the playground directory is used if it exists.
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        playground_dir: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the config loader.

        Args:
            config_path: Path to a YAML config file
            playground_dir: Playground directory given on the command line
            environ: Environment mapping (defaults to os.environ)
        """
        self.config_path = Path(config_path) if config_path else None
        self.playground_dir = Path(playground_dir) if playground_dir else None
        self.environ = os.environ if environ is None else environ

    def load(self, **overrides: Any) -> PlaygroundConfig:
        """
        Build the configuration.

        Args:
            **overrides: Explicit values that win over everything else
                (None values are ignored)

        Returns:
            Validated PlaygroundConfig
        """
        data: Dict[str, Any] = {}

        config_file = self._find_config_file()
        if config_file:
            data.update(self._read_yaml(config_file))

        data.update(self._from_env())

        if self.playground_dir:
            data["playground_dir"] = self.playground_dir
        data.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return PlaygroundConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid playground configuration: {e}")

    def _find_config_file(self) -> Optional[Path]:
        if self.config_path:
            if not self.config_path.is_file():
                raise ConfigError(f"Configuration file does not exist: {self.config_path}")
            return self.config_path

        base = self.playground_dir or Path(self.environ.get(f"{ENV_PREFIX}_DIR") or Path.cwd())
        for filename in CONFIG_FILENAMES:
            candidate = base / filename
            if candidate.is_file():
                return candidate
        return None

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse a YAML file."""
        try:
            with open(file_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {file_path}: {e}")
        except IOError as e:
            raise ConfigError(f"Cannot read {file_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping in {file_path}")
        return data

    def _from_env(self) -> Dict[str, Any]:
        env = self.environ
        data: Dict[str, Any] = {}

        if env.get(f"{ENV_PREFIX}_DIR"):
            data["playground_dir"] = env[f"{ENV_PREFIX}_DIR"]
        if env.get(f"{ENV_PREFIX}_RUNTIME"):
            data["runtime"] = env[f"{ENV_PREFIX}_RUNTIME"]
        if env.get(f"{ENV_PREFIX}_HELM_CHART"):
            data["helm_chart"] = env[f"{ENV_PREFIX}_HELM_CHART"]
        if env.get(f"{ENV_PREFIX}_STRICT_HELM_VERSION"):
            data["strict_helm_version"] = (
                env[f"{ENV_PREFIX}_STRICT_HELM_VERSION"].lower() in {"1", "true", "yes"}
            )
        if env.get(f"{ENV_PREFIX}_PROBE_TIMEOUT"):
            data["probe_timeout_seconds"] = env[f"{ENV_PREFIX}_PROBE_TIMEOUT"]

        return data
