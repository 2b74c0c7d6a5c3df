"""
Pydantic models for playground configuration.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .defaults import (
    DEFAULT_DEPENDENCY_SCRIPTS,
    DEFAULT_ENGINE_PROBE_IMAGE,
    DEFAULT_HELM_CHART,
    PROJECT_NAME,
    REQUIRED_CPU_CORES,
    REQUIRED_DISK_SPACE_GB,
    REQUIRED_RAM_GB,
)


class RuntimeKind(str, Enum):
    """The two mutually exclusive backends. Values are the CLI tokens."""
    COMPOSE = "docker"
    KUBERNETES = "k8s"


class PlaygroundConfig(BaseModel):
    """Settings for one playground invocation."""

    playground_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory holding the compose file, helm chart and init scripts",
    )
    runtime: Optional[RuntimeKind] = Field(
        None, description="Force a runtime instead of selecting one"
    )
    helm_chart: str = Field(
        default=DEFAULT_HELM_CHART, description="Chart path, relative to playground_dir"
    )
    strict_helm_version: bool = Field(
        default=False, description="Fail when the helm version cannot be parsed"
    )
    probe_timeout_seconds: Optional[float] = Field(
        None, description="Timeout for captured probe commands"
    )
    engine_probe_image: str = Field(
        default=DEFAULT_ENGINE_PROBE_IMAGE, description="Image run to test the engine"
    )
    dependency_scripts: List[str] = Field(
        default_factory=lambda: list(DEFAULT_DEPENDENCY_SCRIPTS),
        description="Preparation scripts run before launch, in order",
    )

    @field_validator("playground_dir")
    @classmethod
    def resolve_dir(cls, v: Path) -> Path:
        """The chart receives this path, so it must be absolute."""
        return Path(v).expanduser().resolve()

    @field_validator("probe_timeout_seconds")
    @classmethod
    def positive_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("probe_timeout_seconds must be positive")
        return v

    @property
    def project_name(self) -> str:
        return PROJECT_NAME

    @property
    def chart_path(self) -> Path:
        return self.playground_dir / self.helm_chart

    def requirements_banner(self) -> str:
        return (
            f"The playground requires {REQUIRED_CPU_CORES} CPU cores, "
            f"{REQUIRED_RAM_GB} GB of RAM, and {REQUIRED_DISK_SPACE_GB} GB "
            "of disk storage to operate efficiently."
        )
