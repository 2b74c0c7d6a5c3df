"""
Fixed playground constants.

The project identity binds what ``start`` launched to what ``status`` and
``stop`` later look for, so it is not configurable. Neither are the
resource requirements.
"""

from typing import Tuple

PROJECT_NAME = "gravitino-playground"

REQUIRED_DISK_SPACE_GB = 25
REQUIRED_RAM_GB = 8
REQUIRED_CPU_CORES = 2
REQUIRED_PORTS: Tuple[int, ...] = (
    8090,
    9001,
    3307,
    19000,
    19083,
    60070,
    13306,
    15342,
    18080,
    18888,
    19090,
    13000,
)

DEFAULT_HELM_CHART = "helm-chart"
DEFAULT_ENGINE_PROBE_IMAGE = "hello-world:linux"

# Run in this order, from the playground directory, with no arguments
DEFAULT_DEPENDENCY_SCRIPTS = [
    "init/spark/spark-dependency.sh",
    "init/gravitino/gravitino-dependency.sh",
    "init/jupyter/jupyter-dependency.sh",
]

CONFIG_FILENAMES = ["playground.yaml", "playground.yml"]
