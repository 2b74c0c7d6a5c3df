"""
Docker Compose Environment Checks

Validates that the local container engine can host the playground:
engine reachability, compose plugin, disk, RAM, CPU and free ports.
"""

import os
from typing import Callable, List, Optional, Sequence, Tuple

from ...config.defaults import (
    REQUIRED_CPU_CORES,
    REQUIRED_DISK_SPACE_GB,
    REQUIRED_PORTS,
    REQUIRED_RAM_GB,
)
from ...config.models import PlaygroundConfig
from ...errors import EngineUnreachable, ToolMissing
from ...host import Host
from ..models import CheckResult

GB = 1024 * 1024 * 1024


def check_engine(host: Host, config: PlaygroundConfig) -> CheckResult:
    """Run a throwaway container, always pulling, so the network is exercised too."""
    result = host.run(["docker", "run", "--rm", "--pull", "always", config.engine_probe_image])

    if result.ok:
        return CheckResult.ok("Docker", "Docker is working correctly!")

    detail = (
        "There was an issue running the hello-world container. "
        "Please check your Docker installation."
    )
    return CheckResult.fail(
        "Docker",
        detail,
        details=[result.output] if result.output else [],
        error=EngineUnreachable(detail),
    )


def check_compose(host: Host, config: PlaygroundConfig) -> CheckResult:
    """Check the compose plugin answers."""
    if host.which("docker") and host.run(["docker", "compose", "version"]).ok:
        return CheckResult.ok("Docker compose", "Docker compose is working correctly!")

    detail = "No docker service environment found. Please install docker compose."
    return CheckResult.fail(
        "Docker compose",
        detail,
        error=ToolMissing("compose", detail),
    )


def docker_root_dir(host: Host) -> Optional[str]:
    """Docker's data directory, or None if docker info cannot tell."""
    result = host.run(["docker", "info", "--format", "{{.DockerRootDir}}"])
    if not result.ok:
        return None
    root = result.stdout.strip()
    return root or None


def check_disk(host: Host, config: PlaygroundConfig) -> CheckResult:
    """Check free space on the partition docker stores images on."""
    root = docker_root_dir(host)

    # Under WSL the reported directory is not visible from the host side
    location = root if root and host.is_dir(root) else "/"

    available_gb = host.disk_free_bytes(location) // GB
    return evaluate_disk(available_gb, location)


def evaluate_disk(
    available_gb: int,
    location: str = "/",
    required_gb: int = REQUIRED_DISK_SPACE_GB,
) -> CheckResult:
    if available_gb >= required_gb:
        return CheckResult.ok("Disk", f"{available_gb} GB available.", details=[f"Measured at {location}"])

    return CheckResult.fail(
        "Disk",
        f"{available_gb} GB available, {required_gb} GB or more required",
        details=[f"Measured at {location}"],
    )


def _docker_info_int(host: Host, template: str) -> Optional[int]:
    result = host.run(["docker", "info", "--format", template])
    if not result.ok:
        return None
    try:
        return int(result.stdout.strip())
    except ValueError:
        return None


def check_ram(host: Host, config: PlaygroundConfig) -> CheckResult:
    """Check memory available to the engine."""
    total_bytes = _docker_info_int(host, "{{.MemTotal}}")
    if total_bytes is None:
        return CheckResult.fail("RAM", "Could not read total memory from docker info")
    return evaluate_ram(total_bytes // GB)


def evaluate_ram(total_gb: int, required_gb: int = REQUIRED_RAM_GB) -> CheckResult:
    if total_gb >= required_gb:
        return CheckResult.ok("RAM", f"{total_gb} GB available.")
    return CheckResult.fail("RAM", f"Only {total_gb} GB available, {required_gb} GB or more required")


def check_cpu(host: Host, config: PlaygroundConfig) -> CheckResult:
    """Check CPU cores available to the engine."""
    cores = _docker_info_int(host, "{{.NCPU}}")
    if cores is None:
        return CheckResult.fail("CPU", "Could not read CPU count from docker info")
    return evaluate_cpu(cores)


def evaluate_cpu(cores: int, required: int = REQUIRED_CPU_CORES) -> CheckResult:
    if cores >= required:
        return CheckResult.ok("CPU", f"{cores} cores available.")
    return CheckResult.fail("CPU", f"Only {cores} cores available, {required} cores or more required")


def port_in_use(host: Host, port: int) -> bool:
    """
    Check whether a process is listening on a TCP port.

    Uses lsof. On Linux other users' sockets are only visible to root,
    so the probe goes through sudo unless we already are root. Without
    lsof, falls back to a localhost connect.
    """
    if not host.which("lsof"):
        return host.port_accepting(port)

    cmd = ["lsof", "-i", f":{port}", "-sTCP:LISTEN"]
    if host.system() == "Linux" and not _is_root():
        cmd = ["sudo"] + cmd

    return bool(host.run(cmd).stdout.strip())


def _is_root() -> bool:
    return hasattr(os, "geteuid") and os.geteuid() == 0


def partition_ports(
    host: Host,
    ports: Sequence[int] = REQUIRED_PORTS,
) -> Tuple[List[int], List[int]]:
    """Split ports into (available, busy), keeping their order."""
    available: List[int] = []
    busy: List[int] = []
    for port in ports:
        if port_in_use(host, port):
            busy.append(port)
        else:
            available.append(port)
    return available, busy


def check_ports(host: Host, config: PlaygroundConfig) -> CheckResult:
    """Check every required port is free, reporting all busy ones at once."""
    available, busy = partition_ports(host)
    return evaluate_ports(available, busy)


def evaluate_ports(available: List[int], busy: List[int]) -> CheckResult:
    details = []
    if available:
        details.append(f"Available ports: {' '.join(str(p) for p in available)}")
    if busy:
        details.append(f"Ports in use: {' '.join(str(p) for p in busy)}")

    if busy:
        return CheckResult.fail(
            "Ports",
            f"Ports in use: {busy}. Please check the ports.",
            details=details,
        )

    return CheckResult.ok("Ports", f"All {len(available)} required ports available", details=details)


# Pipeline order matters: later checks assume a reachable engine
COMPOSE_CHECKS: List[Tuple[str, Callable[[Host, PlaygroundConfig], CheckResult]]] = [
    ("engine", check_engine),
    ("compose", check_compose),
    ("disk", check_disk),
    ("ram", check_ram),
    ("cpu", check_cpu),
    ("ports", check_ports),
]
