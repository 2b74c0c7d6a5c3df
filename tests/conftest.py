"""
Pytest configuration and fixtures.

FakeHost stands in for the real machine: tools on PATH, command
results, free disk space and listening ports are all scripted, and every
command is recorded.
"""
import io
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import pytest
from rich.console import Console

from playground.config import PlaygroundConfig
from playground.host import CommandResult, Host

GB = 1024 * 1024 * 1024


class FakeHost(Host):
    """Scripted Host that records every call."""

    def __init__(
        self,
        tools: Iterable[str] = (),
        system: str = "Linux",
        disk_free_gb: int = 100,
        listening: Iterable[int] = (),
        dirs: Iterable[str] = (),
    ):
        super().__init__()
        self.tools = set(tools)
        self._system = system
        self.disk_free_gb = disk_free_gb
        self.listening = set(listening)
        self.dirs = set(dirs)
        self.missing_files: set = set()
        self.responses: Dict[Tuple[str, ...], CommandResult] = {}
        self.calls: List[List[str]] = []
        self.spawned: List[Tuple[List[str], Path]] = []
        self.disk_paths: List[str] = []

    def respond(self, args: List[str], returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.responses[tuple(args)] = CommandResult(list(args), returncode, stdout, stderr)

    def which(self, tool: str) -> Optional[str]:
        return f"/usr/bin/{tool}" if tool in self.tools else None

    def system(self) -> str:
        return self._system

    def run(self, args, cwd=None, capture=True) -> CommandResult:
        args = list(args)
        self.calls.append(args)

        if "lsof" in args:
            port = int(next(a for a in args if a.startswith(":"))[1:])
            if port in self.listening:
                return CommandResult(args, 0, f"java 1234 user 10u IPv4 TCP *:{port} (LISTEN)\n")
            return CommandResult(args, 1)

        scripted = self.responses.get(tuple(args))
        if scripted is not None:
            return scripted
        return CommandResult(args, 0)

    def spawn_detached(self, args, log_path, cwd=None) -> int:
        self.spawned.append((list(args), Path(log_path)))
        return 4242

    def disk_free_bytes(self, path) -> int:
        self.disk_paths.append(str(path))
        return self.disk_free_gb * GB

    def is_dir(self, path) -> bool:
        return str(path) in self.dirs

    def is_file(self, path) -> bool:
        return str(path) not in self.missing_files

    def port_accepting(self, port: int, host: str = "127.0.0.1") -> bool:
        return port in self.listening

    def commands(self, *prefix: str) -> List[List[str]]:
        """Recorded commands starting with prefix."""
        return [c for c in self.calls if c[:len(prefix)] == list(prefix)]


def healthy_docker(host: FakeHost, ram_gb: int = 16, cpus: int = 8, root: str = "/var/lib/docker") -> FakeHost:
    """Script docker info answers for a machine that meets every requirement."""
    host.tools.update({"docker", "lsof"})
    host.dirs.add(root)
    host.respond(["docker", "info", "--format", "{{.DockerRootDir}}"], stdout=f"{root}\n")
    host.respond(["docker", "info", "--format", "{{.MemTotal}}"], stdout=f"{ram_gb * GB}\n")
    host.respond(["docker", "info", "--format", "{{.NCPU}}"], stdout=f"{cpus}\n")
    return host


@pytest.fixture
def fake_host():
    return FakeHost()


@pytest.fixture
def config(tmp_path):
    return PlaygroundConfig(playground_dir=tmp_path)


@pytest.fixture
def quiet_console():
    """Console that renders into a buffer instead of the terminal."""
    return Console(file=io.StringIO(), width=200, color_system=None)
