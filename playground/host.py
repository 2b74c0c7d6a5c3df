"""
Host Access

Thin wrapper around subprocess, shutil, platform and socket. Every
probe and every runtime adapter talks to the machine through a Host, so
tests can swap in a scripted fake.
"""

import platform
import shutil
import socket
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union


@dataclass
class CommandResult:
    """Outcome of one external command."""
    args: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Combined stdout and stderr, stripped."""
        return "\n".join(part for part in (self.stdout.strip(), self.stderr.strip()) if part)


class Host:
    """
    Runs external commands and reads host facts.

    Missing executables and timeouts are reported as failed
    CommandResults (exit codes 127 and 124, as a shell would) rather
    than raised, so callers only ever branch on ``returncode``.
    """

    def __init__(self, timeout: Optional[float] = None):
        """
        Initialize the host.

        Args:
            timeout: Seconds before a captured command is abandoned
                (None waits for the tool's own timeout behaviour)
        """
        self.timeout = timeout

    def which(self, tool: str) -> Optional[str]:
        """Resolve a tool on PATH."""
        return shutil.which(tool)

    def system(self) -> str:
        """Operating system family, e.g. Linux or Darwin."""
        return platform.system()

    def run(
        self,
        args: List[str],
        cwd: Optional[Union[str, Path]] = None,
        capture: bool = True,
    ) -> CommandResult:
        """
        Run a command to completion.

        Args:
            args: Command and arguments
            cwd: Working directory
            capture: Capture output; when False it goes straight to the terminal

        Returns:
            CommandResult with the exit code and any captured output
        """
        # subprocess raises FileNotFoundError for a missing cwd too
        if cwd and not Path(cwd).is_dir():
            return CommandResult(args=args, returncode=1, stderr=f"{cwd}: no such directory")

        try:
            result = subprocess.run(
                args,
                cwd=str(cwd) if cwd else None,
                capture_output=capture,
                text=True,
                timeout=self.timeout if capture else None,
            )
        except FileNotFoundError:
            return CommandResult(args=args, returncode=127, stderr=f"{args[0]}: command not found")
        except subprocess.TimeoutExpired:
            return CommandResult(args=args, returncode=124, stderr=f"{args[0]}: timed out")

        return CommandResult(
            args=args,
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )

    def spawn_detached(
        self,
        args: List[str],
        log_path: Path,
        cwd: Optional[Union[str, Path]] = None,
    ) -> int:
        """
        Start a command in its own session with output sent to a file.

        The child is not waited on and outlives this process.

        Returns:
            PID of the spawned process
        """
        with open(log_path, "w") as log_file:
            process = subprocess.Popen(
                args,
                cwd=str(cwd) if cwd else None,
                stdin=subprocess.DEVNULL,
                stdout=log_file,
                stderr=subprocess.STDOUT,
                start_new_session=True,
            )
        pid = process.pid
        # Never waited on; stops Popen.__del__ warning that the child is alive
        process.returncode = 0
        return pid

    def disk_free_bytes(self, path: Union[str, Path]) -> int:
        """Free bytes on the filesystem holding path."""
        return shutil.disk_usage(str(path)).free

    def is_dir(self, path: Union[str, Path]) -> bool:
        return Path(path).is_dir()

    def is_file(self, path: Union[str, Path]) -> bool:
        return Path(path).is_file()

    def port_accepting(self, port: int, host: str = "127.0.0.1") -> bool:
        """Check whether something accepts TCP connections on a local port."""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.settimeout(1.0)
            return sock.connect_ex((host, port)) == 0
