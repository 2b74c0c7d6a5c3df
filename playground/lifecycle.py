"""
Playground Lifecycle

Orchestrates ``start``, ``status`` and ``stop``. The chosen runtime is
passed from step to step; nothing about a previous invocation is
remembered, so ``status`` and ``stop`` always re-detect.
"""

from typing import Callable, Optional

from rich.console import Console

from . import output
from .adapters import RuntimeAdapter, get_adapter
from .config.models import PlaygroundConfig, RuntimeKind
from .errors import DependencyPreparationFailed, NotRunning
from .host import Host
from .preflight import PreconditionChecker
from .runtime import PlaygroundState, RuntimeDetector, detect_available_runtimes, select_runtime


class LifecycleController:
    """
    Runs playground commands against whichever runtime applies.

    start:  select runtime -> pre-flight checks -> dependency scripts -> apply
    status: detect -> query
    stop:   detect -> teardown
    """

    def __init__(
        self,
        config: PlaygroundConfig,
        host: Optional[Host] = None,
        prompt_fn: Optional[Callable[[], str]] = None,
        console: Optional[Console] = None,
    ):
        """
        Initialize the controller.

        Args:
            config: Playground configuration
            host: Host used for every external command
            prompt_fn: Asks which runtime to use when both are installed
            console: Output console (defaults to the shared one)
        """
        self.config = config
        self.host = host or Host(timeout=config.probe_timeout_seconds)
        self.prompt_fn = prompt_fn or (lambda: "")
        self.console = console

    # ------------------------------------------------------------------
    # start
    # ------------------------------------------------------------------

    def start(self, skip_checks: bool = False, runtime: Optional[RuntimeKind] = None) -> RuntimeKind:
        """
        Launch the playground.

        Args:
            skip_checks: Bypass every pre-flight check
            runtime: Use this runtime instead of selecting one

        Returns:
            The runtime the playground was started on
        """
        output.info("Starting the playground...", self.console)
        output.info(self.config.requirements_banner(), self.console)

        kind = self.resolve_runtime(runtime)
        output.info(f"Using runtime: {kind.value}", self.console)

        if skip_checks:
            output.warn("Skipping pre-flight checks", self.console)
        else:
            result = PreconditionChecker(self.host, self.config, self.console).run(kind)
            output.show_results(result, self.console)
            output.info(result.summary(), self.console)

        self.prepare_dependencies()

        self.adapter(kind).apply()
        return kind

    def resolve_runtime(self, runtime: Optional[RuntimeKind] = None) -> RuntimeKind:
        """Explicit runtime, then configured runtime, then selection."""
        if runtime is not None:
            return runtime
        if self.config.runtime is not None:
            return self.config.runtime

        docker_available, k8s_available = detect_available_runtimes(self.host)
        return select_runtime(docker_available, k8s_available, self.prompt_fn, self.console)

    def prepare_dependencies(self) -> None:
        """Run the preparation scripts in order from the playground directory."""
        output.info("Preparing packages...", self.console)

        for script in self.config.dependency_scripts:
            script_path = self.config.playground_dir / script

            if not self.host.is_file(script_path):
                raise DependencyPreparationFailed(
                    [str(script_path)], 127, "Dependency script not found"
                )

            result = self.host.run([str(script_path)], cwd=self.config.playground_dir, capture=False)
            if not result.ok:
                raise DependencyPreparationFailed([str(script_path)], result.returncode, result.output)

    # ------------------------------------------------------------------
    # status / stop
    # ------------------------------------------------------------------

    def detect(self) -> PlaygroundState:
        state = RuntimeDetector(self.host, self.config.project_name).detect()
        if not state.active:
            raise NotRunning(self.config.project_name)

        output.info(f"{self.config.project_name} is running in {_describe(state.kind)}", self.console)
        return state

    def status(self) -> PlaygroundState:
        state = self.detect()
        self.adapter(state.kind).query()
        return state

    def stop(self) -> PlaygroundState:
        state = self.detect()
        output.info("Stopping the playground...", self.console)
        self.adapter(state.kind).teardown()
        return state

    def adapter(self, kind: RuntimeKind) -> RuntimeAdapter:
        return get_adapter(kind, self.host, self.config, self.console)


def _describe(kind: RuntimeKind) -> str:
    names = {
        RuntimeKind.COMPOSE: "Docker",
        RuntimeKind.KUBERNETES: "Kubernetes",
    }
    return names[kind]
