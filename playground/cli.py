"""
Command-line interface for the Gravitino playground.

Starts, inspects and stops the playground on Docker compose or
Kubernetes.
"""

import sys
from typing import Callable, List, Optional

import click
from rich.prompt import Prompt

from . import __version__, output
from .config import ConfigLoader, RuntimeKind
from .errors import InvalidUsage, NotRunning, PlaygroundError
from .lifecycle import LifecycleController
from .runtime.selector import PROMPT_TEXT

console = output.console

PROG_NAME = "playground"


def _ask_runtime() -> str:
    try:
        return Prompt.ask(PROMPT_TEXT, default="", show_default=False, console=console)
    except EOFError:
        # End of input answers like an empty line
        return ""


def _controller(ctx: click.Context) -> LifecycleController:
    obj = ctx.obj
    try:
        config = ConfigLoader(obj.get("config_path"), obj.get("playground_dir")).load()
    except PlaygroundError as e:
        _fail(e)

    return LifecycleController(
        config,
        host=obj.get("host"),
        prompt_fn=obj.get("prompt_fn") or _ask_runtime,
    )


def _fail(e: PlaygroundError) -> None:
    if isinstance(e, NotRunning):
        output.info(str(e))
    else:
        output.error(str(e))
    sys.exit(e.exit_code)


def _invoke(action: Callable[[], object]) -> None:
    try:
        action()
    except PlaygroundError as e:
        _fail(e)


# ============================================================
# Main CLI Group
# ============================================================

@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.option(
    "--dir",
    "-d",
    "playground_dir",
    type=click.Path(exists=True, file_okay=False),
    envvar="PLAYGROUND_DIR",
    help="Playground directory (compose file, helm chart, init scripts)",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    help="YAML configuration file",
)
@click.pass_context
def cli(ctx, playground_dir: Optional[str], config_path: Optional[str]):
    """
    Gravitino Playground

    Run the playground on Docker compose or Kubernetes.
    """
    ctx.ensure_object(dict)
    ctx.obj.setdefault("playground_dir", playground_dir)
    ctx.obj.setdefault("config_path", config_path)

    if ctx.invoked_subcommand is None:
        click.echo(f"Usage: {PROG_NAME} [start|status|stop]")
        ctx.exit(InvalidUsage.exit_code)


# ============================================================
# Commands
# ============================================================

@cli.command()
@click.option("--skip-checks", "-s", is_flag=True, help="Skip all pre-flight checks")
@click.option(
    "--runtime",
    "-r",
    type=click.Choice([kind.value for kind in RuntimeKind]),
    help="Runtime to use instead of detecting one",
)
@click.pass_context
def start(ctx, skip_checks: bool, runtime: Optional[str]):
    """Check the environment and launch the playground."""
    controller = _controller(ctx)
    kind = RuntimeKind(runtime) if runtime else None
    _invoke(lambda: controller.start(skip_checks=skip_checks, runtime=kind))


@cli.command()
@click.pass_context
def status(ctx):
    """Show the status of the running playground."""
    controller = _controller(ctx)
    _invoke(controller.status)


@cli.command()
@click.pass_context
def stop(ctx):
    """Stop the running playground."""
    controller = _controller(ctx)
    _invoke(controller.stop)


# ============================================================
# Entry Point
# ============================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Console entry point; invalid usage exits with 1 like every other failure."""
    try:
        exit_code = cli.main(args=argv, prog_name=PROG_NAME, standalone_mode=False)
    except click.UsageError as e:
        e.show()
        sys.exit(InvalidUsage.exit_code)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        console.print("[red]Aborted.[/red]")
        sys.exit(1)

    sys.exit(exit_code if isinstance(exit_code, int) else 0)


if __name__ == "__main__":
    main()
