"""CLI commands for randomorg.

Single entry point: registers the generate commands (integers, strings,
gaussians, uuids, sequences) and the config group.
"""

import typer
from rich.console import Console

from randomorg import __logo__, __version__
from randomorg.cli.command_groups.config_commands import register_config_commands
from randomorg.cli.command_groups.generate_commands import register_generate_commands
from randomorg.cli.shared.logging_utils import configure_console_logging, ensure_rotating_log_file
from randomorg.config.loader import get_config

app = typer.Typer(
    name="randomorg",
    help=f"{__logo__} randomorg - true random numbers from the command line",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} randomorg v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log RPC traffic to stderr"),
):
    """randomorg - validated client for the random.org JSON-RPC API."""
    cfg = get_config()
    configure_console_logging("DEBUG" if verbose else "WARNING")
    if cfg.log.file_enabled:
        ensure_rotating_log_file("randomorg", level=cfg.log.level)


register_generate_commands(app=app, console=console)
register_config_commands(app=app, console=console)


if __name__ == "__main__":
    app()
