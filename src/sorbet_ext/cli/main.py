"""CLI entry point for sorbet-ext.

The CLI drives the extension the way an editor would, against a local
worktree, which makes it easy to check what command and options a project
will get and how labels will look.
"""

from typing import Optional

import typer
from rich.console import Console

from .. import __version__
from ..util.log import Log, LogFormat, LogLevel
from .cmd import label as label_cmd
from .cmd.server import (
    DEFAULT_EXTENSION,
    DEFAULT_SERVER_ID,
    command_command,
    init_options_command,
    workspace_config_command,
)

app = typer.Typer(
    name="sorbet-ext",
    help="sorbet-ext - Sorbet language server integration",
    no_args_is_help=True,
    add_completion=False,
)
app.add_typer(label_cmd.app, name="label", help="Preview code labels for symbols and completions")

console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"sorbet-ext {__version__}")
        raise typer.Exit()


def _parse_option(parse, value: Optional[str], param_hint: str):
    try:
        return parse(value)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint=param_hint) from e


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Minimum log level: debug, info, warn or error",
    ),
    log_format: Optional[str] = typer.Option(
        None,
        "--log-format",
        help="Log line format: kv, json or pretty",
    ),
    print_logs: bool = typer.Option(
        False,
        "--print-logs",
        help="Write logs to stderr",
    ),
    log_file: bool = typer.Option(
        False,
        "--log-file",
        help="Write logs to a timestamped file in the user log directory",
    ),
):
    """sorbet-ext - Sorbet language server integration."""
    Log.configure(
        level=_parse_option(LogLevel.parse, log_level, "--log-level"),
        format=_parse_option(LogFormat.parse, log_format, "--log-format"),
        console=print_logs,
        file=log_file,
    )


@app.command("command")
def command(
    root: str = typer.Argument(".", help="Worktree root"),
    server_id: str = typer.Option(DEFAULT_SERVER_ID, "--server-id", help="Language server id"),
    extension: str = typer.Option(DEFAULT_EXTENSION, "--extension", help="Registered extension name"),
):
    """Print the command that launches the language server."""
    command_command(root, server_id, extension)


@app.command("init-options")
def init_options(
    root: str = typer.Argument(".", help="Worktree root"),
    server_id: str = typer.Option(DEFAULT_SERVER_ID, "--server-id", help="Language server id"),
    extension: str = typer.Option(DEFAULT_EXTENSION, "--extension", help="Registered extension name"),
):
    """Print the initialization options sent to the language server."""
    init_options_command(root, server_id, extension)


@app.command("workspace-config")
def workspace_config(
    root: str = typer.Argument(".", help="Worktree root"),
    server_id: str = typer.Option(DEFAULT_SERVER_ID, "--server-id", help="Language server id"),
    extension: str = typer.Option(DEFAULT_EXTENSION, "--extension", help="Registered extension name"),
):
    """Print the workspace configuration sent to the language server."""
    workspace_config_command(root, server_id, extension)


if __name__ == "__main__":
    app()
