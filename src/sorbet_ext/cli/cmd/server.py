"""Language server commands: resolve the launch command and its options."""

from __future__ import annotations

import json
from typing import Any, Callable, NoReturn

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

from ...extension import Extension, load_extension, registered_extensions
from ...host import LocalWorktree, invoke
from ...util.error import format_unknown_error
from ...util.log import Log

log = Log.create({"service": "cli"})

err_console = Console(stderr=True)

DEFAULT_EXTENSION = "sorbet"
DEFAULT_SERVER_ID = "sorbet"


def _json_default(value: object) -> object:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False, default=_json_default))


def fail(message: str) -> NoReturn:
    """Print an error (and where the logs went) and exit with status 1."""
    err_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)
    if Log.file():
        err_console.print(f"[dim]Logs: {escape(Log.file())}[/dim]", highlight=False, soft_wrap=True)
    raise typer.Exit(1)


def run_entry_point(entry_point: Callable[..., Any], *args: Any) -> None:
    """Invoke an entry point, print its value as JSON, or fail with its error."""
    try:
        outcome = invoke(entry_point, *args)
    except Exception as e:
        log.error("entry point crashed", {"error": format_unknown_error(e)})
        fail(f"unexpected {type(e).__name__}: {e}")
    if not outcome.ok:
        fail(outcome.error or "")
    echo_json(outcome.value)


def get_extension(name: str) -> Extension:
    try:
        return load_extension(name)
    except KeyError as e:
        available = ", ".join(registered_extensions())
        raise typer.BadParameter(f"{e.args[0]} (available: {available})", param_hint="--extension") from e


def command_command(root: str, server_id: str, extension: str) -> None:
    ext = get_extension(extension)
    run_entry_point(ext.language_server_command, server_id, LocalWorktree(root))


def init_options_command(root: str, server_id: str, extension: str) -> None:
    ext = get_extension(extension)
    run_entry_point(ext.language_server_initialization_options, server_id, LocalWorktree(root))


def workspace_config_command(root: str, server_id: str, extension: str) -> None:
    ext = get_extension(extension)
    run_entry_point(ext.language_server_workspace_configuration, server_id, LocalWorktree(root))
