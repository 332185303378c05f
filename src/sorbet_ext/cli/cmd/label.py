"""Label commands: preview how symbols and completions are rendered."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar, Union

import typer
from lsprotocol.types import CompletionItemKind, SymbolKind

from ...lsp.types import Completion, Symbol
from .server import DEFAULT_EXTENSION, DEFAULT_SERVER_ID, echo_json, get_extension

app = typer.Typer(help="Preview code labels for symbols and completions")

K = TypeVar("K", bound=Enum)


def parse_kind(enum_cls: Type[K], value: str) -> Union[K, int]:
    """Parse an LSP kind given by name (any case) or integer value.

    Integers outside the enumeration are kept as plain ints, the way a
    server payload carrying a newer kind is.
    """
    text = value.strip()
    if text.isdigit():
        number = int(text)
        try:
            return enum_cls(number)
        except ValueError:
            return number

    wanted = text.replace("_", "").replace("-", "").lower()
    for member in enum_cls:
        if member.name.lower() == wanted:
            return member
    raise typer.BadParameter(f"unknown {enum_cls.__name__}: {value}")


def _echo_label(label) -> None:
    if label is None:
        echo_json(None)
        return
    echo_json({**label.model_dump(mode="json"), "text": label.text})


@app.command("symbol")
def symbol_command(
    name: str = typer.Argument(..., help="Symbol name"),
    kind: str = typer.Option(..., "--kind", "-k", help="LSP SymbolKind name or number"),
    server_id: str = typer.Option(DEFAULT_SERVER_ID, "--server-id", help="Language server id"),
    extension: str = typer.Option(DEFAULT_EXTENSION, "--extension", help="Registered extension name"),
) -> None:
    """Render the label for a symbol."""
    symbol = Symbol(name=name, kind=parse_kind(SymbolKind, kind))
    _echo_label(get_extension(extension).label_for_symbol(server_id, symbol))


@app.command("completion")
def completion_command(
    label: str = typer.Argument(..., help="Completion label text"),
    kind: Optional[str] = typer.Option(None, "--kind", "-k", help="LSP CompletionItemKind name or number"),
    server_id: str = typer.Option(DEFAULT_SERVER_ID, "--server-id", help="Language server id"),
    extension: str = typer.Option(DEFAULT_EXTENSION, "--extension", help="Registered extension name"),
) -> None:
    """Render the label for a completion item."""
    completion = Completion(
        label=label,
        kind=parse_kind(CompletionItemKind, kind) if kind is not None else None,
    )
    _echo_label(get_extension(extension).label_for_completion(server_id, completion))
