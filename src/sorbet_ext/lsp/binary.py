"""Sorbet language server binary resolution.

The command is resolved in priority order, first match wins:

1. ``binary.path`` from the worktree's settings for the server
2. ``srb`` found on the worktree's ``PATH``

Arguments come from ``binary.arguments`` when configured, otherwise from
``DEFAULT_ARGUMENTS``, whichever path source wins.
"""

from __future__ import annotations

from typing import Callable, List, Optional, TypeVar

from ..core.config_schema import BinarySettings
from ..errors import BinaryNotFoundError
from ..host.worktree import Worktree
from ..util.log import Log
from .types import Command

log = Log.create({"service": "lsp.binary"})

T = TypeVar("T")

BINARY_NAME = "srb"
DEFAULT_ARGUMENTS = ("tc", "--lsp", "--enable-experimental-lsp-document-highlight")
INSTALL_HINT = "srb gem must be installed manually. Install it with `gem install sorbet`."


def first_of(*candidates: Callable[[], Optional[T]]) -> Optional[T]:
    """Return the first non-None result of ``candidates``, called in order.

    Later candidates are not called once one succeeds.
    """
    for candidate in candidates:
        value = candidate()
        if value is not None:
            return value
    return None


def _binary_settings(server_id: str, worktree: Worktree) -> Optional[BinarySettings]:
    settings = worktree.lookup_lsp_settings(server_id)
    if settings is None:
        log.debug("no settings for server", {"server_id": server_id, "root": worktree.root_path()})
        return None
    return settings.binary


def _configured_arguments(binary: Optional[BinarySettings]) -> Optional[List[str]]:
    if binary is None or binary.arguments is None:
        return None
    return list(binary.arguments)


def _configured_path(binary: Optional[BinarySettings]) -> Optional[str]:
    if binary is None:
        return None
    return binary.path or None


def resolve_arguments(binary: Optional[BinarySettings]) -> List[str]:
    """Configured launch arguments verbatim, else the built-in defaults."""
    return first_of(
        lambda: _configured_arguments(binary),
        lambda: list(DEFAULT_ARGUMENTS),
    )


def resolve_binary(server_id: str, worktree: Worktree) -> Command:
    """Resolve the command used to launch ``server_id`` in ``worktree``.

    Raises:
        BinaryNotFoundError: No path is configured and ``srb`` is not on
            the worktree's ``PATH``.
    """
    binary = _binary_settings(server_id, worktree)
    arguments = resolve_arguments(binary)

    path = first_of(
        lambda: _configured_path(binary),
        lambda: worktree.which(BINARY_NAME) or None,
    )
    if path is None:
        log.warn(
            "language server binary not found",
            {"server_id": server_id, "binary": BINARY_NAME, "root": worktree.root_path()},
        )
        raise BinaryNotFoundError(BINARY_NAME, INSTALL_HINT)

    log.info("resolved language server binary", {"server_id": server_id, "path": path, "args": arguments})
    return Command(command=path, args=arguments, env=dict(worktree.shell_env()))
