"""Extension contract and the Sorbet extension.

The host looks an extension up by name, instantiates it, and calls its
entry points as it needs them: once per server start for the command and
options, once per item for symbol and completion labels. ``SorbetExtension``
holds no state, so entry points may be called from any thread.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from .host.worktree import Worktree
from .lsp.binary import resolve_binary
from .lsp.labels import label_for_completion, label_for_symbol
from .lsp.types import CodeLabel, Command, Completion, Symbol

E = TypeVar("E", bound="Extension")

_REGISTRY: Dict[str, Type["Extension"]] = {}


class Extension(ABC):
    """Entry points an extension exposes to the host."""

    @abstractmethod
    def language_server_command(self, language_server_id: str, worktree: Worktree) -> Command:
        """Return the command that launches the language server.

        Raises:
            ExtensionError: The server cannot be launched; the message is
                shown to the user.
        """

    def language_server_initialization_options(
        self,
        language_server_id: str,
        worktree: Worktree,
    ) -> Optional[Any]:
        return None

    def language_server_workspace_configuration(
        self,
        language_server_id: str,
        worktree: Worktree,
    ) -> Optional[Any]:
        return None

    def label_for_symbol(self, language_server_id: str, symbol: Symbol) -> Optional[CodeLabel]:
        return None

    def label_for_completion(self, language_server_id: str, completion: Completion) -> Optional[CodeLabel]:
        return None


def register_extension(name: str) -> Callable[[Type[E]], Type[E]]:
    """Class decorator registering an extension under ``name``."""

    def decorator(cls: Type[E]) -> Type[E]:
        existing = _REGISTRY.get(name)
        if existing is not None and existing is not cls:
            raise ValueError(f"extension {name!r} is already registered by {existing.__qualname__}")
        _REGISTRY[name] = cls
        return cls

    return decorator


def load_extension(name: str) -> Extension:
    """Instantiate the extension registered under ``name``."""
    cls = _REGISTRY.get(name)
    if cls is None:
        raise KeyError(f"no extension registered as {name!r}")
    return cls()


def registered_extensions() -> list[str]:
    return sorted(_REGISTRY)


@register_extension("sorbet")
class SorbetExtension(Extension):
    """Launches and configures the Sorbet (``srb tc --lsp``) language server."""

    def language_server_command(self, language_server_id: str, worktree: Worktree) -> Command:
        return resolve_binary(language_server_id, worktree)

    def language_server_initialization_options(
        self,
        language_server_id: str,
        worktree: Worktree,
    ) -> Optional[Any]:
        settings = worktree.lookup_lsp_settings(language_server_id)
        if settings is None:
            return None
        return copy.deepcopy(settings.initialization_options)

    def language_server_workspace_configuration(
        self,
        language_server_id: str,
        worktree: Worktree,
    ) -> Optional[Any]:
        settings = worktree.lookup_lsp_settings(language_server_id)
        if settings is None:
            return None
        return copy.deepcopy(settings.settings)

    def label_for_symbol(self, language_server_id: str, symbol: Symbol) -> Optional[CodeLabel]:
        return label_for_symbol(symbol)

    def label_for_completion(self, language_server_id: str, completion: Completion) -> Optional[CodeLabel]:
        return label_for_completion(completion)
