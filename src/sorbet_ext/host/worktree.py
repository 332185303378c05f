"""Worktree capability consumed by the extension.

A worktree is the host's view of a project root: it answers settings
lookups, searches its ``PATH`` for executables and exposes the shell
environment a language server should inherit.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Dict, Mapping, Optional, Protocol, runtime_checkable

from ..core.config import load_settings, lsp_settings_for
from ..core.config_schema import LspSettings, Settings


@runtime_checkable
class Worktree(Protocol):
    """Host-provided project root capability."""

    def root_path(self) -> str: ...

    def lookup_lsp_settings(self, server_id: str) -> Optional[LspSettings]: ...

    def which(self, name: str) -> Optional[str]: ...

    def shell_env(self) -> Dict[str, str]: ...


class LocalWorktree:
    """Worktree backed by the local filesystem and a fixed environment.

    Settings files are read on every lookup, so edits apply to the next
    server start without recreating the worktree.
    """

    def __init__(self, root: str, env: Optional[Mapping[str, str]] = None):
        self.root = str(Path(root).resolve())
        self._env = dict(os.environ if env is None else env)

    def root_path(self) -> str:
        return self.root

    def settings(self) -> Settings:
        return load_settings(self.root, self._env)

    def lookup_lsp_settings(self, server_id: str) -> Optional[LspSettings]:
        return lsp_settings_for(self.settings(), server_id)

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name, path=self._env.get("PATH", ""))

    def shell_env(self) -> Dict[str, str]:
        return dict(self._env)
