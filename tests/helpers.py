"""Shared test helpers."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sorbet_ext.core.config_schema import LspSettings


class FakeWorktree:
    """In-memory worktree that records executable lookups."""

    def __init__(
        self,
        settings: Optional[Dict[str, Any]] = None,
        executables: Optional[Dict[str, str]] = None,
        env: Optional[Dict[str, str]] = None,
        root: str = "/work/project",
    ) -> None:
        self._settings = {
            server_id: LspSettings.model_validate(value)
            for server_id, value in (settings or {}).items()
        }
        self._executables = executables or {}
        self._env = env if env is not None else {"PATH": "/usr/bin", "HOME": "/home/dev"}
        self._root = root
        self.which_calls: List[str] = []

    def root_path(self) -> str:
        return self._root

    def lookup_lsp_settings(self, server_id: str) -> Optional[LspSettings]:
        return self._settings.get(server_id)

    def which(self, name: str) -> Optional[str]:
        self.which_calls.append(name)
        return self._executables.get(name)

    def shell_env(self) -> Dict[str, str]:
        return dict(self._env)
