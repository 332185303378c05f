"""Layered settings lookup for a worktree.

Global settings (``GlobalPath.settings()``) are overridden by the worktree's
own ``.zed/settings.json``. Invalid documents degrade to "no settings" so a
broken file never blocks the language server from starting with defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

from pydantic import ValidationError

from ..util.error import format_error
from ..util.log import Log
from .config_loader import deep_merge, load_json_file
from .config_schema import LspSettings, Settings
from .global_paths import GlobalPath

log = Log.create({"service": "config"})

PROJECT_SETTINGS = Path(".zed") / "settings.json"


def settings_files(root: str) -> list[str]:
    """Settings files for ``root`` in increasing order of precedence."""
    return [GlobalPath.settings(), str(Path(root) / PROJECT_SETTINGS)]


def load_settings(root: str, env: Optional[Mapping[str, str]] = None) -> Settings:
    """Load and validate the merged settings for a worktree root."""
    merged: dict = {}
    for path in settings_files(root):
        merged = deep_merge(merged, load_json_file(path, env))

    try:
        return Settings.model_validate(merged)
    except ValidationError as e:
        log.warn("ignoring invalid settings", {"root": root, "error": format_error(e)})
        return Settings()


def lsp_settings_for(settings: Settings, server_id: str) -> Optional[LspSettings]:
    """Return the settings block for ``server_id``, if one is configured."""
    return settings.lsp.get(server_id)
