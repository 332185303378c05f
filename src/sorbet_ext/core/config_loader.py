"""Settings file loading utilities — JSONC parsing, env substitution, deep merge."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import commentjson

from ..util.log import Log

log = Log.create({"service": "config.loader"})


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries; values from ``override`` win."""
    result = dict(base)
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def substitute_env_vars(text: str, env: Optional[Mapping[str, str]] = None) -> str:
    """Replace ``{env:VAR}`` patterns with environment variable values."""
    source = os.environ if env is None else env

    def replacer(match: re.Match[str]) -> str:
        return source.get(match.group(1), "")

    return re.sub(r"\{env:([^}]+)\}", replacer, text)


def load_json_file(filepath: str, env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Load a JSON or JSONC file, returning ``{}`` on any I/O or parse error."""
    path = Path(filepath)
    if not path.exists():
        return {}

    try:
        text = substitute_env_vars(path.read_text(encoding="utf-8"), env)
        data = commentjson.loads(text) if text.strip() else {}
    except (OSError, ValueError, UnicodeDecodeError) as e:
        log.error("failed to load settings file", {"path": filepath, "error": str(e)})
        return {}

    if not isinstance(data, dict):
        log.error("settings file is not an object", {"path": filepath})
        return {}
    return data
