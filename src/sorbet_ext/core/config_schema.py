"""Settings schema — Pydantic models for language server settings.

The shape mirrors the editor's per-server settings block::

    {
      "lsp": {
        "sorbet": {
          "binary": {"path": "/opt/bin/srb", "arguments": ["tc", "--lsp"]},
          "initialization_options": {"highlightUntyped": true},
          "settings": {}
        }
      }
    }
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class BinarySettings(BaseModel):
    """Overrides for locating and launching the server executable."""
    path: Optional[str] = None
    arguments: Optional[List[str]] = None

    model_config = ConfigDict(extra="allow", frozen=True)


class LspSettings(BaseModel):
    """Settings for a single language server."""
    binary: Optional[BinarySettings] = None
    initialization_options: Optional[Any] = Field(
        None,
        validation_alias=AliasChoices("initialization_options", "initializationOptions"),
    )
    settings: Optional[Any] = None

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)


class Settings(BaseModel):
    """Top-level settings document."""
    lsp: Dict[str, LspSettings] = Field(default_factory=dict)

    model_config = ConfigDict(extra="allow", frozen=True)
