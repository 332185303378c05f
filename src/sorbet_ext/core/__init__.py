"""Core infrastructure modules."""

from .global_paths import GlobalPath
from .config_schema import BinarySettings, LspSettings, Settings

__all__ = ["GlobalPath", "BinarySettings", "LspSettings", "Settings"]

# Settings loading depends on util.log; import it from .config directly
# to avoid circular imports:
# from sorbet_ext.core.config import load_settings
