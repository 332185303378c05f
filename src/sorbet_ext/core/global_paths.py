"""User-level directories for sorbet-ext.

Config and log locations follow the platform conventions reported by
platformdirs. Nothing is created on import; callers that write create the
directory they need.
"""

import os
from pathlib import Path

from platformdirs import user_config_dir, user_log_dir

APP_NAME = "sorbet-ext"
SETTINGS_FILE = "settings.json"


class GlobalPath:
    """Global path lookup for sorbet-ext directories."""

    @classmethod
    def config(cls) -> str:
        """Configuration directory, overridable with SORBET_EXT_CONFIG_DIR."""
        override = os.environ.get("SORBET_EXT_CONFIG_DIR")
        if override:
            return override
        return user_config_dir(APP_NAME)

    @classmethod
    def settings(cls) -> str:
        """Path of the global settings file."""
        return str(Path(cls.config()) / SETTINGS_FILE)

    @classmethod
    def log(cls) -> str:
        """Log file directory."""
        return user_log_dir(APP_NAME)
