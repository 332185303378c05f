"""User-facing extension errors."""

from __future__ import annotations


class ExtensionError(Exception):
    """A failure the host should surface to the user as a message."""


class BinaryNotFoundError(ExtensionError):
    """Raised when no language server executable can be located."""

    def __init__(self, binary: str, hint: str):
        self.binary = binary
        self.hint = hint
        super().__init__(hint)
