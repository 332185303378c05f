"""sorbet-ext - Sorbet language server integration for code editors.

Locates and configures the ``srb tc --lsp`` language server and renders
the symbols and completions it returns as editor code labels.
"""

__version__ = "0.1.0"

# Lazy imports to avoid circular dependencies
def __getattr__(name: str):
    """Lazy import module components."""
    if name in ("Extension", "SorbetExtension", "load_extension", "register_extension"):
        from . import extension
        return getattr(extension, name)
    if name in ("LocalWorktree", "Worktree", "Outcome", "invoke"):
        from . import host
        return getattr(host, name)
    if name in ("CodeLabel", "CodeLabelSpan", "Command", "Completion", "Range", "Symbol"):
        from .lsp import types
        return getattr(types, name)
    if name in ("ExtensionError", "BinaryNotFoundError"):
        from . import errors
        return getattr(errors, name)
    if name == "Log":
        from .util.log import Log
        return Log
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",
    # Extension
    "Extension",
    "SorbetExtension",
    "load_extension",
    "register_extension",
    # Host
    "LocalWorktree",
    "Worktree",
    "Outcome",
    "invoke",
    # Types
    "CodeLabel",
    "CodeLabelSpan",
    "Command",
    "Completion",
    "Range",
    "Symbol",
    # Errors
    "ExtensionError",
    "BinaryNotFoundError",
    # Logging
    "Log",
]
