"""Sorbet language server support: binary resolution and code labels.

Example:
    from sorbet_ext.lsp import Symbol, label_for_symbol
    from lsprotocol.types import SymbolKind

    label = label_for_symbol(Symbol(name="perform", kind=SymbolKind.Method))
    assert label.code == "def perform; end"
"""

from .binary import BINARY_NAME, DEFAULT_ARGUMENTS, first_of, resolve_arguments, resolve_binary
from .labels import COMPLETION_HIGHLIGHTS, SYMBOL_TEMPLATES, label_for_completion, label_for_symbol
from .types import CodeLabel, CodeLabelSpan, Command, Completion, Range, Symbol

__all__ = [
    "BINARY_NAME",
    "DEFAULT_ARGUMENTS",
    "COMPLETION_HIGHLIGHTS",
    "SYMBOL_TEMPLATES",
    "CodeLabel",
    "CodeLabelSpan",
    "Command",
    "Completion",
    "Range",
    "Symbol",
    "first_of",
    "label_for_completion",
    "label_for_symbol",
    "resolve_arguments",
    "resolve_binary",
]
