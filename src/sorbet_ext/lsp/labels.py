"""Code labels for Sorbet symbols and completions.

Symbols are rendered as a fragment of Ruby declaration syntax so the host
highlights them like source code. Only the name is shown; the surrounding
``def``/``class`` keywords exist to give the highlighter context.
Completions keep their own label text and are coloured by kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from lsprotocol.types import CompletionItemKind, SymbolKind

from .types import CodeLabel, CodeLabelSpan, Completion, Range, Symbol, byte_len


def _identity(name: str) -> str:
    return name


@dataclass(frozen=True)
class SymbolTemplate:
    """Declaration snippet wrapped around a symbol name."""
    prefix: str = ""
    suffix: str = ""
    transform: Callable[[str], str] = _identity

    def render(self, name: str) -> CodeLabel:
        shown = self.transform(name)
        start = byte_len(self.prefix)
        length = byte_len(shown)
        return CodeLabel(
            code=f"{self.prefix}{shown}{self.suffix}",
            spans=[CodeLabelSpan.code_range(Range.of(start, start + length))],
            filter_range=Range.of(0, length),
        )


_DEF = SymbolTemplate(prefix="def ", suffix="; end")
_CLASS = SymbolTemplate(prefix="class ", suffix="; end")

SYMBOL_TEMPLATES: Dict[SymbolKind, SymbolTemplate] = {
    SymbolKind.Method: _DEF,
    SymbolKind.Class: _CLASS,
    SymbolKind.Module: _CLASS,
    # constants are shown upper-cased regardless of how the server spelled them
    SymbolKind.Constant: SymbolTemplate(transform=str.upper),
}

COMPLETION_HIGHLIGHTS: Dict[CompletionItemKind, str] = {
    CompletionItemKind.Class: "type",
    CompletionItemKind.Module: "type",
    CompletionItemKind.Constant: "constant",
    CompletionItemKind.Method: "function.method",
    CompletionItemKind.Reference: "function.method",
    CompletionItemKind.Keyword: "keyword",
}


def label_for_symbol(symbol: Symbol) -> Optional[CodeLabel]:
    """Render ``symbol``, or return None when its kind has no template."""
    template = SYMBOL_TEMPLATES.get(symbol.kind)
    if template is None:
        return None
    return template.render(symbol.name)


def label_for_completion(completion: Completion) -> Optional[CodeLabel]:
    """Render ``completion`` as its own label text tagged by kind.

    Returns None for items without a kind or with an unmapped kind, leaving
    the host to its default rendering.
    """
    if completion.kind is None:
        return None
    highlight = COMPLETION_HIGHLIGHTS.get(completion.kind)
    if highlight is None:
        return None

    return CodeLabel(
        code="",
        spans=[CodeLabelSpan.literal(completion.label, highlight)],
        filter_range=Range.of(0, byte_len(completion.label)),
    )
