"""Data exchanged between the host and the extension.

Symbols and completions arrive from the language server; commands and code
labels are handed back to the host. Every model is frozen: the host owns
the values it passes in and receives fresh ones back.

Offsets in ``Range`` are UTF-8 byte offsets, matching how the host slices
label text.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from lsprotocol.types import CompletionItemKind, SymbolKind
from pydantic import BaseModel, ConfigDict, Field, model_validator


def byte_len(text: str) -> int:
    """Length of ``text`` in UTF-8 bytes."""
    return len(text.encode("utf-8"))


class Range(BaseModel):
    """Half-open byte range ``[start, end)``."""
    start: int = Field(ge=0)
    end: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _ordered(self) -> "Range":
        if self.start > self.end:
            raise ValueError(f"range start {self.start} is after end {self.end}")
        return self

    @classmethod
    def of(cls, start: int, end: int) -> "Range":
        return cls(start=start, end=end)

    def __len__(self) -> int:
        return self.end - self.start

    def fits(self, text: str) -> bool:
        """Whether the range lies within ``text``."""
        return self.end <= byte_len(text)

    def slice(self, text: str) -> str:
        return text.encode("utf-8")[self.start:self.end].decode("utf-8", errors="replace")


class Symbol(BaseModel):
    """A workspace or document symbol reported by the server.

    Attributes:
        name: Symbol name
        kind: LSP symbol kind; kinds newer than lsprotocol stay plain ints
    """
    name: str
    kind: Union[SymbolKind, int] = Field(union_mode="left_to_right")

    model_config = ConfigDict(frozen=True)


class Completion(BaseModel):
    """A completion item reported by the server.

    Attributes:
        label: Text the item inserts and displays
        kind: LSP completion item kind, when the server sent one; unknown
            kinds stay plain ints
        detail: Extra detail text
    """
    label: str
    kind: Optional[Union[CompletionItemKind, int]] = Field(None, union_mode="left_to_right")
    detail: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class Command(BaseModel):
    """A fully resolved language server launch command."""
    command: str
    args: List[str] = Field(default_factory=list)
    env: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class CodeLabelSpan(BaseModel):
    """One piece of a rendered label.

    A code span selects ``range`` from the label's code and is highlighted
    with the host's syntax highlighting, or with ``highlight`` when set. A
    literal span carries its own ``text``; ``range`` then covers that text.
    """
    range: Range
    highlight: Optional[str] = None
    text: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def code_range(cls, range: Range, highlight: Optional[str] = None) -> "CodeLabelSpan":
        return cls(range=range, highlight=highlight)

    @classmethod
    def literal(cls, text: str, highlight: Optional[str] = None) -> "CodeLabelSpan":
        return cls(range=Range.of(0, byte_len(text)), highlight=highlight, text=text)

    @property
    def is_literal(self) -> bool:
        return self.text is not None

    def render(self, code: str) -> str:
        if self.is_literal:
            return self.text
        return self.range.slice(code)


class CodeLabel(BaseModel):
    """A presentation label for a symbol or completion.

    Attributes:
        code: Synthesized source text the host highlights
        spans: Pieces that make up the visible label, in order
        filter_range: Part of the visible label used for fuzzy matching
    """
    code: str = ""
    spans: List[CodeLabelSpan] = Field(default_factory=list)
    filter_range: Range

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _ranges_fit(self) -> "CodeLabel":
        for span in self.spans:
            if span.is_literal:
                if span.range != Range.of(0, byte_len(span.text)):
                    raise ValueError(f"literal span range {span.range} does not cover its text")
            elif not span.range.fits(self.code):
                raise ValueError(f"span range {span.range} is outside the label code")
        if not self.filter_range.fits(self.text):
            raise ValueError(f"filter range {self.filter_range} is outside the label text")
        return self

    @property
    def text(self) -> str:
        """The visible label: every span's text, concatenated."""
        return "".join(span.render(self.code) for span in self.spans)
