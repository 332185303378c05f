import pytest
from lsprotocol.types import CompletionItemKind, SymbolKind

from sorbet_ext.lsp.labels import (
    COMPLETION_HIGHLIGHTS,
    SYMBOL_TEMPLATES,
    label_for_completion,
    label_for_symbol,
)
from sorbet_ext.lsp.types import Completion, Range, Symbol


RENDERED_SYMBOL_KINDS = {SymbolKind.Method, SymbolKind.Class, SymbolKind.Module, SymbolKind.Constant}
RENDERED_COMPLETION_KINDS = {
    CompletionItemKind.Class,
    CompletionItemKind.Module,
    CompletionItemKind.Constant,
    CompletionItemKind.Method,
    CompletionItemKind.Reference,
    CompletionItemKind.Keyword,
}


@pytest.mark.parametrize("name", ["perform", "a", "valid?", "save!", "call_with_many_words"])
def test_method_symbol_renders_as_def(name: str) -> None:
    label = label_for_symbol(Symbol(name=name, kind=SymbolKind.Method))

    assert label is not None
    assert label.code == f"def {name}; end"
    assert [span.range for span in label.spans] == [Range.of(4, 4 + len(name))]
    assert label.filter_range == Range.of(0, len(name))
    assert label.text == name


@pytest.mark.parametrize("kind", [SymbolKind.Class, SymbolKind.Module])
def test_class_and_module_symbols_render_as_class(kind: SymbolKind) -> None:
    label = label_for_symbol(Symbol(name="Billing", kind=kind))

    assert label is not None
    assert label.code == "class Billing; end"
    assert label.spans[0].range == Range.of(6, 13)
    assert label.spans[0].highlight is None
    assert label.filter_range == Range.of(0, 7)
    assert label.text == "Billing"


@pytest.mark.parametrize("name", ["max_retries", "Timeout", "VERSION"])
def test_constant_symbol_is_upper_cased(name: str) -> None:
    label = label_for_symbol(Symbol(name=name, kind=SymbolKind.Constant))

    assert label is not None
    assert label.code == name.upper()
    assert label.spans[0].range == Range.of(0, len(name))
    assert label.filter_range == Range.of(0, len(name))


def test_symbol_ranges_are_utf8_byte_offsets() -> None:
    label = label_for_symbol(Symbol(name="café", kind=SymbolKind.Method))

    assert label is not None
    assert label.spans[0].range == Range.of(4, 9)
    assert label.filter_range == Range.of(0, 5)
    assert label.text == "café"


@pytest.mark.parametrize("kind", sorted(set(SymbolKind) - RENDERED_SYMBOL_KINDS))
def test_other_symbol_kinds_have_no_label(kind: SymbolKind) -> None:
    assert label_for_symbol(Symbol(name="thing", kind=kind)) is None


def test_symbol_table_covers_exactly_rendered_kinds() -> None:
    assert set(SYMBOL_TEMPLATES) == RENDERED_SYMBOL_KINDS


@pytest.mark.parametrize(
    ("kind", "highlight"),
    [
        (CompletionItemKind.Class, "type"),
        (CompletionItemKind.Module, "type"),
        (CompletionItemKind.Constant, "constant"),
        (CompletionItemKind.Method, "function.method"),
        (CompletionItemKind.Reference, "function.method"),
        (CompletionItemKind.Keyword, "keyword"),
    ],
)
def test_completion_highlight_by_kind(kind: CompletionItemKind, highlight: str) -> None:
    label = label_for_completion(Completion(label="each_slice", kind=kind))

    assert label is not None
    assert label.code == ""
    assert len(label.spans) == 1
    assert label.spans[0].highlight == highlight
    assert label.spans[0].text == "each_slice"
    assert label.spans[0].range == Range.of(0, 10)
    assert label.filter_range == Range.of(0, 10)


def test_keyword_completion() -> None:
    label = label_for_completion(Completion(label="foo", kind=CompletionItemKind.Keyword))

    assert label is not None
    assert label.code == ""
    assert [(span.range, span.highlight) for span in label.spans] == [(Range.of(0, 3), "keyword")]
    assert label.filter_range == Range.of(0, 3)
    assert label.text == "foo"


def test_completion_without_kind_has_no_label() -> None:
    assert label_for_completion(Completion(label="foo")) is None


@pytest.mark.parametrize("kind", sorted(set(CompletionItemKind) - RENDERED_COMPLETION_KINDS))
def test_other_completion_kinds_have_no_label(kind: CompletionItemKind) -> None:
    assert label_for_completion(Completion(label="foo", kind=kind)) is None


def test_completion_table_covers_exactly_rendered_kinds() -> None:
    assert set(COMPLETION_HIGHLIGHTS) == RENDERED_COMPLETION_KINDS


def test_labels_are_deterministic() -> None:
    symbol = Symbol(name="Invoice", kind=SymbolKind.Class)
    completion = Completion(label="Invoice", kind=CompletionItemKind.Class)

    assert label_for_symbol(symbol).model_dump_json() == label_for_symbol(symbol).model_dump_json()
    assert label_for_completion(completion).model_dump_json() == label_for_completion(completion).model_dump_json()


def test_raw_lsp_kinds_are_accepted() -> None:
    symbol = Symbol.model_validate({"name": "run", "kind": 6})
    completion = Completion.model_validate({"label": "end", "kind": 14})

    assert label_for_symbol(symbol).code == "def run; end"
    assert label_for_completion(completion).spans[0].highlight == "keyword"


def test_unknown_lsp_kinds_are_kept_as_ints_and_have_no_label() -> None:
    symbol = Symbol.model_validate({"name": "x", "kind": 99})
    completion = Completion.model_validate({"label": "x", "kind": 99})

    assert symbol.kind == 99
    assert not isinstance(symbol.kind, SymbolKind)
    assert completion.kind == 99
    assert not isinstance(completion.kind, CompletionItemKind)
    assert label_for_symbol(symbol) is None
    assert label_for_completion(completion) is None


def test_constant_length_is_measured_after_upper_casing() -> None:
    # "ﬁ" is 3 bytes in UTF-8 and upper-cases to "FI", 2 bytes
    label = label_for_symbol(Symbol(name="ﬁ", kind=SymbolKind.Constant))

    assert label is not None
    assert label.code == "FI"
    assert label.spans[0].range == Range.of(0, 2)
    assert label.filter_range == Range.of(0, 2)
    assert label.text == "FI"
