from pydantic import ValidationError

from sorbet_ext.core.config_schema import Settings
from sorbet_ext.errors import BinaryNotFoundError
from sorbet_ext.util.error import format_error, format_unknown_error


def test_format_error_extension_error() -> None:
    error = BinaryNotFoundError("srb", "install srb first")

    assert format_error(error) == "install srb first"


def test_format_error_validation_error() -> None:
    try:
        Settings.model_validate({"lsp": {"sorbet": {"binary": {"arguments": "tc"}}}})
    except ValidationError as error:
        message = format_error(error)
    else:
        raise AssertionError("expected a validation error")

    assert message is not None
    assert message.startswith("Invalid settings: ")
    assert "lsp.sorbet.binary.arguments" in message


def test_format_error_unknown_type_is_none() -> None:
    assert format_error(RuntimeError("x")) is None


def test_format_unknown_error_variants() -> None:
    assert format_unknown_error(ValueError("bad")) == "ValueError: bad"
    assert format_unknown_error({"a": 1}) == '{\n  "a": 1\n}'
    assert format_unknown_error(42) == "42"
