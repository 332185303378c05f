"""Error formatting utilities.

Turns errors raised by extension entry points and settings validation into
messages fit for an editor notification or a terminal.
"""

import json
import traceback
from typing import Any

from pydantic import ValidationError

from ..errors import ExtensionError


def format_error(error: Any) -> str | None:
    """Format known errors into user-friendly messages.

    Returns None if the error type is not recognized, allowing
    fallback to format_unknown_error.
    """
    if isinstance(error, ExtensionError):
        return str(error)
    if isinstance(error, ValidationError):
        problems = "; ".join(
            f"{'.'.join(str(part) for part in item['loc']) or '<root>'}: {item['msg']}"
            for item in error.errors()
        )
        return f"Invalid settings: {problems}"
    return None


def format_unknown_error(error: Any) -> str:
    """Format any error into a string representation."""
    if isinstance(error, Exception):
        if error.__traceback__:
            return "".join(traceback.format_exception(type(error), error, error.__traceback__))
        return f"{error.__class__.__name__}: {error}"

    if isinstance(error, (dict, list)):
        try:
            return json.dumps(error, indent=2)
        except (TypeError, ValueError):
            return "Unexpected error (unserializable)"

    return str(error)
