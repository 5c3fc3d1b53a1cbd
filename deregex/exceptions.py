"""deregex exception hierarchy.

All deregex exceptions inherit from DeRegexError, allowing callers to
catch any failure of a parse with a single except clause:

    try:
        dim = deregex.from_str("800x600", pattern, Dimension)
    except deregex.DeRegexError as e:
        handle_gracefully(e)

Each exception also inherits from its stdlib counterpart so plain
``except ValueError:`` / ``except TypeError:`` handlers keep working.
"""

from __future__ import annotations


class DeRegexError(Exception):
    """Base exception for all deregex errors."""


class PatternError(DeRegexError, ValueError):
    """The pattern is not a valid regular expression."""

    def __init__(self, message: str, *, pattern: str, position: int | None = None):
        super().__init__(message)
        self.pattern = pattern
        self.position = position


class NoMatchError(DeRegexError, ValueError):
    """The pattern compiled but did not match the input."""

    def __init__(self, *, pattern: str, text: str):
        super().__init__("String doesn't match pattern")
        self.pattern = pattern
        self.text = text


class DeserializationError(DeRegexError, ValueError):
    """The target could not be built from the captured fields."""


class MissingFieldError(DeserializationError):
    """A required field has no participating capture group."""

    def __init__(self, field: str):
        super().__init__(f"Missing field '{field}'")
        self.field = field


class CoercionError(DeserializationError):
    """A captured value could not be converted to its field's type."""

    def __init__(self, field: str, value: str, reason: str | None = None):
        message = f"Unable to convert value for group {field}: {value}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.field = field
        self.value = value
        self.reason = reason


class UnsupportedTargetError(DeRegexError, TypeError):
    """The target type cannot be described as a flat record."""


__all__ = [
    "DeRegexError",
    "PatternError",
    "NoMatchError",
    "DeserializationError",
    "MissingFieldError",
    "CoercionError",
    "UnsupportedTargetError",
]
