"""One-shot entry points.

    from dataclasses import dataclass
    import deregex

    @dataclass
    class Dimension:
        width: int
        height: int

    dim = deregex.from_str("800x600", r"^(?P<width>\\d+)x(?P<height>\\d+)$", Dimension)
    assert (dim.width, dim.height) == (800, 600)

Callers parsing many strings with the same pattern should hold a
:class:`deregex.RegexDeserializer` instead.
"""

from __future__ import annotations

import re
from typing import TypeVar

from deregex.config import DEFAULT_OPTIONS, CoercionOptions
from deregex.core.deserializer import RegexDeserializer

T = TypeVar("T")


def from_str(
    text: str,
    pattern: str,
    target: type[T],
    *,
    flags: int = 0,
    options: CoercionOptions | None = None,
) -> T:
    """Deserialize ``text`` into ``target`` using the named groups of ``pattern``.

    Args:
        text: Input string
        pattern: Regular expression; group names must match field names
        target: Dataclass or pydantic model class to build
        flags: ``re`` flags applied when compiling ``pattern``
        options: Coercion knobs, defaults to :class:`CoercionOptions`

    Returns:
        A fully populated ``target`` instance

    Raises:
        PatternError: ``pattern`` is not a valid regular expression
        NoMatchError: ``pattern`` does not match ``text``
        MissingFieldError: a required field has no participating group
        CoercionError: a captured value does not fit its field's type
    """
    deserializer = RegexDeserializer(
        pattern, target, flags=flags, options=options or DEFAULT_OPTIONS
    )
    return deserializer.parse(text)


def from_regex(
    text: str,
    regex: re.Pattern[str],
    target: type[T],
    *,
    options: CoercionOptions | None = None,
) -> T:
    """Like :func:`from_str`, with a pattern the caller already compiled."""
    deserializer = RegexDeserializer(regex, target, options=options or DEFAULT_OPTIONS)
    return deserializer.parse(text)


__all__ = ["from_str", "from_regex"]
