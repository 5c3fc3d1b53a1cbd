"""Text-to-value coercion for captured groups.

Captured text is converted according to the field's declared annotation
before the mapping is handed to pydantic. Scalars with strict textual rules
(``bool``, ``int``, ``float``, enums, literals) are converted here; any other
annotation receives the raw text and is left to pydantic's own parsing
(``Decimal``, ``UUID``, ``datetime`` and friends).
"""

from __future__ import annotations

import enum
import re
from typing import Annotated, Any, Literal, get_args, get_origin

from deregex.config import DEFAULT_OPTIONS, CoercionOptions
from deregex.core.schema import NoneType, is_union
from deregex.exceptions import CoercionError

# Decimal integers with an optional sign, ASCII digits only.
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _to_bool(value: str, field: str, options: CoercionOptions) -> bool:
    folded = value.casefold()
    if folded in {candidate.casefold() for candidate in options.true_values}:
        return True
    if folded in {candidate.casefold() for candidate in options.false_values}:
        return False
    raise CoercionError(field, value, "expected a boolean")


def _to_int(value: str, field: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise CoercionError(field, value, "expected a decimal integer")
    try:
        return int(value)
    except ValueError as exc:
        # digit count beyond the interpreter's int conversion limit
        raise CoercionError(field, value, "integer too large") from exc


def _to_float(value: str, field: str) -> float:
    if "_" in value or value != value.strip():
        raise CoercionError(field, value, "expected a float")
    try:
        return float(value)
    except ValueError as exc:
        raise CoercionError(field, value, "expected a float") from exc


def _to_enum(enum_cls: type[enum.Enum], value: str, field: str) -> enum.Enum:
    for member in enum_cls:
        if str(member.value) == value:
            return member
    member = enum_cls.__members__.get(value)
    if member is None:
        raise CoercionError(field, value, f"not a member of {enum_cls.__name__}")
    return member


def _to_literal(choices: tuple[Any, ...], value: str, field: str) -> Any:
    for choice in choices:
        text = str(choice.value) if isinstance(choice, enum.Enum) else str(choice)
        if text == value:
            return choice
    raise CoercionError(field, value, f"expected one of {list(choices)!r}")


def coerce(
    annotation: Any,
    value: str,
    *,
    field: str,
    options: CoercionOptions = DEFAULT_OPTIONS,
) -> Any:
    """Convert captured ``value`` into the type described by ``annotation``.

    Args:
        annotation: Declared type of the target field
        value: Text captured by the field's named group
        field: Group name, used in error reports
        options: Coercion knobs

    Returns:
        The converted value, or ``value`` unchanged when the annotation is
        left to pydantic.

    Raises:
        CoercionError: If the text is not valid for the annotation
    """
    origin = get_origin(annotation)

    if origin is Annotated:
        return coerce(get_args(annotation)[0], value, field=field, options=options)

    if is_union(origin):
        args = get_args(annotation)
        members = [arg for arg in args if arg is not NoneType]
        if len(members) < len(args) and value == "" and options.empty_as_none:
            return None
        if len(members) == 1:
            return coerce(members[0], value, field=field, options=options)
        # wider unions are resolved by pydantic
        return value

    if origin is Literal:
        return _to_literal(get_args(annotation), value, field)

    supertype = getattr(annotation, "__supertype__", None)
    if supertype is not None:
        return coerce(supertype, value, field=field, options=options)

    if origin is not None or not isinstance(annotation, type):
        return value
    if issubclass(annotation, enum.Enum):
        return _to_enum(annotation, value, field)
    if issubclass(annotation, bool):
        return _to_bool(value, field, options)
    if issubclass(annotation, int):
        return annotation(_to_int(value, field))
    if issubclass(annotation, float):
        return annotation(_to_float(value, field))
    return value


__all__ = ["coerce"]
