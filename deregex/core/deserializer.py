"""Bridge from regex captures to typed records.

:class:`RegexDeserializer` compiles a pattern and describes the target once,
then turns each input string into a fresh target instance:

1. named groups of the first match become a name -> text mapping
2. each field's text is coerced to its declared type
3. pydantic builds the instance, applying defaults, constraints and
   validators

Every failure surfaces as a :class:`deregex.DeRegexError` subclass.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Collection, Generic, Mapping, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError

from deregex.config import DEFAULT_OPTIONS, CoercionOptions
from deregex.core.coercion import coerce
from deregex.core.schema import FieldSpec, fields_for
from deregex.exceptions import (
    CoercionError,
    DeRegexError,
    DeserializationError,
    MissingFieldError,
    UnsupportedTargetError,
)
from deregex.extractors import RegexExtractor
from deregex.utils.logging_utils import TRACE_LEVEL

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _translate_validation_error(
    exc: ValidationError,
    captures: Mapping[str, str],
    fields: Mapping[str, FieldSpec],
) -> DeRegexError:
    """Map the first pydantic error onto the deregex hierarchy."""
    error = exc.errors()[0]
    loc = error.get("loc", ())
    if not loc:
        return DeserializationError(error["msg"])
    name = str(loc[0])
    spec = fields.get(name)
    if spec is not None:
        name = _present_key(spec, captures) or name
    if error["type"] == "missing":
        return MissingFieldError(name)
    raw = captures.get(name)
    if raw is None:
        raw = str(error.get("input"))
    return CoercionError(name, raw, error["msg"])


def _present_key(spec: FieldSpec, names: Collection[str]) -> str | None:
    for key in spec.keys:
        if key in names:
            return key
    return None


@dataclass
class RegexDeserializer(Generic[T]):
    """Deserializes strings into ``target`` instances using ``pattern``.

    Args:
        pattern: Regular expression with named groups matching field names
        target: Dataclass or pydantic model class to build
        flags: ``re`` flags applied when compiling ``pattern``
        options: Coercion knobs

    Raises:
        PatternError: If ``pattern`` does not compile
        UnsupportedTargetError: If ``target`` is not a flat record type
        MissingFieldError: If a required field has no group in ``pattern``
    """

    pattern: str | re.Pattern[str]
    target: type[T]
    flags: int = 0
    options: CoercionOptions = DEFAULT_OPTIONS

    def __post_init__(self) -> None:
        self._extractor = RegexExtractor(self.pattern, flags=self.flags)
        self._fields: tuple[FieldSpec, ...] = fields_for(self.target)
        try:
            self._adapter: TypeAdapter[T] = TypeAdapter(self.target)
        except PydanticSchemaGenerationError as exc:
            raise UnsupportedTargetError(str(exc)) from exc

        self._by_loc = {key: spec for spec in self._fields for key in spec.keys}
        group_names = set(self._extractor.group_names)
        for spec in self._fields:
            if spec.required and not spec.optional:
                if _present_key(spec, group_names) is None:
                    raise MissingFieldError(spec.key)

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        return self._fields

    def _bind(self, captures: Mapping[str, str]) -> dict[str, Any]:
        mapping: dict[str, Any] = {}
        for spec in self._fields:
            key = _present_key(spec, captures)
            if key is not None:
                mapping[key] = coerce(
                    spec.annotation,
                    captures[key],
                    field=key,
                    options=self.options,
                )
            elif spec.required and spec.optional:
                key = spec.key
                mapping[key] = None
            elif spec.required:
                raise MissingFieldError(spec.key)
            else:
                continue
            logger.log(
                TRACE_LEVEL,
                "Field bound",
                extra={"field": key, "value": mapping[key]},
            )
        return mapping

    def parse(self, text: str) -> T:
        """Deserialize ``text`` into a new ``target`` instance.

        Raises:
            NoMatchError: If the pattern does not match ``text``
            MissingFieldError: If a required field did not participate
            CoercionError: If a captured value does not fit its field
            DeserializationError: If the target rejects the values as a whole
        """
        captures = self._extractor.extract(text)
        if self.options.strip_whitespace:
            captures = {key: value.strip() for key, value in captures.items()}

        mapping = self._bind(captures)
        try:
            result = self._adapter.validate_python(mapping)
        except ValidationError as exc:
            raise _translate_validation_error(exc, captures, self._by_loc) from exc

        logger.debug(
            "Deserialized match",
            extra={"target": self.target.__qualname__, "fields": sorted(mapping)},
        )
        return result


__all__ = ["RegexDeserializer"]
