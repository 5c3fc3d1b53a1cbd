"""Flat field schemas for deserialization targets.

A target is described as an ordered tuple of :class:`FieldSpec` entries,
one per constructor field, derived by introspection:

- standard library dataclasses via ``dataclasses.fields``
- pydantic models and dataclasses via their ``FieldInfo`` table

The ``key`` of a field is the capture-group name it binds to. It equals the
field name unless a pydantic alias says otherwise. Models configured with
``populate_by_name`` also bind under the field name (see ``FieldSpec.keys``).
"""

from __future__ import annotations

import dataclasses
import types
import typing
from dataclasses import dataclass
from typing import Annotated, Any, Mapping, get_args, get_origin

from pydantic import BaseModel
from pydantic.dataclasses import is_pydantic_dataclass
from pydantic.fields import FieldInfo

from deregex.exceptions import UnsupportedTargetError

NoneType = type(None)


def is_union(origin: Any) -> bool:
    return origin is typing.Union or origin is getattr(types, "UnionType", None)


def admits_none(annotation: Any) -> bool:
    """Return True when ``None`` is a valid value for ``annotation``."""
    if annotation is None or annotation is NoneType:
        return True
    origin = get_origin(annotation)
    if origin is Annotated:
        return admits_none(get_args(annotation)[0])
    if is_union(origin):
        return any(admits_none(arg) for arg in get_args(annotation))
    return False


@dataclass(frozen=True)
class FieldSpec:
    name: str
    key: str
    annotation: Any
    required: bool
    by_name: bool = False

    @property
    def optional(self) -> bool:
        return admits_none(self.annotation)

    @property
    def keys(self) -> tuple[str, ...]:
        """Group names this field binds to, alias first."""
        if self.by_name and self.name != self.key:
            return (self.key, self.name)
        return (self.key,)


def _alias_of(info: FieldInfo) -> str | None:
    if isinstance(info.validation_alias, str):
        return info.validation_alias
    return info.alias


def _pydantic_fields(
    fields: dict[str, FieldInfo], config: Mapping[str, Any]
) -> tuple[FieldSpec, ...]:
    by_name = bool(config.get("populate_by_name") or config.get("validate_by_name"))
    specs = []
    for name, info in fields.items():
        if getattr(info, "init", None) is False:
            continue
        specs.append(
            FieldSpec(
                name=name,
                key=_alias_of(info) or name,
                annotation=info.annotation,
                required=info.is_required(),
                by_name=by_name,
            )
        )
    return tuple(specs)


def _dataclass_fields(target: type) -> tuple[FieldSpec, ...]:
    try:
        hints = typing.get_type_hints(target, include_extras=True)
    except NameError as exc:
        raise UnsupportedTargetError(
            f"Cannot resolve field annotations of {target.__qualname__}: {exc}"
        ) from exc

    specs = []
    for field in dataclasses.fields(target):
        if not field.init:
            continue
        specs.append(
            FieldSpec(
                name=field.name,
                key=field.name,
                annotation=hints.get(field.name, field.type),
                required=(
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING
                ),
            )
        )
    return tuple(specs)


def fields_for(target: Any) -> tuple[FieldSpec, ...]:
    """Describe the fields of ``target`` in declaration order.

    Raises:
        UnsupportedTargetError: If ``target`` is not a dataclass or pydantic
            model class.
    """
    if isinstance(target, type) and issubclass(target, BaseModel):
        return _pydantic_fields(target.model_fields, target.model_config)
    if isinstance(target, type) and is_pydantic_dataclass(target):
        return _pydantic_fields(
            target.__pydantic_fields__, getattr(target, "__pydantic_config__", {})
        )
    if isinstance(target, type) and dataclasses.is_dataclass(target):
        return _dataclass_fields(target)
    raise UnsupportedTargetError(
        f"Cannot deserialize into {target!r}: expected a dataclass or a "
        "pydantic model class"
    )


__all__ = ["FieldSpec", "admits_none", "fields_for", "is_union"]
