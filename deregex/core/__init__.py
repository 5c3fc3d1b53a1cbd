"""Schema introspection, coercion and the capture-to-record bridge."""

from __future__ import annotations

from .deserializer import RegexDeserializer
from .schema import FieldSpec, fields_for

__all__ = ["RegexDeserializer", "FieldSpec", "fields_for"]
