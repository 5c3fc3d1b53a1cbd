"""Structured options controlling how captured text is coerced."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CoercionOptions:
    empty_as_none: bool = True
    strip_whitespace: bool = False
    true_values: tuple[str, ...] = ("true",)
    false_values: tuple[str, ...] = ("false",)


DEFAULT_OPTIONS = CoercionOptions()

__all__ = ["CoercionOptions", "DEFAULT_OPTIONS"]
