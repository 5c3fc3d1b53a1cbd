"""Capture extractors feeding the deserializer."""

from __future__ import annotations

from .regex_extractor import RegexExtractor

__all__ = ["RegexExtractor"]
