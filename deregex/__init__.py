"""deregex - deserialize a string into a typed record with a regular expression.

The primary interface is the `from_str()` function:

    import deregex
    dim = deregex.from_str("800x600", r"^(?P<width>\\d+)x(?P<height>\\d+)$", Dimension)

Named groups bind to fields of a dataclass or pydantic model; each captured
value is converted to the field's declared type.
"""

from deregex._version import __version__
from deregex.api import from_regex, from_str
from deregex.config import CoercionOptions
from deregex.core import RegexDeserializer
from deregex.extractors import RegexExtractor
from deregex.exceptions import (
    DeRegexError,
    PatternError,
    NoMatchError,
    DeserializationError,
    MissingFieldError,
    CoercionError,
    UnsupportedTargetError,
)

__all__ = [
    # Main API
    "from_str",
    "from_regex",
    "RegexDeserializer",
    "RegexExtractor",
    "CoercionOptions",
    # Exceptions
    "DeRegexError",
    "PatternError",
    "NoMatchError",
    "DeserializationError",
    "MissingFieldError",
    "CoercionError",
    "UnsupportedTargetError",
    # Version
    "__version__",
]
