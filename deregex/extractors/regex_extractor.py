"""Named-group capture extraction."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from deregex.exceptions import NoMatchError, PatternError

logger = logging.getLogger(__name__)


@dataclass
class RegexExtractor:
    """Extracts named capture groups from the first match of a pattern.

    Args:
        pattern: Regular expression source, or an already compiled pattern
        flags: ``re`` flags applied when compiling a source string
    """

    pattern: str | re.Pattern[str]
    flags: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.pattern, re.Pattern) and self.flags:
            raise PatternError(
                "flags cannot be applied to an already compiled pattern",
                pattern=self.pattern.pattern,
            )
        try:
            self._compiled = re.compile(self.pattern, self.flags)
        except re.error as exc:
            raise PatternError(
                str(exc), pattern=str(exc.pattern or self.pattern), position=exc.pos
            ) from exc
        logger.debug(
            "Pattern compiled",
            extra={"pattern": self._compiled.pattern, "groups": self.group_names},
        )

    @property
    def group_names(self) -> list[str]:
        """Named groups of the pattern, in pattern order."""
        index = self._compiled.groupindex
        return sorted(index, key=index.__getitem__)

    def extract(self, text: str) -> dict[str, str]:
        """Extract named groups from the first match in ``text``.

        Args:
            text: Text to search

        Returns:
            Mapping of group name to matched text, for named groups that
            participated in the match

        Raises:
            NoMatchError: If pattern does not match
        """
        match = self._compiled.search(text)
        if match is None:
            logger.debug("Pattern did not match", extra={"pattern": self._compiled.pattern})
            raise NoMatchError(pattern=self._compiled.pattern, text=text)
        return {
            key: value for key, value in match.groupdict().items() if value is not None
        }
