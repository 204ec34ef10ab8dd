"""Regular expression matcher."""

import re
from typing import Any

from method_contracts.matchers.base import Matcher


class PatternMatch(Matcher):
    """Matches text the pattern finds a match in (``re.search`` semantics).

    Only values of the pattern's own text type qualify: ``str`` for str
    patterns, ``bytes`` for bytes patterns. Anything else is a non-match,
    never an error.
    """

    __slots__ = ("_pattern",)

    def __init__(self, pattern: re.Pattern[Any] | str) -> None:
        self._pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    @property
    def pattern(self) -> re.Pattern[Any]:
        return self._pattern

    def match(self, value: Any) -> bool:
        text_type = str if isinstance(self._pattern.pattern, str) else bytes
        if not isinstance(value, text_type):
            return False
        return self._pattern.search(value) is not None

    def describe(self) -> str:
        return repr(self._pattern)
