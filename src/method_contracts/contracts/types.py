"""Sentinels and semantic type aliases shared across subsystem boundaries."""

from collections.abc import Callable
from typing import Any, Final


class _Sentinel:
    """Named singleton marker that is never equal to user data."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __reduce__(self) -> str:
        return self._name


NOT_PROVIDED: Final = _Sentinel("NOT_PROVIDED")
"""Value bound to a slot that received nothing in one call (under-application)."""

NO_CONTRACT: Final = _Sentinel("NO_CONTRACT")
"""Default for the ``contract`` argument of ``param``/``returns`` when omitted."""

NO_DEFAULT: Final = _Sentinel("NO_DEFAULT")
"""Default marker for a slot that declares no default value."""

Predicate = Callable[[Any], Any]
"""Boolean-valued callback used as a contract (result is coerced with bool())."""

ContractSpec = Any
"""Anything accepted where a contract is required.

Literal value, class, compiled pattern, matcher class, matcher instance,
list of contract specifications, or predicate callback.
"""
