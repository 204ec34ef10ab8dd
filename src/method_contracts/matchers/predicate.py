"""Callback matcher."""

from typing import Any

from method_contracts.contracts.types import Predicate as PredicateFn
from method_contracts.matchers.base import Matcher


class Predicate(Matcher):
    """Matches values for which the callback returns a truthy result."""

    __slots__ = ("_fn",)

    def __init__(self, fn: PredicateFn) -> None:
        self._fn = fn

    def match(self, value: Any) -> bool:
        return bool(self._fn(value))

    def describe(self) -> str:
        return "<custom matcher>"
