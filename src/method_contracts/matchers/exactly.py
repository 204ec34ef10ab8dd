"""Equality matcher for literal contracts."""

from typing import Any

from method_contracts.matchers.base import Matcher


class Exactly(Matcher):
    """Matches values equal to a literal."""

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def match(self, value: Any) -> bool:
        return bool(self._value == value)

    def describe(self) -> str:
        return f"equal {self._value!r}"
