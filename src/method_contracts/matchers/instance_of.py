"""Runtime class membership matcher."""

from typing import Any

from method_contracts.matchers.base import Matcher


class InstanceOf(Matcher):
    """Matches instances of a class (ABCs included)."""

    __slots__ = ("_type",)

    def __init__(self, type_tag: type) -> None:
        self._type = type_tag

    @property
    def type_tag(self) -> type:
        return self._type

    def match(self, value: Any) -> bool:
        return isinstance(value, self._type)

    def describe(self) -> str:
        return f"be a {self._type.__name__}"
