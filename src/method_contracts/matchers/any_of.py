"""Union matcher built from a list of contracts."""

from collections.abc import Iterable
from typing import Any

from method_contracts.contracts.types import ContractSpec
from method_contracts.matchers.base import Matcher


class AnyOf(Matcher):
    """Matches if any of the coerced sub-contracts matches."""

    __slots__ = ("_matchers",)

    def __init__(self, contracts: Iterable[ContractSpec]) -> None:
        # Lazy import: coercion depends on every matcher module
        from method_contracts.matchers.coercion import contract_to_matcher

        self._matchers: tuple[Matcher, ...] = tuple(contract_to_matcher(c) for c in contracts)

    @property
    def matchers(self) -> tuple[Matcher, ...]:
        return self._matchers

    def match(self, value: Any) -> bool:
        return any(m.match(value) for m in self._matchers)

    def describe(self) -> str:
        return f"<any of: {', '.join(m.describe() for m in self._matchers)}>"
