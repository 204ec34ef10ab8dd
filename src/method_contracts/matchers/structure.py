"""Structural matchers for sequences and mappings.

Sub-contracts are coerced once, at construction, so matching never
re-interprets a contract specification.
"""

from collections.abc import Mapping
from typing import Any

from method_contracts.contracts.types import ContractSpec
from method_contracts.matchers.base import Matcher
from method_contracts.matchers.coercion import contract_to_matcher

# Variadic positional arguments arrive as a tuple, so both count as arrays.
_SEQUENCE_TYPES: tuple[type, ...] = (list, tuple)


class ArrayOf(Matcher):
    """Matches a list or tuple whose every element matches.

    An empty sequence always matches.
    """

    __slots__ = ("_element_matcher",)

    def __init__(self, element_contract: ContractSpec) -> None:
        self._element_matcher = contract_to_matcher(element_contract)

    @property
    def element_matcher(self) -> Matcher:
        return self._element_matcher

    def match(self, value: Any) -> bool:
        if not isinstance(value, _SEQUENCE_TYPES):
            return False
        return all(self._element_matcher.match(element) for element in value)

    def describe(self) -> str:
        return f"an array of elements matching {self._element_matcher}"


class MapOf(Matcher):
    """Matches a mapping whose every key and every value match.

    An empty mapping always matches.
    """

    __slots__ = ("_key_matcher", "_value_matcher")

    def __init__(self, key_contract: ContractSpec, value_contract: ContractSpec) -> None:
        self._key_matcher = contract_to_matcher(key_contract)
        self._value_matcher = contract_to_matcher(value_contract)

    @property
    def key_matcher(self) -> Matcher:
        return self._key_matcher

    @property
    def value_matcher(self) -> Matcher:
        return self._value_matcher

    def match(self, value: Any) -> bool:
        if not isinstance(value, Mapping):
            return False
        return all(self._key_matcher.match(k) and self._value_matcher.match(v) for k, v in value.items())

    def describe(self) -> str:
        return f"a hash with keys matching {self._key_matcher} and values matching {self._value_matcher}"


HashOf = MapOf
