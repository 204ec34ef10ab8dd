"""Matchers: evaluable contracts with human-readable descriptions.

Import patterns:
    from method_contracts.matchers import ArrayOf, MapOf, contract_to_matcher
"""

from method_contracts.matchers.any_of import AnyOf
from method_contracts.matchers.base import Matcher
from method_contracts.matchers.coercion import contract_to_matcher
from method_contracts.matchers.exactly import Exactly
from method_contracts.matchers.instance_of import InstanceOf
from method_contracts.matchers.pattern import PatternMatch
from method_contracts.matchers.predicate import Predicate
from method_contracts.matchers.structure import ArrayOf, HashOf, MapOf

__all__ = [
    "AnyOf",
    "ArrayOf",
    "Exactly",
    "HashOf",
    "InstanceOf",
    "MapOf",
    "Matcher",
    "PatternMatch",
    "Predicate",
    "contract_to_matcher",
]
