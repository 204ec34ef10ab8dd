"""Contract coercion: one pure function from contract specification to Matcher.

Variants are checked in a fixed priority order:

1. Matcher class        -> instantiated with no arguments
2. Matcher instance     -> used as-is
3. Compiled pattern     -> PatternMatch
4. Non-class callable   -> Predicate
5. list                 -> AnyOf (each element coerced recursively)
6. Class                -> InstanceOf
7. Anything else        -> Exactly
"""

from __future__ import annotations

import inspect
import re

from method_contracts.contracts.errors import ConfigurationError
from method_contracts.contracts.types import ContractSpec
from method_contracts.matchers.any_of import AnyOf
from method_contracts.matchers.base import Matcher
from method_contracts.matchers.exactly import Exactly
from method_contracts.matchers.instance_of import InstanceOf
from method_contracts.matchers.pattern import PatternMatch
from method_contracts.matchers.predicate import Predicate


def _requires_arguments(matcher_class: type[Matcher]) -> bool:
    try:
        signature = inspect.signature(matcher_class)
    except (TypeError, ValueError):
        return False
    return any(
        p.default is inspect.Parameter.empty
        and p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        for p in signature.parameters.values()
    )


def contract_to_matcher(contract: ContractSpec) -> Matcher:
    """Coerce a contract specification into a Matcher.

    Args:
        contract: Literal, class, pattern, matcher class or instance,
            list of contracts, or predicate callback

    Returns:
        Matcher evaluating the contract

    Raises:
        ConfigurationError: If a matcher class that requires constructor
            arguments is given bare
    """
    if isinstance(contract, type) and issubclass(contract, Matcher):
        if inspect.isabstract(contract):
            raise ConfigurationError(f"Matcher class {contract.__name__} is abstract and cannot be used as a contract")
        if _requires_arguments(contract):
            raise ConfigurationError(f"Matcher class {contract.__name__} constructor takes arguments!")
        return contract()

    if isinstance(contract, Matcher):
        return contract
    if isinstance(contract, re.Pattern):
        return PatternMatch(contract)
    if callable(contract) and not isinstance(contract, type):
        return Predicate(contract)
    if isinstance(contract, list):
        return AnyOf(contract)
    if isinstance(contract, type):
        return InstanceOf(contract)
    return Exactly(contract)
