"""Declared contracts and the pending annotation record.

- ParamContract: Immutable contract on one named parameter
- ReturnContract: Immutable contract on the return value
- AnnotationRecord: Mutable accumulator of contracts waiting for the next
  function definition in a declarative scope

Declaration mistakes raise ConfigurationError here, at declaration time,
never later at call time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from method_contracts.contracts.errors import (
    BrokenParamContractError,
    BrokenReturnValueContractError,
    ConfigurationError,
)
from method_contracts.contracts.types import NO_CONTRACT, ContractSpec, Predicate
from method_contracts.matchers import Matcher, contract_to_matcher


def _resolve_contract(contract: ContractSpec, predicate: Predicate | None) -> Matcher:
    """Pick exactly one of contract/predicate and coerce it."""
    if predicate is not None and contract is not NO_CONTRACT:
        raise ConfigurationError("Contract and predicate are mutually exclusive")
    if predicate is None and contract is NO_CONTRACT:
        raise ConfigurationError("Either a contract or a predicate is required")
    return contract_to_matcher(predicate if predicate is not None else contract)


@dataclass(frozen=True, slots=True)
class ParamContract:
    """Contract on one declared parameter.

    Attributes:
        name: Parameter name the contract applies to
        matcher: Coerced matcher checked against the bound value
    """

    name: str
    matcher: Matcher

    @classmethod
    def declare(
        cls,
        name: str,
        contract: ContractSpec = NO_CONTRACT,
        *,
        predicate: Predicate | None = None,
    ) -> ParamContract:
        """Validate a declaration and build the contract.

        Raises:
            ConfigurationError: Empty name, or not exactly one of contract/predicate
        """
        if not name:
            raise ConfigurationError("Parameter name is required")
        return cls(name=str(name), matcher=_resolve_contract(contract, predicate))

    def check(self, owner: str, method_name: str, value: Any) -> None:
        """Raise BrokenParamContractError unless ``value`` matches."""
        if not self.matcher.match(value):
            raise BrokenParamContractError(owner, method_name, self.name, self.matcher, value)


@dataclass(frozen=True, slots=True)
class ReturnContract:
    """Contract on a function's return value."""

    matcher: Matcher

    @classmethod
    def declare(
        cls,
        contract: ContractSpec = NO_CONTRACT,
        *,
        predicate: Predicate | None = None,
    ) -> ReturnContract:
        return cls(matcher=_resolve_contract(contract, predicate))

    def check(self, owner: str, method_name: str, value: Any) -> None:
        """Raise BrokenReturnValueContractError unless ``value`` matches."""
        if not self.matcher.match(value):
            raise BrokenReturnValueContractError(owner, method_name, self.matcher, value)


@dataclass(slots=True)
class AnnotationRecord:
    """Pending contracts for the next function defined in a scope.

    Mutable while declarations accumulate; an EnforcementBinding takes an
    immutable snapshot when it consumes the record.

    Attributes:
        params: Parameter contracts in declaration order
        return_contract: At most one return contract
    """

    params: list[ParamContract] = field(default_factory=list)
    return_contract: ReturnContract | None = None

    def add_param(self, contract: ParamContract) -> None:
        self.params.append(contract)

    def set_return(self, contract: ReturnContract) -> None:
        """Attach the return contract.

        Raises:
            ConfigurationError: If a return contract is already pending
        """
        if self.return_contract is not None:
            raise ConfigurationError("A contract already exists for the return value")
        self.return_contract = contract

    @property
    def is_empty(self) -> bool:
        return not self.params and self.return_contract is None

    def copy(self) -> AnnotationRecord:
        """Independent copy; contracts themselves are immutable and shared."""
        return AnnotationRecord(params=list(self.params), return_contract=self.return_contract)

    def for_getter(self) -> AnnotationRecord:
        """Copy keeping only the return contract (generated readers)."""
        return AnnotationRecord(return_contract=self.return_contract)

    def for_setter(self) -> AnnotationRecord:
        """Copy keeping only the parameter contracts (generated writers)."""
        return AnnotationRecord(params=list(self.params))
