"""Shared contracts for cross-boundary data types.

Sentinels, enums, exceptions and the signature model used by matchers, the
annotation layer and the enforcement engine.

This package is a LEAF MODULE with no outbound dependencies to core/engine.

Import patterns:
    from method_contracts.contracts import ParamKind, SignatureModel, NOT_PROVIDED
"""

from method_contracts.contracts.enums import ParamKind
from method_contracts.contracts.errors import (
    BrokenParamContractError,
    BrokenReturnValueContractError,
    ConfigurationError,
    ContractError,
    ParamContractViolation,
    ParameterDoesNotExistError,
    ReturnContractViolation,
)
from method_contracts.contracts.signature import ParamSlot, SignatureModel
from method_contracts.contracts.types import (
    NO_CONTRACT,
    NO_DEFAULT,
    NOT_PROVIDED,
    ContractSpec,
    Predicate,
)

__all__ = [
    "NOT_PROVIDED",
    "NO_CONTRACT",
    "NO_DEFAULT",
    "BrokenParamContractError",
    "BrokenReturnValueContractError",
    "ConfigurationError",
    "ContractError",
    "ContractSpec",
    "ParamContractViolation",
    "ParamKind",
    "ParamSlot",
    "ParameterDoesNotExistError",
    "Predicate",
    "ReturnContractViolation",
    "SignatureModel",
]
