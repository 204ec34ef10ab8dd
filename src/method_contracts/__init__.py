"""
Method contracts: runtime contracts on function parameters and return values.

Contracts declared just before a function definition bind to that function;
violations raise structured errors at call time without changing the
function's declared signature.

Import patterns:
    from method_contracts import ContractScope, param, returns, ArrayOf, MapOf
    from method_contracts import configure
"""

from method_contracts.contracts import (
    NOT_PROVIDED,
    BrokenParamContractError,
    BrokenReturnValueContractError,
    ConfigurationError,
    ContractError,
    ParamContractViolation,
    ParameterDoesNotExistError,
    ParamKind,
    ParamSlot,
    ReturnContractViolation,
    SignatureModel,
)
from method_contracts.core.config import ContractSettings, config, configure
from method_contracts.declarations import (
    ContractMeta,
    Contracted,
    ContractScope,
    annotations_of,
    param,
    returns,
    returns_a,
    returns_an,
)
from method_contracts.engine import enforce, get_binding, recombine
from method_contracts.matchers import (
    AnyOf,
    ArrayOf,
    Exactly,
    HashOf,
    InstanceOf,
    MapOf,
    Matcher,
    PatternMatch,
    Predicate,
    contract_to_matcher,
)

__version__ = "0.1.0"

__all__ = [
    "NOT_PROVIDED",
    "AnyOf",
    "ArrayOf",
    "BrokenParamContractError",
    "BrokenReturnValueContractError",
    "ConfigurationError",
    "ContractError",
    "ContractMeta",
    "ContractScope",
    "ContractSettings",
    "Contracted",
    "Exactly",
    "HashOf",
    "InstanceOf",
    "MapOf",
    "Matcher",
    "ParamContractViolation",
    "ParamKind",
    "ParamSlot",
    "ParameterDoesNotExistError",
    "PatternMatch",
    "Predicate",
    "ReturnContractViolation",
    "SignatureModel",
    "annotations_of",
    "config",
    "configure",
    "contract_to_matcher",
    "enforce",
    "get_binding",
    "param",
    "recombine",
    "returns",
    "returns_a",
    "returns_an",
]
