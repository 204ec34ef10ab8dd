"""Exceptions raised by method contracts.

Two families:

- Declaration-time misuse (ConfigurationError) surfaces immediately while a
  module or class body is being loaded and is never recovered.
- Call-time failures (ParameterDoesNotExistError and the two contract
  violations) abort the call that triggered them and propagate unchanged
  to the caller.

Violation messages have a fixed shape so they can be matched in tests and
logs:

    <Owner>#<method>.<param> was <repr>, which does not match: <description>
    <Owner>#<method> returned <repr>, which does not match: <description>
    Parameter <Owner>#<method>.<param> does not exist
"""

from typing import Any


class ContractError(Exception):
    """Base class for everything method contracts raises."""


# =============================================================================
# Declaration-time errors
# =============================================================================


class ConfigurationError(ContractError, ValueError):
    """Raised when a contract is declared incorrectly.

    Examples: both a contract and a predicate given, neither given, an empty
    parameter name, a second return contract on the same pending record, or
    a matcher class whose constructor requires arguments used bare.
    """


# =============================================================================
# Call-time errors
# =============================================================================


class ParameterDoesNotExistError(ContractError):
    """A declared parameter contract names a slot the function does not have.

    Raised on the first call, not at declaration, because the contract is
    only checked against the signature when it is exercised.

    Attributes:
        owner: Name of the class (or module) owning the function
        method_name: Name of the wrapped function
        param_name: The declared name with no matching slot
    """

    def __init__(self, owner: str, method_name: str, param_name: str) -> None:
        self.owner = owner
        self.method_name = method_name
        self.param_name = param_name
        super().__init__(f"Parameter {owner}#{method_name}.{param_name} does not exist")


class BrokenParamContractError(ContractError):
    """A bound argument value did not satisfy its parameter contract.

    Attributes:
        owner: Name of the class (or module) owning the function
        method_name: Name of the wrapped function
        param_name: Parameter whose contract was broken
        matcher: The matcher that rejected the value
        actual_value: The offending value
    """

    def __init__(
        self,
        owner: str,
        method_name: str,
        param_name: str,
        matcher: Any,
        actual_value: Any,
    ) -> None:
        self.owner = owner
        self.method_name = method_name
        self.param_name = param_name
        self.matcher = matcher
        self.actual_value = actual_value
        super().__init__(f"{owner}#{method_name}.{param_name} was {actual_value!r}, which does not match: {matcher}")


class BrokenReturnValueContractError(ContractError):
    """A function's result did not satisfy its return contract.

    Attributes:
        owner: Name of the class (or module) owning the function
        method_name: Name of the wrapped function
        matcher: The matcher that rejected the value
        actual_value: The offending return value
    """

    def __init__(self, owner: str, method_name: str, matcher: Any, actual_value: Any) -> None:
        self.owner = owner
        self.method_name = method_name
        self.matcher = matcher
        self.actual_value = actual_value
        super().__init__(f"{owner}#{method_name} returned {actual_value!r}, which does not match: {matcher}")


# Descriptive aliases used in docs and by callers that prefer the noun form.
ParamContractViolation = BrokenParamContractError
ReturnContractViolation = BrokenReturnValueContractError
