"""Contract enforcement: wrap a function so every call is checked.

Per call:

    Entered -> Bound -> ParamsChecked -> Invoked -> ReturnChecked -> Returned

with an error exit from ParamsChecked or ReturnChecked. Parameter checks
are skipped for a call the binder cannot fully place: a missing or surplus
argument, or a defaulted parameter the caller left out. A malformed call
then raises Python's own TypeError instead of a misleading contract error.

The original function is always invoked with the original arguments, never
with the recombined map.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from method_contracts.contracts.errors import ParameterDoesNotExistError
from method_contracts.contracts.signature import SignatureModel
from method_contracts.core.annotations import AnnotationRecord, ParamContract, ReturnContract
from method_contracts.core.config import config
from method_contracts.core.logging import get_logger
from method_contracts.engine.binder import recombine

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Attribute carrying the EnforcementBinding on a wrapped function.
BINDING_ATTRIBUTE = "__contract_binding__"


def static_owner_name(func: Callable[..., Any]) -> str:
    """Owner name derived from where the function was defined.

    ``Sample.foo`` -> ``Sample``; a module-level function reports its module.
    """
    qualname: str = getattr(func, "__qualname__", "")
    enclosing = qualname.rpartition(".")[0]
    parts = [p for p in enclosing.split(".") if p and p != "<locals>"]
    if parts:
        return parts[-1]
    module: str | None = getattr(func, "__module__", None)
    return module or "<unknown>"


@dataclass(frozen=True, slots=True)
class EnforcementBinding:
    """Immutable pairing behind one wrapped function.

    Attributes:
        original: The unwrapped callable
        signature: Declared parameter list of ``original``
        params: Parameter contracts in declaration order
        return_contract: Return contract, if declared
        method_name: Name used in error messages
        owner: Owner name used when the call has no ``self``/``cls``
    """

    original: Callable[..., Any]
    signature: SignatureModel
    params: tuple[ParamContract, ...]
    return_contract: ReturnContract | None
    method_name: str
    owner: str

    @classmethod
    def create(
        cls,
        func: Callable[..., Any],
        record: AnnotationRecord,
        *,
        signature: SignatureModel | None = None,
        name: str | None = None,
        owner: str | None = None,
    ) -> EnforcementBinding:
        """Snapshot ``record`` and the signature of ``func``."""
        return cls(
            original=func,
            signature=signature if signature is not None else SignatureModel.from_callable(func),
            params=tuple(record.params),
            return_contract=record.return_contract,
            method_name=name if name is not None else func.__name__,
            owner=owner if owner is not None else static_owner_name(func),
        )

    def to_record(self) -> AnnotationRecord:
        """Mutable copy of the contracts, for building a replacement binding."""
        return AnnotationRecord(params=list(self.params), return_contract=self.return_contract)

    def owner_for(self, args: tuple[Any, ...]) -> str:
        """Owner name for one call.

        Methods report the runtime class, so an inherited method reports the
        subclass it was called on.
        """
        first = self.signature.first_positional_name
        if args:
            if first == "self":
                return type(args[0]).__name__
            if first == "cls" and isinstance(args[0], type):
                return args[0].__name__
        return self.owner

    def check_params(self, owner: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        """Bind the call and check every parameter contract.

        Raises:
            ParameterDoesNotExistError: A contract names an undeclared parameter
            BrokenParamContractError: A bound value does not match
        """
        bound = recombine(self.signature, args, kwargs)
        if not bound.is_complete:
            logger.debug(
                "contract_validation_skipped",
                function=f"{owner}#{self.method_name}",
                unbound=list(bound.unbound),
                overflow=bound.overflow,
            )
            return

        for contract in self.params:
            if contract.name not in self.signature:
                raise ParameterDoesNotExistError(owner, self.method_name, contract.name)
            contract.check(owner, self.method_name, bound.values[contract.name])

    def check_return(self, owner: str, result: Any) -> None:
        if self.return_contract is not None:
            self.return_contract.check(owner, self.method_name, result)


def build_wrapper(binding: EnforcementBinding) -> Callable[..., Any]:
    """Construct the checking wrapper for a binding.

    The wrapper keeps the original's metadata (functools.wraps) and exposes
    the binding as ``__contract_binding__``.
    """
    original = binding.original

    @functools.wraps(original)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        owner = binding.owner_for(args)
        binding.check_params(owner, args, kwargs)
        result = original(*args, **kwargs)
        binding.check_return(owner, result)
        return result

    setattr(wrapper, BINDING_ATTRIBUTE, binding)
    return wrapper


def get_binding(func: Any) -> EnforcementBinding | None:
    """The binding behind a wrapped function, or None if it is not wrapped."""
    binding = getattr(func, BINDING_ATTRIBUTE, None)
    return binding if isinstance(binding, EnforcementBinding) else None


def enforce(
    func: F,
    record: AnnotationRecord | None,
    *,
    signature: SignatureModel | None = None,
    name: str | None = None,
    owner: str | None = None,
) -> F:
    """Wrap ``func`` so calls are checked against ``record``.

    Returns ``func`` untouched when contracts are disabled or the record is
    empty. Wrapping an already wrapped function replaces its binding rather
    than nesting, so each call is checked exactly once.

    Args:
        func: Function to wrap
        record: Pending contracts consumed by this definition
        signature: Hand-declared signature; reflected from ``func`` if omitted
        name: Method name for messages; ``func.__name__`` if omitted
        owner: Owner name for calls without ``self``/``cls``

    Returns:
        The wrapped function, or ``func`` itself
    """
    if record is None or record.is_empty:
        return func

    if not config().enabled:
        logger.debug("contract_wrapping_skipped", function=getattr(func, "__qualname__", repr(func)))
        return func

    existing = get_binding(func)
    if existing is not None:
        func = existing.original  # type: ignore[assignment]

    binding = EnforcementBinding.create(func, record, signature=signature, name=name, owner=owner)
    logger.debug(
        "contract_binding_created",
        function=f"{binding.owner}#{binding.method_name}",
        params=[c.name for c in binding.params],
        has_return=binding.return_contract is not None,
    )
    return build_wrapper(binding)  # type: ignore[return-value]
