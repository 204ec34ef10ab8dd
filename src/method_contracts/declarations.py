"""Declaration API: attach contracts to the next function definition.

Three interchangeable surfaces, all producing one EnforcementBinding per
function:

1. Explicit scope builder::

       contracts = ContractScope()

       contracts.param("x", int)
       contracts.returns(str)
       @contracts
       def render(x): ...

2. Stackable decorators::

       @param("x", int)
       @returns(str)
       def render(x): ...

3. Declarative classes, where every function definition in the class body
   consumes whatever was declared just before it::

       class Sample(Contracted):
           param("x", int)
           def foo(self, x): ...

           param("value", str)
           attr_accessor("name", "title")

Contracts are only enforced if ``config().enabled`` is true at the moment a
function is defined.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from method_contracts.contracts.types import NO_CONTRACT, ContractSpec, Predicate
from method_contracts.core.annotations import AnnotationRecord, ParamContract, ReturnContract
from method_contracts.core.config import config
from method_contracts.core.logging import get_logger
from method_contracts.engine.accessors import accessor_properties
from method_contracts.engine.enforcer import enforce, get_binding
from method_contracts.matchers import ArrayOf, HashOf, MapOf

logger = get_logger(__name__)

F = TypeVar("F")

# Attribute carrying the consumed AnnotationRecord on the original function.
RECORD_ATTRIBUTE = "__contract_record__"


def _split_descriptor(obj: Any) -> tuple[Callable[..., Any], Callable[[Any], Any] | None]:
    """Separate a function from a staticmethod/classmethod wrapper."""
    if isinstance(obj, (staticmethod, classmethod)):
        return obj.__func__, type(obj)
    return obj, None


def _attach(func: Callable[..., Any], record: AnnotationRecord, *, owner: str | None = None) -> Callable[..., Any]:
    """Wrap the original behind ``func`` with ``record``.

    A wrapper carries its contracts in its binding. When nothing wraps the
    function (contracts disabled), the record is kept on the function itself
    so the declarations stay inspectable.
    """
    binding = get_binding(func)
    original = binding.original if binding is not None else func
    wrapped = enforce(original, record, owner=owner)
    if get_binding(wrapped) is None:
        setattr(wrapped, RECORD_ATTRIBUTE, record)
    return wrapped


def annotations_of(func: Any) -> AnnotationRecord | None:
    """Contracts declared for ``func`` (wrapped or not), or None."""
    func, _ = _split_descriptor(func)
    binding = get_binding(func)
    if binding is not None:
        return binding.to_record()
    record = getattr(func, RECORD_ATTRIBUTE, None)
    return record.copy() if isinstance(record, AnnotationRecord) else None


class ContractScope:
    """Pending-annotation accumulator for one declarative scope.

    ``param``/``returns`` add to the pending record; the next definition
    passed through the scope consumes it. Definitions with nothing pending
    are returned untouched.

    Not safe for concurrent declaration: scopes are filled while a module or
    class body loads.
    """

    def __init__(self, owner: str | None = None) -> None:
        self._owner = owner
        self._pending: AnnotationRecord | None = None
        self._annotations: dict[str, AnnotationRecord] = {}

    @property
    def owner(self) -> str | None:
        return self._owner

    @property
    def pending(self) -> AnnotationRecord | None:
        return self._pending

    def _record(self) -> AnnotationRecord:
        if self._pending is None:
            self._pending = AnnotationRecord()
        return self._pending

    def param(self, name: str, contract: ContractSpec = NO_CONTRACT, *, predicate: Predicate | None = None) -> None:
        """Declare a contract for parameter ``name`` of the next definition.

        Args:
            name: Parameter the contract applies to
            contract: A literal, class, pattern, list of alternatives or matcher
            predicate: Callback returning truthy for valid values, instead of ``contract``

        Raises:
            ConfigurationError: Empty name, or not exactly one of contract/predicate
        """
        declared = ParamContract.declare(name, contract, predicate=predicate)
        self._record().add_param(declared)

    def returns(self, contract: ContractSpec = NO_CONTRACT, *, predicate: Predicate | None = None) -> None:
        """Declare the return contract of the next definition.

        Raises:
            ConfigurationError: If a return contract is already pending, or
                not exactly one of contract/predicate is given
        """
        declared = ReturnContract.declare(contract, predicate=predicate)
        self._record().set_return(declared)

    def returns_a(self, contract: ContractSpec) -> None:
        self.returns(contract)

    returns_an = returns_a

    def consume(self) -> AnnotationRecord | None:
        """Take the pending record and reset the scope."""
        record, self._pending = self._pending, None
        return record

    def annotations(self, name: str | None = None) -> Any:
        """Records consumed so far, or the one for ``name``."""
        if name is not None:
            return self._annotations.get(name)
        return dict(self._annotations)

    def define(self, obj: F, name: str | None = None) -> F:
        """Bind the pending record to ``obj`` (function, staticmethod, classmethod or property)."""
        if isinstance(obj, property):
            return self.define_property(obj, name)  # type: ignore[return-value]
        record = self.consume()
        if record is None:
            return obj
        func, rewrap = _split_descriptor(obj)
        self._annotations[name or func.__name__] = record
        wrapped = _attach(func, record, owner=self._owner)
        return rewrap(wrapped) if rewrap is not None else wrapped  # type: ignore[return-value]

    __call__ = define

    def define_property(self, prop: property, name: str | None = None) -> property:
        """Bind the pending record to a hand-written property.

        The getter takes the return contract and the setter the parameter
        contracts, as for generated accessors. A half left without contracts
        keeps its current function, so contracts declared above
        ``@name.setter`` do not strip the getter's.
        """
        record = self.consume()
        if record is None:
            return prop
        accessor = prop.fget if prop.fget is not None else prop.fset
        name = name or getattr(accessor, "__name__", "<property>")
        fget, fset = prop.fget, prop.fset
        getter_record, setter_record = record.for_getter(), record.for_setter()
        if fget is not None and not getter_record.is_empty:
            self._annotations[name] = getter_record
            fget = _attach(fget, getter_record, owner=self._owner)
        if fset is not None and not setter_record.is_empty:
            self._annotations[f"{name}="] = setter_record
            fset = _attach(fset, setter_record, owner=self._owner)
        return property(fget, fset, prop.fdel, prop.__doc__)

    def discard(self, name: str) -> None:
        """Drop the pending record for a definition that cannot carry contracts."""
        if self.consume() is not None:
            logger.debug(
                "contract_annotation_discarded",
                owner=self._owner,
                name=name,
                reason="definition cannot carry contracts",
            )

    def _accessors(self, names: tuple[str, ...], *, reader: bool, writer: bool) -> dict[str, property]:
        record = self.consume()
        if record is not None:
            for name in names:
                if reader:
                    self._annotations[name] = record.for_getter()
                if writer:
                    self._annotations[f"{name}="] = record.for_setter()
        return accessor_properties(names, record, reader=reader, writer=writer, owner=self._owner)

    def attr_accessor(self, *names: str) -> dict[str, property]:
        """Read/write properties; the pending record is split and cloned per name."""
        return self._accessors(names, reader=True, writer=True)

    def attr_reader(self, *names: str) -> dict[str, property]:
        """Read-only properties carrying the pending return contract."""
        return self._accessors(names, reader=True, writer=False)

    def attr_writer(self, *names: str) -> dict[str, property]:
        """Write-only properties carrying the pending parameter contracts."""
        return self._accessors(names, reader=False, writer=True)


# =============================================================================
# Stackable decorators
# =============================================================================


def _amend(obj: F, update: Callable[[AnnotationRecord], None]) -> F:
    """Fold one more declaration into the single binding of ``obj``."""
    func, rewrap = _split_descriptor(obj)
    binding = get_binding(func)
    owner: str | None = None
    if binding is not None:
        record = binding.to_record()
        owner = binding.owner
    elif not config().enabled:
        # Unwrapped stacking: every decorator sees the same function object
        stored = getattr(func, RECORD_ATTRIBUTE, None)
        record = stored.copy() if isinstance(stored, AnnotationRecord) else AnnotationRecord()
    else:
        record = AnnotationRecord()
    update(record)
    wrapped = _attach(func, record, owner=owner)
    return rewrap(wrapped) if rewrap is not None else wrapped  # type: ignore[return-value]


def param(
    name: str, contract: ContractSpec = NO_CONTRACT, *, predicate: Predicate | None = None
) -> Callable[[F], F]:
    """Decorator declaring a parameter contract.

    Stacked ``@param`` decorators keep top-to-bottom order.
    """
    declared = ParamContract.declare(name, contract, predicate=predicate)

    def decorate(func: F) -> F:
        return _amend(func, lambda record: record.params.insert(0, declared))

    return decorate


def returns(contract: ContractSpec = NO_CONTRACT, *, predicate: Predicate | None = None) -> Callable[[F], F]:
    """Decorator declaring the return contract (at most one per function)."""
    declared = ReturnContract.declare(contract, predicate=predicate)

    def decorate(func: F) -> F:
        return _amend(func, lambda record: record.set_return(declared))

    return decorate


def returns_a(contract: ContractSpec) -> Callable[[F], F]:
    return returns(contract)


returns_an = returns_a


# =============================================================================
# Declarative classes
# =============================================================================

_NAMESPACE_HELPERS = (
    "param",
    "returns",
    "returns_a",
    "returns_an",
    "attr_accessor",
    "attr_reader",
    "attr_writer",
    "ArrayOf",
    "MapOf",
    "HashOf",
)


class _DeclarativeNamespace(dict[str, Any]):
    """Class-body namespace that binds pending contracts to each new function."""

    def __init__(self, scope: ContractScope) -> None:
        super().__init__()
        self.scope = scope
        self.helpers: dict[str, Any] = {
            "param": scope.param,
            "returns": scope.returns,
            "returns_a": scope.returns_a,
            "returns_an": scope.returns_an,
            "attr_accessor": lambda *names: self.update(scope.attr_accessor(*names)),
            "attr_reader": lambda *names: self.update(scope.attr_reader(*names)),
            "attr_writer": lambda *names: self.update(scope.attr_writer(*names)),
            "ArrayOf": ArrayOf,
            "MapOf": MapOf,
            "HashOf": HashOf,
        }
        for name, helper in self.helpers.items():
            dict.__setitem__(self, name, helper)

    def __setitem__(self, key: str, value: Any) -> None:
        if self.scope.pending is not None and not isinstance(value, type):
            if isinstance(value, (staticmethod, classmethod, property)) or callable(value):
                value = self.scope.define(value, key)
            elif hasattr(type(value), "__get__"):
                # Other descriptors (cached_property and the like)
                self.scope.discard(key)
        super().__setitem__(key, value)


class ContractMeta(type):
    """Metaclass giving class bodies the declaration helpers.

    Helpers are removed from the namespace before the class is created, so
    they never become class attributes.
    """

    @classmethod
    def __prepare__(mcls, name: str, bases: tuple[type, ...], **kwargs: Any) -> _DeclarativeNamespace:  # type: ignore[override]
        return _DeclarativeNamespace(ContractScope(owner=name))

    def __new__(mcls, name: str, bases: tuple[type, ...], namespace: dict[str, Any], **kwargs: Any) -> ContractMeta:
        attrs = dict(namespace)
        scope: ContractScope | None = None
        if isinstance(namespace, _DeclarativeNamespace):
            scope = namespace.scope
            for helper_name in _NAMESPACE_HELPERS:
                if attrs.get(helper_name) is namespace.helpers[helper_name]:
                    del attrs[helper_name]
            leftover = scope.consume()
            if leftover is not None:
                logger.debug("contract_annotation_discarded", owner=name, reason="no definition followed")
        cls = super().__new__(mcls, name, bases, attrs, **kwargs)
        cls.__contract_scope__ = scope if scope is not None else ContractScope(owner=name)
        return cls

    def annotations(cls, name: str | None = None) -> Any:
        """Records consumed by this class body, or the one for ``name``."""
        return cls.__contract_scope__.annotations(name)


class Contracted(metaclass=ContractMeta):
    """Base class whose body may use the declaration helpers."""

    __slots__ = ()


# Published as builtins by ContractSettings.include_everywhere().
EVERYWHERE_HELPERS: dict[str, Any] = {
    "param": param,
    "returns": returns,
    "returns_a": returns_a,
    "returns_an": returns_an,
    "ArrayOf": ArrayOf,
    "MapOf": MapOf,
    "HashOf": HashOf,
}
