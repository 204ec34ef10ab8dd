"""Signature model: the declared parameter list of one function.

- ParamSlot: Immutable description of one declared parameter
- SignatureModel: Ordered slots with O(1) name lookup

A model is built once, when a function becomes eligible for wrapping, and is
shared by every later call to that function. It can be reflected from a live
Python callable or declared by hand for callables whose parameter list cannot
be introspected.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from method_contracts.contracts.enums import ParamKind
from method_contracts.contracts.types import NO_DEFAULT

_INSPECT_KINDS: dict[Any, ParamKind] = {
    inspect.Parameter.VAR_POSITIONAL: ParamKind.VARIADIC_POSITIONAL,
    inspect.Parameter.KEYWORD_ONLY: ParamKind.KEYWORD,
    inspect.Parameter.VAR_KEYWORD: ParamKind.VARIADIC_KEYWORD,
}


@dataclass(frozen=True, slots=True)
class ParamSlot:
    """One declared parameter.

    Attributes:
        name: Parameter name as declared
        kind: Slot kind (positional, defaulted, variadic, keyword, keyword-rest)
        default: Declared default value, or NO_DEFAULT
        positional_only: True if the slot cannot be filled by name
    """

    name: str
    kind: ParamKind
    default: Any = NO_DEFAULT
    positional_only: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ParamSlot requires a non-empty name")
        if self.kind.is_variadic and self.default is not NO_DEFAULT:
            raise ValueError(f"Variadic slot '{self.name}' cannot declare a default")

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT

    @property
    def accepts_keyword(self) -> bool:
        """Whether a keyword argument of this name can fill the slot."""
        if self.positional_only:
            return False
        return self.kind.is_positional or self.kind == ParamKind.KEYWORD


@dataclass(frozen=True, slots=True)
class SignatureModel:
    """Immutable, ordered parameter list of a function.

    Attributes:
        slots: Slots in original declaration order
    """

    slots: tuple[ParamSlot, ...]

    # Computed indices - populated in __post_init__
    _by_name: dict[str, ParamSlot] = field(default_factory=dict, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        """Build the name index and check variadic cardinality.

        Raises:
            ValueError: On duplicate names or more than one variadic slot of a kind
        """
        names = [slot.name for slot in self.slots]
        if len(names) != len(set(names)):
            duplicates = {n for n in names if names.count(n) > 1}
            raise ValueError(f"Duplicate parameter names in signature: {sorted(duplicates)}")

        for kind in (ParamKind.VARIADIC_POSITIONAL, ParamKind.VARIADIC_KEYWORD):
            if sum(1 for slot in self.slots if slot.kind == kind) > 1:
                raise ValueError(f"Signature declares more than one {kind} slot")

        object.__setattr__(self, "_by_name", {slot.name: slot for slot in self.slots})

    @classmethod
    def of(cls, *slots: ParamSlot) -> SignatureModel:
        """Declare a model by hand."""
        return cls(slots=tuple(slots))

    @classmethod
    def from_callable(cls, func: Callable[..., Any]) -> SignatureModel:
        """Reflect the declared parameter list of a Python callable.

        Wrapped callables (functools.wraps) are followed to the original.

        Raises:
            ValueError: If the callable has no introspectable signature
        """
        slots = []
        for parameter in inspect.signature(func).parameters.values():
            default = NO_DEFAULT if parameter.default is inspect.Parameter.empty else parameter.default
            kind = _INSPECT_KINDS.get(parameter.kind)
            if kind is None:
                kind = ParamKind.POSITIONAL if default is NO_DEFAULT else ParamKind.POSITIONAL_WITH_DEFAULT
            slots.append(
                ParamSlot(
                    name=parameter.name,
                    kind=kind,
                    default=default,
                    positional_only=parameter.kind == inspect.Parameter.POSITIONAL_ONLY,
                )
            )
        return cls(slots=tuple(slots))

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> ParamSlot | None:
        return self._by_name.get(name)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(slot.name for slot in self.slots)

    @property
    def variadic(self) -> ParamSlot | None:
        """The variadic-positional slot, if declared."""
        return next((s for s in self.slots if s.kind == ParamKind.VARIADIC_POSITIONAL), None)

    @property
    def variadic_keyword(self) -> ParamSlot | None:
        """The variadic-keyword slot, if declared."""
        return next((s for s in self.slots if s.kind == ParamKind.VARIADIC_KEYWORD), None)

    @property
    def positional_slots(self) -> tuple[ParamSlot, ...]:
        """Slots walked by the positional stream, variadic included, in order."""
        return tuple(s for s in self.slots if s.kind.is_positional or s.kind == ParamKind.VARIADIC_POSITIONAL)

    @property
    def keyword_slots(self) -> tuple[ParamSlot, ...]:
        return tuple(s for s in self.slots if s.kind == ParamKind.KEYWORD)

    @property
    def first_positional_name(self) -> str | None:
        """Name of the leading positional slot (``self``/``cls`` for methods)."""
        if self.slots and self.slots[0].kind.is_positional:
            return self.slots[0].name
        return None
