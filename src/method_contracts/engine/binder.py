"""Call binder: recombine one call's arguments into a name -> value map.

Given a SignatureModel and the actual positional and keyword arguments of a
single invocation, reconstruct which value each declared parameter received,
so contracts are checked against the right name.

Algorithm:
1. Every slot except the variadic-keyword one starts as NOT_PROVIDED.
2. A leading run of keyword arguments that names the declared keyword slots
   in declaration order is taken out of the keyword arguments; these values
   are supplied positionally to the keyword slots.
3. The positional arguments are walked against the positional slots. The
   variadic slot, when the cursor reaches it, takes the surplus: however
   many arguments exceed the remaining named positional slots (possibly
   none, binding an empty tuple).
4. A variadic slot the cursor never reached takes the unconsumed tail of
   the original positional arguments.
5. The variadic-keyword slot takes the keyword arguments still left.

Python calling conventions add two steps before 5: keyword arguments
that name a still-unbound slot bind by name, and anything that cannot be
placed marks the call as overflowing. Declared defaults are never filled
in: a slot the caller omitted stays NOT_PROVIDED, so the call is reported
incomplete and its contracts are not checked.

Runs in O(number of declared parameters + number of arguments).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from method_contracts.contracts.enums import ParamKind
from method_contracts.contracts.signature import SignatureModel
from method_contracts.contracts.types import NOT_PROVIDED


@dataclass(frozen=True, slots=True)
class BoundCall:
    """Result of recombining one call.

    Attributes:
        values: Slot name -> bound value (NOT_PROVIDED when nothing arrived),
            in declaration order; the variadic-keyword slot is only present
            when declared
        overflow: True if some argument could not be placed (too many
            positionals, unexpected keyword, or a slot given twice)
    """

    values: dict[str, Any]
    overflow: bool = False

    @property
    def unbound(self) -> tuple[str, ...]:
        return tuple(name for name, value in self.values.items() if value is NOT_PROVIDED)

    @property
    def is_complete(self) -> bool:
        """Whether the call is well-formed enough for contracts to be checked."""
        return not self.overflow and not self.unbound


def _take_leading_keywords(signature: SignatureModel, kwargs: dict[str, Any]) -> list[Any]:
    """Remove the leading keyword run that follows keyword-slot order.

    Mutates ``kwargs``. The run stops at the first keyword argument that is
    not the next declared keyword slot.
    """
    keyword_names = [slot.name for slot in signature.keyword_slots]
    taken: list[str] = []
    for index, name in enumerate(kwargs):
        if index >= len(keyword_names) or keyword_names[index] != name:
            break
        taken.append(name)
    return [kwargs.pop(name) for name in taken]


def recombine(
    signature: SignatureModel,
    args: tuple[Any, ...] | list[Any],
    kwargs: Mapping[str, Any],
) -> BoundCall:
    """Bind one call's arguments to the declared slots.

    Args:
        signature: Declared parameter list of the called function
        args: Positional arguments exactly as passed
        kwargs: Keyword arguments exactly as passed (insertion order matters)

    Returns:
        BoundCall with a value (or NOT_PROVIDED) for every slot
    """
    values: dict[str, Any] = {
        slot.name: NOT_PROVIDED for slot in signature.slots if slot.kind != ParamKind.VARIADIC_KEYWORD
    }
    remaining = dict(kwargs)
    overflow = False

    # Step 2: leading keyword run, supplied positionally to the keyword slots
    leading = _take_leading_keywords(signature, remaining)
    for slot, value in zip(signature.keyword_slots, leading, strict=False):
        values[slot.name] = value

    # Step 3: positional walk
    positional_slots = signature.positional_slots
    named_positional = sum(1 for slot in positional_slots if slot.kind != ParamKind.VARIADIC_POSITIONAL)
    surplus = len(args) - named_positional
    cursor = 0
    for slot in positional_slots:
        if slot.kind == ParamKind.VARIADIC_POSITIONAL:
            take = max(surplus, 0)
            values[slot.name] = tuple(args[cursor : cursor + take])
            cursor += take
            continue
        if cursor >= len(args):
            break
        values[slot.name] = args[cursor]
        cursor += 1

    # Step 4: variadic slot the cursor never reached
    variadic = signature.variadic
    if variadic is not None and values[variadic.name] is NOT_PROVIDED:
        values[variadic.name] = tuple(args[cursor:])
        cursor = len(args)

    if cursor < len(args):
        overflow = True

    # Keywords naming an unbound slot bind by name
    for name in list(remaining):
        slot = signature.get(name)
        if slot is None or not slot.accepts_keyword:
            continue
        value = remaining.pop(name)
        if values[name] is NOT_PROVIDED:
            values[name] = value
        else:
            overflow = True

    # Step 5: keyword remainder
    variadic_keyword = signature.variadic_keyword
    if variadic_keyword is not None:
        values[variadic_keyword.name] = remaining
    elif remaining:
        overflow = True

    return BoundCall(values=values, overflow=overflow)
