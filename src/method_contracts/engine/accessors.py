"""Generated accessors with contracts.

One pending annotation covers every property named in the same
``attr_accessor``/``attr_reader``/``attr_writer`` declaration. It is split
per accessor: readers keep only the return contract, writers keep only the
parameter contracts (their single parameter is ``value``). Each generated
function gets its own EnforcementBinding.

Values live in the instance ``__dict__`` under the property name; reading a
property that was never written returns None.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from method_contracts.core.annotations import AnnotationRecord
from method_contracts.engine.enforcer import enforce


def _name_function(func: Callable[..., Any], name: str, owner: str | None) -> None:
    func.__name__ = name
    func.__qualname__ = f"{owner}.{name}" if owner else name


def make_reader(name: str, record: AnnotationRecord | None = None, *, owner: str | None = None) -> Callable[[Any], Any]:
    """Build a getter for ``name``, checked against the record's return contract."""

    def reader(self: Any) -> Any:
        return vars(self).get(name)

    _name_function(reader, name, owner)
    return enforce(reader, record.for_getter() if record is not None else None, owner=owner)


def make_writer(
    name: str, record: AnnotationRecord | None = None, *, owner: str | None = None
) -> Callable[[Any, Any], None]:
    """Build a setter for ``name``, checked against the record's parameter contracts."""

    def writer(self: Any, value: Any) -> None:
        vars(self)[name] = value

    _name_function(writer, name, owner)
    return enforce(writer, record.for_setter() if record is not None else None, owner=owner)


def accessor_properties(
    names: Iterable[str],
    record: AnnotationRecord | None,
    *,
    reader: bool = True,
    writer: bool = True,
    owner: str | None = None,
) -> dict[str, property]:
    """Build one property per name, each from its own copy of ``record``.

    Args:
        names: Property names declared together
        record: Pending annotation consumed by the declaration (may be None)
        reader: Generate getters
        writer: Generate setters
        owner: Owner name for generated functions

    Returns:
        Property name -> property object
    """
    properties: dict[str, property] = {}
    for name in names:
        if not name:
            raise ValueError("Accessor names must be non-empty")
        own = record.copy() if record is not None else None
        fget = make_reader(name, own, owner=owner) if reader else None
        fset = make_writer(name, own, owner=owner) if writer else None
        properties[name] = property(fget, fset)
    return properties
