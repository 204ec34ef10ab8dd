"""Enforcement engine: call binding, wrapping and generated accessors."""

from method_contracts.engine.accessors import (
    accessor_properties,
    make_reader,
    make_writer,
)
from method_contracts.engine.binder import BoundCall, recombine
from method_contracts.engine.enforcer import (
    BINDING_ATTRIBUTE,
    EnforcementBinding,
    build_wrapper,
    enforce,
    get_binding,
    static_owner_name,
)

__all__ = [
    "BINDING_ATTRIBUTE",
    "BoundCall",
    "EnforcementBinding",
    "accessor_properties",
    "build_wrapper",
    "enforce",
    "get_binding",
    "make_reader",
    "make_writer",
    "recombine",
    "static_owner_name",
]
