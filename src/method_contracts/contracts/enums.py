"""Kinds used to describe a function's declared parameter list."""

from enum import StrEnum


class ParamKind(StrEnum):
    """Kind of one declared parameter slot.

    Order of declaration is kept by SignatureModel, not by this enum.
    """

    POSITIONAL = "positional"
    POSITIONAL_WITH_DEFAULT = "positional_with_default"
    VARIADIC_POSITIONAL = "variadic_positional"
    KEYWORD = "keyword"
    VARIADIC_KEYWORD = "variadic_keyword"

    @property
    def is_variadic(self) -> bool:
        return self in (ParamKind.VARIADIC_POSITIONAL, ParamKind.VARIADIC_KEYWORD)

    @property
    def is_positional(self) -> bool:
        """Whether the slot can receive a value from the positional stream."""
        return self in (ParamKind.POSITIONAL, ParamKind.POSITIONAL_WITH_DEFAULT)
