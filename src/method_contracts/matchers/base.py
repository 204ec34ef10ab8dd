"""Matcher protocol: the atomic evaluable contract."""

from abc import ABC, abstractmethod
from typing import Any


class Matcher(ABC):
    """Checks a single value against a contract.

    Subclasses must keep ``match`` pure and total: no side effects, and no
    exception for a well-formed input. ``describe`` is used verbatim in
    violation messages, so it must be stable.

    A subclass whose constructor takes no required arguments can be used as
    a contract by naming the class itself.
    """

    __slots__ = ()

    @abstractmethod
    def match(self, value: Any) -> bool:
        """Return True if ``value`` satisfies this matcher."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable phrase, e.g. ``be a int``."""

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.describe()}>"
