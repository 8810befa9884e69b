"""
Token Visitor Pattern

Abstract visitor over the closed set of token tree nodes.

Design:
- One abstract visit_* method per node class (and one for plain ints)
- Subclasses must handle every variant, so a new node type cannot be
  silently ignored by an engine
- visit_value() is the single entry point for unit values, which may be
  plain ints without an accept() method
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from .errors import ChronospecImplementationError

T = TypeVar('T')


class TokenVisitor(ABC, Generic[T]):
    """
    Base token visitor.

    Usage:
        class MyVisitor(TokenVisitor[Result]):
            def visit_date(self, node) -> Result:
                return combine(self.visit_value(v) for _, v in node.units)
            ...
    """

    def visit_value(self, value: Any) -> T:
        """Dispatch any token or unit value, including plain ints"""
        if isinstance(value, bool):
            raise ChronospecImplementationError(f"Unexpected boolean in token tree: {value!r}")
        if isinstance(value, int):
            return self.visit_integer(value)
        accept = getattr(value, "accept", None)
        if accept is None:
            raise ChronospecImplementationError(
                f"{self.__class__.__name__} cannot visit {type(value).__name__}: {value!r}"
            )
        return accept(self)

    @abstractmethod
    def visit_integer(self, value: int) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_integer()")

    @abstractmethod
    def visit_range(self, node) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_range()")

    @abstractmethod
    def visit_all_of(self, node) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_all_of()")

    @abstractmethod
    def visit_one_of(self, node) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_one_of()")

    @abstractmethod
    def visit_mask(self, node) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_mask()")

    @abstractmethod
    def visit_recurrence(self, node) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_recurrence()")

    @abstractmethod
    def visit_time_shift(self, node) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_time_shift()")

    @abstractmethod
    def visit_selection(self, node) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_selection()")

    @abstractmethod
    def visit_group(self, node) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_group()")

    @abstractmethod
    def visit_date(self, node) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_date()")

    @abstractmethod
    def visit_time_of_day(self, node) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_time_of_day()")

    @abstractmethod
    def visit_datetime(self, node) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_datetime()")

    @abstractmethod
    def visit_duration(self, node) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_duration()")

    @abstractmethod
    def visit_interval(self, node) -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_interval()")
