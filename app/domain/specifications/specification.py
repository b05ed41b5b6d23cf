"""Composable query specifications.

A specification is a small expression tree describing which entities a query
should return. Stores evaluate it in memory (``evaluate`` /
``is_satisfied_by``) or compile it into their own query language.

Evaluation follows SQL three-valued logic so that every store returns the
same rows: comparing a null field yields ``None`` (unknown), ``NOT unknown``
is unknown, and only rows whose predicate is ``True`` match.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional


class Operator(str, Enum):
    """Field comparison operators."""

    EQUALS = "equals"
    IN = "in"
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"
    CONTAINS_IGNORE_CASE = "contains_ignore_case"


class Specification(ABC):
    """Base class for specification nodes."""

    @abstractmethod
    def evaluate(self, entity: Any) -> Optional[bool]:
        """
        Evaluate the specification against an entity.

        Args:
            entity: Object exposing the referenced fields as attributes

        Returns:
            True, False, or None when the outcome is unknown (null comparison)
        """
        pass

    def is_satisfied_by(self, entity: Any) -> bool:
        """Whether the entity belongs to the result set."""
        return self.evaluate(entity) is True

    def __and__(self, other: "Specification") -> "Specification":
        return AndSpecification(self, other)

    def __invert__(self) -> "Specification":
        return NotSpecification(self)

    def terms(self) -> Iterator["Specification"]:
        """Yield the AND-ed terms of this specification, left to right."""
        yield self


@dataclass(frozen=True)
class AllSpecification(Specification):
    """Matches every entity."""

    def evaluate(self, entity: Any) -> Optional[bool]:
        return True

    def __and__(self, other: Specification) -> Specification:
        return other

    def terms(self) -> Iterator[Specification]:
        return iter(())


@dataclass(frozen=True)
class DistinctSpecification(Specification):
    """Flags the query as distinct; contributes no row predicate."""

    distinct: bool

    def evaluate(self, entity: Any) -> Optional[bool]:
        return True


@dataclass(frozen=True)
class FieldSpecification(Specification):
    """Compares a single entity field against a value."""

    field: str
    operator: Operator
    value: Any = None

    def evaluate(self, entity: Any) -> Optional[bool]:
        actual = getattr(entity, self.field)

        if self.operator is Operator.IS_NULL:
            return actual is None
        if self.operator is Operator.IS_NOT_NULL:
            return actual is not None
        if actual is None:
            return None

        if self.operator is Operator.EQUALS:
            return actual == self.value
        if self.operator is Operator.IN:
            return actual in self.value
        if self.operator is Operator.GREATER_THAN:
            return actual > self.value
        if self.operator is Operator.GREATER_THAN_OR_EQUAL:
            return actual >= self.value
        if self.operator is Operator.LESS_THAN:
            return actual < self.value
        if self.operator is Operator.LESS_THAN_OR_EQUAL:
            return actual <= self.value
        if self.operator is Operator.CONTAINS_IGNORE_CASE:
            return str(self.value).lower() in str(actual).lower()

        raise ValueError(f"Unsupported operator: {self.operator}")


@dataclass(frozen=True)
class AndSpecification(Specification):
    """Logical conjunction of two specifications."""

    left: Specification
    right: Specification

    def evaluate(self, entity: Any) -> Optional[bool]:
        left = self.left.evaluate(entity)
        if left is False:
            return False
        right = self.right.evaluate(entity)
        if right is False:
            return False
        if left is None or right is None:
            return None
        return True

    def terms(self) -> Iterator[Specification]:
        yield from self.left.terms()
        yield from self.right.terms()


@dataclass(frozen=True)
class NotSpecification(Specification):
    """Logical negation of a specification."""

    inner: Specification

    def evaluate(self, entity: Any) -> Optional[bool]:
        result = self.inner.evaluate(entity)
        if result is None:
            return None
        return not result


def is_distinct(specification: Specification) -> bool:
    """
    Whether a specification requests distinct results.

    Args:
        specification: Composed specification

    Returns:
        True if any top-level term is a true DistinctSpecification
    """
    return any(
        isinstance(term, DistinctSpecification) and term.distinct
        for term in specification.terms()
    )
