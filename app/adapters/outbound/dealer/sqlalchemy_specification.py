"""Compile specifications into SQLAlchemy statements."""

from typing import Any, Optional

from sqlalchemy import ColumnElement, Select, String, and_, func, not_

from app.domain.specifications.specification import (
    AllSpecification,
    AndSpecification,
    DistinctSpecification,
    FieldSpecification,
    NotSpecification,
    Operator,
    Specification,
    is_distinct,
)


def to_clause(specification: Specification, model: Any) -> Optional[ColumnElement[bool]]:
    """
    Compile a specification into a WHERE clause.

    Args:
        specification: Specification to compile
        model: ORM model whose attributes match the specification fields

    Returns:
        Boolean clause, or None when the specification filters nothing
    """
    if isinstance(specification, (AllSpecification, DistinctSpecification)):
        return None

    if isinstance(specification, AndSpecification):
        left = to_clause(specification.left, model)
        right = to_clause(specification.right, model)
        if left is None:
            return right
        if right is None:
            return left
        return and_(left, right)

    if isinstance(specification, NotSpecification):
        inner = to_clause(specification.inner, model)
        return not_(inner) if inner is not None else None

    if isinstance(specification, FieldSpecification):
        return _field_clause(specification, getattr(model, specification.field))

    raise TypeError(f"Unsupported specification: {type(specification).__name__}")


def _field_clause(specification: FieldSpecification, column: Any) -> ColumnElement[bool]:
    operator = specification.operator
    value = specification.value

    if operator is Operator.EQUALS:
        return column == value
    if operator is Operator.IN:
        return column.in_(list(value))
    if operator is Operator.IS_NULL:
        return column.is_(None)
    if operator is Operator.IS_NOT_NULL:
        return column.is_not(None)
    if operator is Operator.GREATER_THAN:
        return column > value
    if operator is Operator.GREATER_THAN_OR_EQUAL:
        return column >= value
    if operator is Operator.LESS_THAN:
        return column < value
    if operator is Operator.LESS_THAN_OR_EQUAL:
        return column <= value
    if operator is Operator.CONTAINS_IGNORE_CASE:
        return func.lower(column, type_=String()).contains(str(value).lower(), autoescape=True)

    raise ValueError(f"Unsupported operator: {operator}")


def apply_specification(statement: Select, specification: Specification, model: Any) -> Select:
    """
    Apply a specification to a SELECT statement.

    Args:
        statement: Statement to restrict
        specification: Specification to apply
        model: ORM model queried by the statement

    Returns:
        Statement with DISTINCT and WHERE applied as requested
    """
    if is_distinct(specification):
        statement = statement.distinct()
    clause = to_clause(specification, model)
    if clause is not None:
        statement = statement.where(clause)
    return statement
