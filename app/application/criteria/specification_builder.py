"""Translate typed filters into specifications."""

from app.application.criteria.filters import Filter, RangeFilter, StringFilter
from app.domain.specifications.specification import (
    AllSpecification,
    FieldSpecification,
    Operator,
    Specification,
)


def build_specification(field_filter: Filter, field: str) -> Specification:
    """
    Build the specification for the conditions shared by every filter type.

    Every condition that is set becomes its own AND-ed clause.

    Args:
        field_filter: Parsed filter
        field: Entity attribute the filter applies to

    Returns:
        Composed specification (AllSpecification if no condition is set)
    """
    specification: Specification = AllSpecification()
    if field_filter.equals is not None:
        specification &= FieldSpecification(field, Operator.EQUALS, field_filter.equals)
    if field_filter.not_equals is not None:
        specification &= ~FieldSpecification(field, Operator.EQUALS, field_filter.not_equals)
    if field_filter.specified is not None:
        operator = Operator.IS_NOT_NULL if field_filter.specified else Operator.IS_NULL
        specification &= FieldSpecification(field, operator)
    if field_filter.in_ is not None:
        specification &= FieldSpecification(field, Operator.IN, tuple(field_filter.in_))
    if field_filter.not_in is not None:
        specification &= ~FieldSpecification(field, Operator.IN, tuple(field_filter.not_in))
    return specification


def build_range_specification(field_filter: RangeFilter, field: str) -> Specification:
    """
    Build the specification for a range filter.

    Args:
        field_filter: Parsed range filter
        field: Entity attribute the filter applies to

    Returns:
        Composed specification
    """
    specification = build_specification(field_filter, field)
    if field_filter.greater_than is not None:
        specification &= FieldSpecification(
            field, Operator.GREATER_THAN, field_filter.greater_than
        )
    if field_filter.greater_than_or_equal is not None:
        specification &= FieldSpecification(
            field, Operator.GREATER_THAN_OR_EQUAL, field_filter.greater_than_or_equal
        )
    if field_filter.less_than is not None:
        specification &= FieldSpecification(field, Operator.LESS_THAN, field_filter.less_than)
    if field_filter.less_than_or_equal is not None:
        specification &= FieldSpecification(
            field, Operator.LESS_THAN_OR_EQUAL, field_filter.less_than_or_equal
        )
    return specification


def build_string_specification(field_filter: StringFilter, field: str) -> Specification:
    """
    Build the specification for a string filter.

    ``contains`` and ``doesNotContain`` match case-insensitively.

    Args:
        field_filter: Parsed string filter
        field: Entity attribute the filter applies to

    Returns:
        Composed specification
    """
    specification = build_specification(field_filter, field)
    if field_filter.contains is not None:
        specification &= FieldSpecification(
            field, Operator.CONTAINS_IGNORE_CASE, field_filter.contains
        )
    if field_filter.does_not_contain is not None:
        specification &= ~FieldSpecification(
            field, Operator.CONTAINS_IGNORE_CASE, field_filter.does_not_contain
        )
    return specification
