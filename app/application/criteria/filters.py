"""Typed per-field filters parsed from ``<field>.<operator>=<value>`` parameters."""

import re
from dataclasses import dataclass, fields
from typing import ClassVar, Generic, Optional, TypeVar

from app.application.criteria.errors import MalformedFilterError

T = TypeVar("T")

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_INTEGER_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")


def parse_boolean(parameter: str, raw_value: str) -> bool:
    """
    Parse a 'true'/'false' query parameter value.

    Args:
        parameter: Parameter name, for error reporting
        raw_value: Raw query string value

    Returns:
        Parsed boolean

    Raises:
        MalformedFilterError: If the value is neither 'true' nor 'false'
    """
    normalized = raw_value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise MalformedFilterError(parameter, f"expected 'true' or 'false', got {raw_value!a}")


@dataclass
class Filter(Generic[T]):
    """Conditions shared by every filter type."""

    # Query operator name -> attribute name
    CONDITIONS: ClassVar[dict[str, str]] = {
        "equals": "equals",
        "notEquals": "not_equals",
        "specified": "specified",
        "in": "in_",
        "notIn": "not_in",
    }
    LIST_CONDITIONS: ClassVar[frozenset[str]] = frozenset({"in", "notIn"})

    equals: Optional[T] = None
    not_equals: Optional[T] = None
    specified: Optional[bool] = None
    in_: Optional[list[T]] = None
    not_in: Optional[list[T]] = None

    def convert(self, parameter: str, raw_value: str) -> T:
        """Convert a raw query string value to the filter's value type."""
        return raw_value

    def set_condition(self, parameter: str, operator: str, raw_value: str) -> None:
        """
        Apply one ``<operator>=<raw_value>`` condition.

        Args:
            parameter: Full query parameter name, for error reporting
            operator: Operator suffix from the query parameter
            raw_value: Raw query string value

        Raises:
            MalformedFilterError: On unknown operator or unconvertible value
        """
        attribute = self.CONDITIONS.get(operator)
        if attribute is None:
            raise MalformedFilterError(parameter, f"unknown operator {operator!a}")

        if operator == "specified":
            self.specified = parse_boolean(parameter, raw_value)
        elif operator in self.LIST_CONDITIONS:
            values = getattr(self, attribute) or []
            values.extend(self.convert(parameter, part) for part in raw_value.split(","))
            setattr(self, attribute, values)
        else:
            setattr(self, attribute, self.convert(parameter, raw_value))

    def is_empty(self) -> bool:
        """Whether no condition has been set."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def __repr__(self) -> str:
        conditions = ", ".join(
            f"{f.name.rstrip('_')}={getattr(self, f.name)!r}"
            for f in fields(self)
            if getattr(self, f.name) is not None
        )
        return f"{type(self).__name__}({conditions})"


@dataclass(repr=False)
class RangeFilter(Filter[T]):
    """Filter for ordered values."""

    CONDITIONS: ClassVar[dict[str, str]] = {
        **Filter.CONDITIONS,
        "greaterThan": "greater_than",
        "lessThan": "less_than",
        "greaterThanOrEqual": "greater_than_or_equal",
        "lessThanOrEqual": "less_than_or_equal",
    }

    greater_than: Optional[T] = None
    less_than: Optional[T] = None
    greater_than_or_equal: Optional[T] = None
    less_than_or_equal: Optional[T] = None


@dataclass(repr=False)
class LongFilter(RangeFilter[int]):
    """Range filter over 64-bit signed integers."""

    def convert(self, parameter: str, raw_value: str) -> int:
        if not _INTEGER_PATTERN.match(raw_value):
            raise MalformedFilterError(parameter, f"{raw_value!a} is not an integer")
        value = int(raw_value.strip())
        if not LONG_MIN <= value <= LONG_MAX:
            raise MalformedFilterError(parameter, f"{raw_value!a} is out of 64-bit range")
        return value


@dataclass(repr=False)
class StringFilter(Filter[str]):
    """Filter for text values."""

    CONDITIONS: ClassVar[dict[str, str]] = {
        **Filter.CONDITIONS,
        "contains": "contains",
        "doesNotContain": "does_not_contain",
    }

    contains: Optional[str] = None
    does_not_contain: Optional[str] = None

