"""Dealer criteria."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, Optional

from app.application.criteria.filters import Filter, LongFilter, StringFilter, parse_boolean


@dataclass
class DealerCriteria:
    """Per-request filter specification for dealers.

    Built from query parameters such as ``name.contains=foo`` or
    ``id.in=1,2,3``; every filter present must match.
    """

    id: Optional[LongFilter] = None
    name: Optional[StringFilter] = None
    distinct: Optional[bool] = None

    FILTER_TYPES: ClassVar[dict[str, type[Filter]]] = {
        "id": LongFilter,
        "name": StringFilter,
    }

    @classmethod
    def from_query_params(cls, params: Iterable[tuple[str, str]]) -> "DealerCriteria":
        """
        Parse criteria from query parameters.

        Parameters that do not name a dealer field (``page``, ``size``,
        ``sort``, unknown fields) are ignored.

        Args:
            params: Query parameters as (key, value) pairs, repeats allowed

        Returns:
            Parsed criteria

        Raises:
            MalformedFilterError: If a dealer field has an unknown operator or bad value
        """
        criteria = cls()
        for key, raw_value in params:
            if key == "distinct":
                criteria.distinct = parse_boolean(key, raw_value)
                continue

            field_name, separator, operator = key.partition(".")
            filter_type = cls.FILTER_TYPES.get(field_name)
            if not separator or filter_type is None:
                continue

            field_filter: Optional[Filter] = getattr(criteria, field_name)
            if field_filter is None:
                field_filter = filter_type()
                setattr(criteria, field_name, field_filter)
            field_filter.set_condition(key, operator, raw_value)

        return criteria

    def __str__(self) -> str:
        parts = []
        if self.id is not None:
            parts.append(f"id={self.id!r}")
        if self.name is not None:
            parts.append(f"name={self.name!r}")
        if self.distinct is not None:
            parts.append(f"distinct={self.distinct}")
        return f"DealerCriteria({', '.join(parts)})"
