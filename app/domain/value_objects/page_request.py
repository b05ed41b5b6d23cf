"""Page request value objects."""

from dataclasses import dataclass
from enum import Enum


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class SortOrder:
    """Single sort criterion."""

    property: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        """Whether this order sorts descending."""
        return self.direction is SortDirection.DESC


@dataclass(frozen=True)
class PageRequest:
    """Zero-based, offset pagination request."""

    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = ()

    def __post_init__(self) -> None:
        """Validate page and size."""
        if self.page < 0:
            raise ValueError("Page index must not be less than zero")
        if self.size < 1:
            raise ValueError("Page size must not be less than one")

    @property
    def offset(self) -> int:
        """Number of rows to skip."""
        return self.page * self.size

    def __str__(self) -> str:
        sort = ",".join(f"{order.property}: {order.direction.value}" for order in self.sort)
        return f"Page request [number: {self.page}, size {self.size}, sort: {sort or 'UNSORTED'}]"
