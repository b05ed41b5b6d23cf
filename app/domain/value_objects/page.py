"""Page value object."""

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Page(Generic[T]):
    """A slice of a result set plus the total size of the full result set."""

    content: list[T] = field(default_factory=list)
    number: int = 0
    size: int = 20
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        """Number of pages needed to hold every element."""
        return math.ceil(self.total_elements / self.size) if self.size > 0 else 1

    @property
    def is_first(self) -> bool:
        """Whether this is the first page."""
        return self.number == 0

    @property
    def is_last(self) -> bool:
        """Whether no page follows this one."""
        return self.number >= self.total_pages - 1

    def map(self, converter: Callable[[T], R]) -> "Page[R]":
        """
        Convert every element of the page.

        Args:
            converter: Function applied to each element

        Returns:
            New page with converted content and the same paging metadata
        """
        return Page(
            content=[converter(item) for item in self.content],
            number=self.number,
            size=self.size,
            total_elements=self.total_elements,
        )
