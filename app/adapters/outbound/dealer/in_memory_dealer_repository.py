"""In-memory dealer repository adapter."""

from dataclasses import replace
from itertools import count
from typing import Optional

from app.application.ports.dealer_repository import DealerRepository
from app.domain.entities.dealer import Dealer
from app.domain.specifications.specification import Specification
from app.domain.value_objects.page import Page
from app.domain.value_objects.page_request import PageRequest, SortOrder


class InMemoryDealerRepository(DealerRepository):
    """In-memory implementation of dealer repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: dict[int, Dealer] = {}
        self._sequence = count(1)

    async def save(self, dealer: Dealer) -> Dealer:
        """
        Save a dealer, assigning the next id on insert.

        Args:
            dealer: Dealer to save

        Returns:
            Copy of the stored dealer
        """
        if dealer.id is None:
            dealer = replace(dealer, id=next(self._sequence))
        self._storage[dealer.id] = replace(dealer)
        return replace(dealer)

    async def find_by_id(self, dealer_id: int) -> Optional[Dealer]:
        dealer = self._storage.get(dealer_id)
        return replace(dealer) if dealer is not None else None

    async def exists_by_id(self, dealer_id: int) -> bool:
        return dealer_id in self._storage

    async def delete_by_id(self, dealer_id: int) -> None:
        self._storage.pop(dealer_id, None)

    async def find_all(
        self, specification: Specification, sort: tuple[SortOrder, ...] = ()
    ) -> list[Dealer]:
        """
        List dealers matching a specification.

        Args:
            specification: Query specification
            sort: Sort orders (ties broken by id ascending)

        Returns:
            Copies of the matching dealers
        """
        matches = [
            replace(dealer)
            for dealer in self._storage.values()
            if specification.is_satisfied_by(dealer)
        ]
        return self._sort(matches, sort)

    async def find_page(self, specification: Specification, page_request: PageRequest) -> Page[Dealer]:
        matches = await self.find_all(specification, page_request.sort)
        return Page(
            content=matches[page_request.offset : page_request.offset + page_request.size],
            number=page_request.page,
            size=page_request.size,
            total_elements=len(matches),
        )

    async def count(self, specification: Specification) -> int:
        return sum(1 for dealer in self._storage.values() if specification.is_satisfied_by(dealer))

    def _sort(self, dealers: list[Dealer], sort: tuple[SortOrder, ...]) -> list[Dealer]:
        """
        Sort dealers the way a SQL store orders them (nulls last ascending).

        Args:
            dealers: Dealers to sort
            sort: Sort orders, most significant first

        Returns:
            Sorted list
        """
        result = sorted(dealers, key=lambda dealer: dealer.id)
        # Stable sorts applied least significant first
        for order in reversed(sort):
            result.sort(
                key=lambda dealer, prop=order.property: self._sort_key(getattr(dealer, prop)),
                reverse=order.descending,
            )
        return result

    @staticmethod
    def _sort_key(value):
        return (value is None, value if value is not None else "")
