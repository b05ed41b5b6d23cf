"""Dealer repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.dealer import Dealer
from app.domain.specifications.specification import Specification
from app.domain.value_objects.page import Page
from app.domain.value_objects.page_request import PageRequest, SortOrder

SORTABLE_PROPERTIES = frozenset({"id", "name"})


class DealerRepository(ABC):
    """Port interface for dealer repository."""

    @abstractmethod
    async def save(self, dealer: Dealer) -> Dealer:
        """
        Insert or update a dealer.

        Args:
            dealer: Dealer to save; a dealer without id is inserted

        Returns:
            Saved dealer, with the store-assigned id on insert
        """
        pass

    @abstractmethod
    async def find_by_id(self, dealer_id: int) -> Optional[Dealer]:
        """
        Get a dealer by id.

        Args:
            dealer_id: Dealer identifier

        Returns:
            Dealer, or None if not found
        """
        pass

    @abstractmethod
    async def exists_by_id(self, dealer_id: int) -> bool:
        """
        Check whether a dealer exists.

        Args:
            dealer_id: Dealer identifier

        Returns:
            True if a dealer with this id is stored
        """
        pass

    @abstractmethod
    async def delete_by_id(self, dealer_id: int) -> None:
        """
        Delete a dealer. Deleting an absent id is a no-op.

        Args:
            dealer_id: Dealer identifier
        """
        pass

    @abstractmethod
    async def find_all(
        self, specification: Specification, sort: tuple[SortOrder, ...] = ()
    ) -> list[Dealer]:
        """
        List every dealer matching a specification.

        Args:
            specification: Query specification
            sort: Sort orders (defaults to id ascending)

        Returns:
            Matching dealers
        """
        pass

    @abstractmethod
    async def find_page(self, specification: Specification, page_request: PageRequest) -> Page[Dealer]:
        """
        Get one page of dealers matching a specification.

        Args:
            specification: Query specification
            page_request: Page index, size and sort

        Returns:
            Page of matching dealers with the total match count
        """
        pass

    @abstractmethod
    async def count(self, specification: Specification) -> int:
        """
        Count dealers matching a specification.

        Args:
            specification: Query specification

        Returns:
            Number of matching dealers
        """
        pass
