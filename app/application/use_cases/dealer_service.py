"""Dealer management use case."""

from typing import Optional

from app.application.dtos.dealer import DealerDTO
from app.application.mappers import dealer_mapper
from app.application.ports.dealer_repository import DealerRepository
from app.infrastructure.logging.logger import log_event


class DealerService:
    """Use case for creating, updating, reading and deleting dealers."""

    def __init__(self, dealer_repository: DealerRepository) -> None:
        """
        Initialize dealer service.

        Args:
            dealer_repository: Port implementation for dealer storage
        """
        self._dealer_repository = dealer_repository

    async def save(self, dealer_dto: DealerDTO) -> DealerDTO:
        """
        Save a dealer (insert when it has no id, full update otherwise).

        Args:
            dealer_dto: Dealer to save

        Returns:
            Persisted dealer
        """
        dealer = await self._dealer_repository.save(dealer_mapper.to_entity(dealer_dto))
        log_event(component="service", event="save_dealer", dealer_id=dealer.id)
        return dealer_mapper.to_dto(dealer)

    async def partial_update(self, dealer_dto: DealerDTO) -> Optional[DealerDTO]:
        """
        Update only the non-null fields of an existing dealer.

        Args:
            dealer_dto: Partial dealer; id is required

        Returns:
            Updated dealer, or None if no dealer has this id
        """
        dealer = await self._dealer_repository.find_by_id(dealer_dto.id)
        if dealer is None:
            return None

        dealer_mapper.partial_update(dealer, dealer_dto)
        dealer = await self._dealer_repository.save(dealer)
        log_event(component="service", event="partial_update_dealer", dealer_id=dealer.id)
        return dealer_mapper.to_dto(dealer)

    async def find_one(self, dealer_id: int) -> Optional[DealerDTO]:
        """
        Get one dealer by id.

        Args:
            dealer_id: Dealer identifier

        Returns:
            Dealer, or None if not found
        """
        dealer = await self._dealer_repository.find_by_id(dealer_id)
        if dealer is None:
            return None
        return dealer_mapper.to_dto(dealer)

    async def exists(self, dealer_id: int) -> bool:
        """Check whether a dealer with this id exists."""
        return await self._dealer_repository.exists_by_id(dealer_id)

    async def delete(self, dealer_id: int) -> None:
        """
        Delete a dealer by id.

        Args:
            dealer_id: Dealer identifier
        """
        await self._dealer_repository.delete_by_id(dealer_id)
        log_event(component="service", event="delete_dealer", dealer_id=dealer_id)
