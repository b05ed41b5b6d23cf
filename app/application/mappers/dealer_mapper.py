"""Mapping between the Dealer entity and its DTO."""

from app.application.dtos.dealer import DealerDTO
from app.domain.entities.dealer import Dealer


def to_dto(dealer: Dealer) -> DealerDTO:
    """Convert a Dealer entity to a DealerDTO."""
    return DealerDTO(id=dealer.id, name=dealer.name)


def to_entity(dealer_dto: DealerDTO) -> Dealer:
    """Convert a DealerDTO to a Dealer entity."""
    return Dealer(id=dealer_dto.id, name=dealer_dto.name)


def partial_update(dealer: Dealer, dealer_dto: DealerDTO) -> Dealer:
    """
    Copy the non-null fields of a DTO onto an entity.

    The id is never copied.

    Args:
        dealer: Entity to update in place
        dealer_dto: DTO carrying the new values

    Returns:
        The updated entity
    """
    if dealer_dto.name is not None:
        dealer.name = dealer_dto.name
    return dealer
