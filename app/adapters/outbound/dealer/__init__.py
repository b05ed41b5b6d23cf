"""Dealer repository adapters."""

from app.adapters.outbound.dealer.in_memory_dealer_repository import InMemoryDealerRepository
from app.adapters.outbound.dealer.postgres_dealer_repository import PostgresDealerRepository

__all__ = [
    "InMemoryDealerRepository",
    "PostgresDealerRepository",
]
