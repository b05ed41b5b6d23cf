"""Dependency injection factory functions."""

from functools import lru_cache

from fastapi import Depends

from app.adapters.outbound.dealer import InMemoryDealerRepository, PostgresDealerRepository
from app.adapters.outbound.dealer.models import Base
from app.application.ports.dealer_repository import DealerRepository
from app.application.use_cases.dealer_query_service import DealerQueryService
from app.application.use_cases.dealer_service import DealerService
from app.infrastructure.config.settings import settings
from app.infrastructure.db import init_db


def create_dealer_repository() -> DealerRepository:
    """
    Factory function to create dealer repository.

    Returns:
        DealerRepository instance
    """
    if settings.dealer_repository == "postgres":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when DEALER_REPOSITORY=postgres")
        init_db(Base.metadata)
        return PostgresDealerRepository()
    else:
        return InMemoryDealerRepository()


@lru_cache
def get_dealer_repository() -> DealerRepository:
    """
    Provide the process-wide dealer repository.

    Returns:
        DealerRepository instance
    """
    return create_dealer_repository()


def get_dealer_service(
    dealer_repository: DealerRepository = Depends(get_dealer_repository),
) -> DealerService:
    """
    Provide a DealerService bound to the dealer repository.

    Returns:
        DealerService instance
    """
    return DealerService(dealer_repository)


def get_dealer_query_service(
    dealer_repository: DealerRepository = Depends(get_dealer_repository),
) -> DealerQueryService:
    """
    Provide a DealerQueryService bound to the dealer repository.

    Returns:
        DealerQueryService instance
    """
    return DealerQueryService(dealer_repository)
