"""Dealer query use case.

Converts a DealerCriteria into a Specification, requiring every filter to
match, and runs it against the dealer repository. Listing and counting always
share the same specification.
"""

from typing import Optional

from app.application.criteria.dealer_criteria import DealerCriteria
from app.application.criteria.specification_builder import (
    build_range_specification,
    build_string_specification,
)
from app.application.dtos.dealer import DealerDTO
from app.application.mappers import dealer_mapper
from app.application.ports.dealer_repository import DealerRepository
from app.domain.specifications.specification import (
    AllSpecification,
    DistinctSpecification,
    Specification,
)
from app.domain.value_objects.page import Page
from app.domain.value_objects.page_request import PageRequest
from app.infrastructure.logging.logger import log_criteria_query


class DealerQueryService:
    """Use case for filtered dealer listings and counts."""

    def __init__(self, dealer_repository: DealerRepository) -> None:
        """
        Initialize dealer query service.

        Args:
            dealer_repository: Port implementation for dealer storage
        """
        self._dealer_repository = dealer_repository

    async def find_by_criteria(self, criteria: Optional[DealerCriteria]) -> list[DealerDTO]:
        """
        List every dealer matching the criteria.

        Args:
            criteria: Filters the dealers must match (None matches all)

        Returns:
            Matching dealers
        """
        log_criteria_query("find_by_criteria", criteria)
        specification = self.create_specification(criteria)
        dealers = await self._dealer_repository.find_all(specification)
        return [dealer_mapper.to_dto(dealer) for dealer in dealers]

    async def find_page_by_criteria(
        self, criteria: Optional[DealerCriteria], page_request: PageRequest
    ) -> Page[DealerDTO]:
        """
        Get one page of dealers matching the criteria.

        Args:
            criteria: Filters the dealers must match (None matches all)
            page_request: Page index, size and sort

        Returns:
            Page of matching dealers
        """
        log_criteria_query("find_by_criteria", criteria, page=str(page_request))
        specification = self.create_specification(criteria)
        page = await self._dealer_repository.find_page(specification, page_request)
        return page.map(dealer_mapper.to_dto)

    async def count_by_criteria(self, criteria: Optional[DealerCriteria]) -> int:
        """
        Count dealers matching the criteria.

        Args:
            criteria: Filters the dealers must match (None matches all)

        Returns:
            Number of matching dealers
        """
        log_criteria_query("count_by_criteria", criteria)
        specification = self.create_specification(criteria)
        return await self._dealer_repository.count(specification)

    def create_specification(self, criteria: Optional[DealerCriteria]) -> Specification:
        """
        Convert criteria into a specification.

        Args:
            criteria: Filters the dealers must match

        Returns:
            AND-composition of the per-field specifications
        """
        specification: Specification = AllSpecification()
        if criteria is not None:
            # Distinct goes first; it flags the query and adds no row predicate
            if criteria.distinct is not None:
                specification &= DistinctSpecification(criteria.distinct)
            if criteria.id is not None:
                specification &= build_range_specification(criteria.id, "id")
            if criteria.name is not None:
                specification &= build_string_specification(criteria.name, "name")
        return specification
