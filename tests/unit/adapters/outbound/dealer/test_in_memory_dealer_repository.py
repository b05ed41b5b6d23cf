"""Unit tests for in-memory dealer repository."""

import pytest

from app.adapters.outbound.dealer.in_memory_dealer_repository import InMemoryDealerRepository
from app.domain.entities.dealer import Dealer
from app.domain.specifications.specification import (
    AllSpecification,
    FieldSpecification,
    Operator,
)
from app.domain.value_objects.page_request import PageRequest, SortDirection, SortOrder


@pytest.fixture
def repository():
    """Create in-memory dealer repository."""
    return InMemoryDealerRepository()


@pytest.mark.asyncio
async def test_save_assigns_sequential_ids(repository):
    """Test that inserts receive increasing ids."""
    first = await repository.save(Dealer(name="first"))
    second = await repository.save(Dealer(name="second"))

    assert first.id == 1
    assert second.id == 2


@pytest.mark.asyncio
async def test_save_does_not_mutate_argument(repository):
    """Test that the caller's entity is left without id."""
    dealer = Dealer(name="first")

    saved = await repository.save(dealer)

    assert dealer.id is None
    assert saved.id == 1


@pytest.mark.asyncio
async def test_stored_dealers_are_isolated_from_callers(repository):
    """Test that mutating a returned dealer does not change the store."""
    saved = await repository.save(Dealer(name="original"))

    found = await repository.find_by_id(saved.id)
    found.name = "changed"

    assert (await repository.find_by_id(saved.id)).name == "original"


@pytest.mark.asyncio
async def test_delete_missing_id_is_noop(repository):
    """Test that deleting an unknown id does nothing."""
    await repository.save(Dealer(name="kept"))

    await repository.delete_by_id(999)

    assert await repository.count(AllSpecification()) == 1


@pytest.mark.asyncio
async def test_find_all_sorts_nulls_last_ascending(repository):
    """Test sorting by name, with null names after named dealers."""
    await repository.save(Dealer(name="b"))
    await repository.save(Dealer(name=None))
    await repository.save(Dealer(name="a"))

    ascending = await repository.find_all(AllSpecification(), (SortOrder("name"),))
    descending = await repository.find_all(
        AllSpecification(), (SortOrder("name", SortDirection.DESC),)
    )

    assert [dealer.name for dealer in ascending] == ["a", "b", None]
    assert [dealer.name for dealer in descending] == [None, "b", "a"]


@pytest.mark.asyncio
async def test_find_all_breaks_ties_by_id(repository):
    """Test that equal sort keys keep id order."""
    await repository.save(Dealer(name="same"))
    await repository.save(Dealer(name="same"))
    await repository.save(Dealer(name="other"))

    dealers = await repository.find_all(AllSpecification(), (SortOrder("name"),))

    assert [dealer.id for dealer in dealers] == [3, 1, 2]


@pytest.mark.asyncio
async def test_find_page_slices_filtered_results(repository):
    """Test paging over a filtered result set."""
    for index in range(5):
        await repository.save(Dealer(name=f"dealer-{index}"))

    specification = FieldSpecification("id", Operator.GREATER_THAN, 1)
    page = await repository.find_page(specification, PageRequest(page=1, size=3))

    assert [dealer.id for dealer in page.content] == [5]
    assert page.number == 1
    assert page.total_elements == 4
    assert page.total_pages == 2


@pytest.mark.asyncio
async def test_find_page_beyond_last_page_is_empty(repository):
    """Test that a page past the end has no content but the right total."""
    await repository.save(Dealer(name="only"))

    page = await repository.find_page(AllSpecification(), PageRequest(page=5, size=10))

    assert page.content == []
    assert page.total_elements == 1
