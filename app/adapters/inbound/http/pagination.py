"""Pagination request parsing and response headers."""

from typing import Optional

from starlette.datastructures import URL

from app.application.criteria.errors import InvalidSortError
from app.application.ports.dealer_repository import SORTABLE_PROPERTIES
from app.domain.value_objects.page import Page
from app.domain.value_objects.page_request import PageRequest, SortDirection, SortOrder
from app.infrastructure.config.settings import settings


def _parse_int(raw_value: Optional[str]) -> Optional[int]:
    if raw_value is None:
        return None
    try:
        return int(raw_value)
    except ValueError:
        return None


def parse_sort(raw_sorts: list[str]) -> tuple[SortOrder, ...]:
    """
    Parse ``sort=<property>[,<property>...][,asc|desc]`` parameters.

    Args:
        raw_sorts: Every value of the repeated ``sort`` parameter

    Returns:
        Sort orders, most significant first

    Raises:
        InvalidSortError: If a property is not sortable
    """
    orders = []
    for raw_sort in raw_sorts:
        parts = [part.strip() for part in raw_sort.split(",") if part.strip()]
        direction = SortDirection.ASC
        if parts and parts[-1].upper() in SortDirection.__members__:
            direction = SortDirection(parts.pop().upper())
        for property_name in parts:
            if property_name not in SORTABLE_PROPERTIES:
                raise InvalidSortError(property_name)
            orders.append(SortOrder(property_name, direction))
    return tuple(orders)


def parse_page_request(
    page: Optional[str],
    size: Optional[str],
    sort: list[str],
) -> PageRequest:
    """
    Build a PageRequest from raw query parameters.

    Invalid or negative page numbers fall back to 0, invalid sizes to the
    configured default, and sizes above the configured maximum are capped.

    Args:
        page: Raw ``page`` parameter (zero-based)
        size: Raw ``size`` parameter
        sort: Raw ``sort`` parameters

    Returns:
        PageRequest

    Raises:
        InvalidSortError: If a sort property is not sortable
    """
    page_number = _parse_int(page)
    if page_number is None or page_number < 0:
        page_number = 0

    page_size = _parse_int(size)
    if page_size is None or page_size < 1:
        page_size = settings.default_page_size
    page_size = min(page_size, settings.max_page_size)

    return PageRequest(page=page_number, size=page_size, sort=parse_sort(sort))


def _prepare_link(url: URL, page_number: int, page_size: int, relation: str) -> str:
    target = url.include_query_params(page=page_number, size=page_size)
    return f'<{target}>; rel="{relation}"'


def generate_pagination_headers(url: URL, page: Page) -> dict[str, str]:
    """
    Build ``X-Total-Count`` and RFC 5988 ``Link`` headers for a page.

    Args:
        url: URL of the current request
        page: Page being returned

    Returns:
        Header mapping
    """
    links = []
    if page.number < page.total_pages - 1:
        links.append(_prepare_link(url, page.number + 1, page.size, "next"))
    if page.number > 0:
        links.append(_prepare_link(url, page.number - 1, page.size, "prev"))
    links.append(_prepare_link(url, max(page.total_pages - 1, 0), page.size, "last"))
    links.append(_prepare_link(url, 0, page.size, "first"))

    return {
        "X-Total-Count": str(page.total_elements),
        "Link": ",".join(links),
    }
