"""HTTP routes."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, Response, status

from app.adapters.inbound.http.errors import BadRequestAlertException
from app.adapters.inbound.http.header_util import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
)
from app.adapters.inbound.http.pagination import generate_pagination_headers, parse_page_request
from app.application.criteria.dealer_criteria import DealerCriteria
from app.application.criteria.errors import InvalidSortError, MalformedFilterError
from app.application.criteria.filters import LONG_MAX, LONG_MIN
from app.application.dtos.dealer import DealerDTO
from app.application.use_cases.dealer_query_service import DealerQueryService
from app.application.use_cases.dealer_service import DealerService
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import log_rest_request
from app.infrastructure.wiring.dependencies import get_dealer_query_service, get_dealer_service

ENTITY_NAME = "dealerappDealer"

DealerId = Annotated[int, Path(ge=LONG_MIN, le=LONG_MAX)]

router = APIRouter()


def _parse_criteria(request: Request) -> DealerCriteria:
    """
    Parse dealer criteria from the request query string.

    Raises:
        BadRequestAlertException: If a filter parameter is malformed
    """
    try:
        return DealerCriteria.from_query_params(request.query_params.multi_items())
    except MalformedFilterError as err:
        raise BadRequestAlertException(str(err), ENTITY_NAME, "malformedfilter") from err


def _validate_update(dealer_id: int, dealer_dto: DealerDTO) -> None:
    if dealer_dto.id is None:
        raise BadRequestAlertException("Invalid id", ENTITY_NAME, "idnull")
    if dealer_id != dealer_dto.id:
        raise BadRequestAlertException("Invalid ID", ENTITY_NAME, "idinvalid")


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.post("/api/dealers", status_code=status.HTTP_201_CREATED, response_model=DealerDTO)
async def create_dealer(
    dealer_dto: DealerDTO,
    response: Response,
    dealer_service: DealerService = Depends(get_dealer_service),
) -> DealerDTO:
    """
    Create a new dealer.

    Args:
        dealer_dto: Dealer to create; must not carry an id

    Returns:
        Created dealer with its assigned id

    Raises:
        BadRequestAlertException: 400 if the dealer already has an id
    """
    log_rest_request("create", name=dealer_dto.name)
    if dealer_dto.id is not None:
        raise BadRequestAlertException("A new dealer cannot already have an ID", ENTITY_NAME, "idexists")

    result = await dealer_service.save(dealer_dto)

    response.headers["Location"] = f"/api/dealers/{result.id}"
    response.headers.update(
        create_entity_creation_alert(settings.application_name, ENTITY_NAME, str(result.id))
    )
    return result


@router.put("/api/dealers/{dealer_id}", status_code=status.HTTP_200_OK, response_model=DealerDTO)
async def update_dealer(
    dealer_id: DealerId,
    dealer_dto: DealerDTO,
    response: Response,
    dealer_service: DealerService = Depends(get_dealer_service),
) -> DealerDTO:
    """
    Update an existing dealer.

    Args:
        dealer_id: Id from the path; must match the body id
        dealer_dto: Full dealer

    Returns:
        Updated dealer

    Raises:
        BadRequestAlertException: 400 if the id is null, mismatched or unknown
    """
    log_rest_request("update", dealer_id=dealer_id, name=dealer_dto.name)
    _validate_update(dealer_id, dealer_dto)
    if not await dealer_service.exists(dealer_id):
        raise BadRequestAlertException("Entity not found", ENTITY_NAME, "idnotfound")

    result = await dealer_service.save(dealer_dto)

    response.headers.update(
        create_entity_update_alert(settings.application_name, ENTITY_NAME, str(dealer_dto.id))
    )
    return result


@router.patch("/api/dealers/{dealer_id}", status_code=status.HTTP_200_OK, response_model=DealerDTO)
async def partial_update_dealer(
    dealer_id: DealerId,
    dealer_dto: DealerDTO,
    response: Response,
    dealer_service: DealerService = Depends(get_dealer_service),
) -> DealerDTO:
    """
    Partially update an existing dealer; null fields are left unchanged.

    Accepts ``application/json`` and ``application/merge-patch+json`` bodies.

    Args:
        dealer_id: Id from the path; must match the body id
        dealer_dto: Partial dealer

    Returns:
        Merged dealer

    Raises:
        BadRequestAlertException: 400 if the id is null, mismatched or unknown
        HTTPException: 404 if the dealer disappeared before the update
    """
    log_rest_request("partial_update", dealer_id=dealer_id, name=dealer_dto.name)
    _validate_update(dealer_id, dealer_dto)
    if not await dealer_service.exists(dealer_id):
        raise BadRequestAlertException("Entity not found", ENTITY_NAME, "idnotfound")

    result = await dealer_service.partial_update(dealer_dto)
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Dealer not found")

    response.headers.update(
        create_entity_update_alert(settings.application_name, ENTITY_NAME, str(dealer_dto.id))
    )
    return result


@router.get("/api/dealers", status_code=status.HTTP_200_OK, response_model=list[DealerDTO])
async def get_all_dealers(
    request: Request,
    response: Response,
    page: Optional[str] = Query(None),
    size: Optional[str] = Query(None),
    sort: list[str] = Query([]),
    dealer_query_service: DealerQueryService = Depends(get_dealer_query_service),
) -> list[DealerDTO]:
    """
    List dealers matching the filter parameters, one page at a time.

    Filters use ``<field>.<operator>=<value>``; see DealerCriteria.

    Returns:
        Dealers on the requested page, with X-Total-Count and Link headers

    Raises:
        BadRequestAlertException: 400 on malformed filters or unsortable properties
    """
    criteria = _parse_criteria(request)
    try:
        page_request = parse_page_request(page, size, sort)
    except InvalidSortError as err:
        raise BadRequestAlertException(str(err), ENTITY_NAME, "invalidsort") from err

    log_rest_request("get_all", criteria=str(criteria), page=str(page_request))
    result = await dealer_query_service.find_page_by_criteria(criteria, page_request)

    response.headers.update(generate_pagination_headers(request.url, result))
    return result.content


@router.get("/api/dealers/count", status_code=status.HTTP_200_OK)
async def count_dealers(
    request: Request,
    dealer_query_service: DealerQueryService = Depends(get_dealer_query_service),
) -> int:
    """
    Count dealers matching the filter parameters.

    Returns:
        Number of matching dealers

    Raises:
        BadRequestAlertException: 400 on malformed filters
    """
    criteria = _parse_criteria(request)
    log_rest_request("count", criteria=str(criteria))
    return await dealer_query_service.count_by_criteria(criteria)


@router.get("/api/dealers/{dealer_id}", status_code=status.HTTP_200_OK, response_model=DealerDTO)
async def get_dealer(
    dealer_id: DealerId,
    dealer_service: DealerService = Depends(get_dealer_service),
) -> DealerDTO:
    """
    Get one dealer.

    Args:
        dealer_id: Dealer identifier

    Returns:
        Dealer

    Raises:
        HTTPException: 404 if the dealer does not exist
    """
    log_rest_request("get", dealer_id=dealer_id)
    result = await dealer_service.find_one(dealer_id)
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Dealer not found")
    return result


@router.delete("/api/dealers/{dealer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_dealer(
    dealer_id: DealerId,
    dealer_service: DealerService = Depends(get_dealer_service),
) -> Response:
    """
    Delete a dealer. Deleting an unknown id still answers 204.

    Args:
        dealer_id: Dealer identifier

    Returns:
        Empty 204 response with deletion alert headers
    """
    log_rest_request("delete", dealer_id=dealer_id)
    await dealer_service.delete(dealer_id)
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=create_entity_deletion_alert(settings.application_name, ENTITY_NAME, str(dealer_id)),
    )
