from fastapi import APIRouter, Depends

from dealer_catalog.entrypoints.http.dependencies import (
    get_list_dealers_use_case,
    require_catalog_ready,
)
from dealer_catalog.entrypoints.http.dtos.dealers import DealersResponseDTO
from dealer_catalog.entrypoints.http.error_responses import ErrorResponse
from dealer_catalog.entrypoints.http.mappers.dealer_mapper import DealerMapper
from dealer_catalog.use_cases.list_dealers import ListDealers


router = APIRouter(tags=["Dealers"], dependencies=[Depends(require_catalog_ready)])


@router.get(
    "/dealers",
    response_model=DealersResponseDTO,
    summary="List dealers",
    description="""
    Dealers that have at least one product, sorted by dealer code.
    Always returned as a single page.
    """,
    responses={503: {"model": ErrorResponse, "description": "Catalog still loading"}},
)
def list_dealers(
    use_case: ListDealers = Depends(get_list_dealers_use_case),
) -> DealersResponseDTO:
    return DealerMapper.to_response(use_case.execute())
