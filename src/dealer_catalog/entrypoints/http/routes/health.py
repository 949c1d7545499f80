from fastapi import APIRouter, Depends

from dealer_catalog.entrypoints.http.dependencies import get_catalog_health_use_case
from dealer_catalog.entrypoints.http.dtos.health import HealthResponseDTO
from dealer_catalog.entrypoints.http.mappers.health_mapper import HealthMapper
from dealer_catalog.use_cases.get_catalog_health import GetCatalogHealth


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponseDTO, summary="Service health")
def health(
    use_case: GetCatalogHealth = Depends(get_catalog_health_use_case),
) -> HealthResponseDTO:
    """Not gated: reports data_ready=false while the catalog loads."""
    return HealthMapper.to_response(use_case.execute())
