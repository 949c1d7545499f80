from __future__ import annotations

from datetime import datetime, timezone

from dealer_catalog.entrypoints.http.dtos.health import HealthResponseDTO
from dealer_catalog.use_cases.get_catalog_health import CatalogHealth


def format_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a 'Z' suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


class HealthMapper:
    @staticmethod
    def to_response(health: CatalogHealth) -> HealthResponseDTO:
        return HealthResponseDTO(
            status=health.status,
            data_ready=health.data_ready,
            products=health.products,
            dealers=health.dealers,
            timestamp=format_timestamp(health.timestamp),
        )
