from pydantic import BaseModel, ConfigDict, Field


class HealthResponseDTO(BaseModel):
    """Service status, available while the catalog is still loading."""

    status: str = Field(examples=["OK"])
    data_ready: bool
    products: int = Field(description="Number of loaded products")
    dealers: int = Field(description="Number of dealers in the directory")
    timestamp: str = Field(
        description="ISO-8601 UTC time of the check",
        examples=["2024-01-01T00:00:00.000Z"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "OK",
                "data_ready": True,
                "products": 1200,
                "dealers": 10,
                "timestamp": "2024-01-01T00:00:00.000Z",
            }
        }
    )
