"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used for malformed request bodies to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "price_index",
                "message": "Input should be a valid dictionary or object",
                "code": "model_attributes_type",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Every failure carries success=false and a human-readable message.
    The code field identifies the failure for programmatic clients.

    Examples:
        Simple error:
            {
                "success": false,
                "message": "Product not found.",
                "code": "NOT_FOUND"
            }

        Catalog still loading:
            {
                "success": false,
                "message": "Data is loading, please retry shortly.",
                "code": "NOT_READY"
            }
    """

    success: bool = False
    message: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"success": False, "message": "Product not found.", "code": "NOT_FOUND"},
                {
                    "success": False,
                    "message": "Invalid price index key.",
                    "code": "INVALID_INDEX_KEY",
                },
            ]
        }
    )
