from fastapi import APIRouter, Body, Depends

from dealer_catalog.entrypoints.http.dependencies import (
    get_search_products_use_case,
    get_update_product_price_use_case,
    require_catalog_ready,
)
from dealer_catalog.entrypoints.http.dtos.products import (
    PriceUpdateRequestDTO,
    PriceUpdateResponseDTO,
    ProductsQueryDTO,
    ProductsResponseDTO,
)
from dealer_catalog.entrypoints.http.error_responses import ErrorResponse
from dealer_catalog.entrypoints.http.mappers.price_update_mapper import PriceUpdateMapper
from dealer_catalog.entrypoints.http.mappers.product_search_mapper import ProductSearchMapper
from dealer_catalog.use_cases.search_products import SearchProducts
from dealer_catalog.use_cases.update_product_price import UpdateProductPrice


router = APIRouter(tags=["Products"], dependencies=[Depends(require_catalog_ready)])


@router.get(
    "/products",
    response_model=ProductsResponseDTO,
    summary="List products",
    description="""
    List catalog products with optional dealer and text filters.

    ## Filters
    - dealer_code: exact dealer code; unknown codes return an empty page
    - search: case-insensitive substring of name, item code or barcode
    - Empty values mean "no filter"

    ## Pagination
    - Default per_page: 10, capped at the configured maximum (200)
    - Invalid page/per_page values fall back to defaults
    - Pages past the end return no products with correct totals

    ## Example
    ```
    GET /api/products?dealer_code=EZ978&search=widget&page=1&per_page=20
    ```
    """,
    responses={503: {"model": ErrorResponse, "description": "Catalog still loading"}},
)
def list_products(
    query: ProductsQueryDTO = Depends(),
    use_case: SearchProducts = Depends(get_search_products_use_case),
) -> ProductsResponseDTO:
    """List products endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = ProductSearchMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return ProductSearchMapper.to_response(result)


@router.put(
    "/products/{item_code}/price",
    response_model=PriceUpdateResponseDTO,
    summary="Update a product price",
    description="""
    Overwrite one price of the product's live price entry (prices[0]).

    ## Rules
    - price_index N must be an integer >= 1 and price_N must already exist
    - price must be a number >= 0
    - Changes are kept in memory only

    ## Example
    ```
    PUT /api/products/A1/price
    {"price_index": 1, "price": 12}
    ```
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid update"},
        404: {"model": ErrorResponse, "description": "Product not found"},
        503: {"model": ErrorResponse, "description": "Catalog still loading"},
    },
)
def update_product_price(
    item_code: str,
    payload: PriceUpdateRequestDTO | None = Body(default=None),
    use_case: UpdateProductPrice = Depends(get_update_product_price_use_case),
) -> PriceUpdateResponseDTO:
    """Update price endpoint following parse → execute → map → return pattern."""
    request = PriceUpdateMapper.to_domain_request(item_code, payload)

    updated = use_case.execute(request)

    return PriceUpdateMapper.to_response(updated)
