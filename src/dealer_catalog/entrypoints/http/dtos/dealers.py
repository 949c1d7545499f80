from pydantic import BaseModel


class DealerResponseDTO(BaseModel):
    dealer_code: str
    dealer_name: str


class DealerPaginationDTO(BaseModel):
    resource: str
    page: int
    per_page: int
    total: int
    total_pages: int


class DealersResponseDTO(BaseModel):
    pagination: DealerPaginationDTO
    data: list[DealerResponseDTO]
