from pydantic import BaseModel, ConfigDict, Field

from car_catalog.domain.car import DEFAULT_SORT, SortOption
from car_catalog.use_cases.search_car_catalog import CatalogStatus


class CarResponseDTO(BaseModel):
    id: str
    make: str
    model: str
    year: int
    price: str
    horsepower: int
    mpg: float
    image_url: str
    data_ai_hint: str
    features: list[str]


class CarsSearchQueryDTO(BaseModel):
    """Query parameters for searching cars in the catalog."""

    make: str = Field(
        default="",
        description="Filter by make (exact, case-sensitive). Empty means all makes.",
        examples=["Toyota"],
    )
    year_min: int | None = Field(
        default=None,
        description="Minimum year (inclusive)",
        examples=[2018],
        ge=1900,
    )
    year_max: int | None = Field(
        default=None,
        description="Maximum year (inclusive)",
        examples=[2023],
        ge=1900,
    )
    price_min: str | None = Field(
        default=None,
        description="Minimum price (inclusive, decimal as string)",
        examples=["20000.00"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )
    price_max: str | None = Field(
        default=None,
        description="Maximum price (inclusive, decimal as string)",
        examples=["35000.00"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )
    sort: SortOption = Field(
        default=DEFAULT_SORT,
        description="Sort order",
        examples=["price_desc"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "make": "Toyota",
                "year_min": 2018,
                "year_max": 2023,
                "price_min": "20000.00",
                "price_max": "35000.00",
                "sort": "price_asc",
            }
        }
    )


class CatalogSearchResponseDTO(BaseModel):
    status: CatalogStatus
    error: str | None = None
    cars: list[CarResponseDTO]
    total: int


class CarMakesQueryDTO(BaseModel):
    q: str = Field(
        default="",
        description="Case-insensitive substring typed into the make selector",
        examples=["to"],
    )


class MakeOptionDTO(BaseModel):
    value: str
    label: str


class CarMakesResponseDTO(BaseModel):
    options: list[MakeOptionDTO]
