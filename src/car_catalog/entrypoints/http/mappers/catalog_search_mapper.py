from __future__ import annotations

from decimal import Decimal

from car_catalog.domain.car import Car, CatalogFilters
from car_catalog.entrypoints.http.dtos.catalog_search import (
    CarMakesResponseDTO,
    CarResponseDTO,
    CarsSearchQueryDTO,
    CatalogSearchResponseDTO,
    MakeOptionDTO,
)
from car_catalog.use_cases.list_car_makes import ListCarMakesResponse
from car_catalog.use_cases.search_car_catalog import (
    SearchCarCatalogRequest,
    SearchCarCatalogResponse,
)


class CatalogSearchMapper:
    """Maps between REST DTOs and domain models for catalog search."""

    @staticmethod
    def to_domain_filters(dto: CarsSearchQueryDTO) -> CatalogFilters:
        """
        Converts query params to domain filters, handling Decimal conversion.

        Args:
            dto: The data transfer object containing search query parameters

        Returns:
            CatalogFilters: Domain filters with Decimal prices
        """
        return CatalogFilters(
            make=dto.make,
            year_min=dto.year_min,
            year_max=dto.year_max,
            price_min=Decimal(dto.price_min) if dto.price_min else None,
            price_max=Decimal(dto.price_max) if dto.price_max else None,
        )

    @staticmethod
    def to_domain_request(dto: CarsSearchQueryDTO) -> SearchCarCatalogRequest:
        return SearchCarCatalogRequest(
            filters=CatalogSearchMapper.to_domain_filters(dto),
            sort=dto.sort,
        )

    @staticmethod
    def to_car_response(car: Car) -> CarResponseDTO:
        """
        Converts domain Car entity to REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        return CarResponseDTO(
            id=car.id,
            make=car.make,
            model=car.model,
            year=car.year,
            price=str(car.price),  # Decimal → str at boundary
            horsepower=car.horsepower,
            mpg=car.mpg,
            image_url=car.image_url,
            data_ai_hint=car.data_ai_hint,
            features=list(car.features),
        )

    @staticmethod
    def to_response(result: SearchCarCatalogResponse) -> CatalogSearchResponseDTO:
        return CatalogSearchResponseDTO(
            status=result.status,
            error=result.error,
            cars=[CatalogSearchMapper.to_car_response(car) for car in result.cars],
            total=len(result.cars),
        )

    @staticmethod
    def to_makes_response(result: ListCarMakesResponse) -> CarMakesResponseDTO:
        return CarMakesResponseDTO(
            options=[
                MakeOptionDTO(value=option.value, label=option.label)
                for option in result.options
            ]
        )
