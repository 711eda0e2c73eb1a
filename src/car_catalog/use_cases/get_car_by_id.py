"""Get car by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_catalog.domain.car import Car
from car_catalog.domain.errors import NotFoundError, StoreUnavailableError, ValidationError
from car_catalog.domain.results import Found, LookupFailed
from car_catalog.ports.car_catalog import CarCatalog


@dataclass(frozen=True, slots=True)
class GetCarByIdRequest:
    """Request to get a car by ID."""

    car_id: str


@dataclass(frozen=True, slots=True)
class GetCarByIdResponse:
    """Response containing the requested car."""

    car: Car


class GetCarById:
    """
    Use case for retrieving a single car by ID.

    Responsibilities:
    - Reject blank ids
    - Look up through the catalog (local copy first, then the store)
    - Raise NotFoundError if the car doesn't exist
    - Raise StoreUnavailableError if the store could not be asked
    """

    def __init__(self, car_catalog: CarCatalog) -> None:
        """
        Initialize use case with dependencies.

        Args:
            car_catalog: Synchronized catalog with store fallback
        """
        self._catalog = car_catalog

    def execute(self, request: GetCarByIdRequest) -> GetCarByIdResponse:
        """
        Execute the get car by ID use case.

        Args:
            request: Request containing car_id

        Returns:
            GetCarByIdResponse with the car

        Raises:
            ValidationError: If car_id is blank
            NotFoundError: If car with given ID doesn't exist
            StoreUnavailableError: If the remote lookup failed
        """
        if not request.car_id.strip():
            raise ValidationError(
                errors=[
                    {
                        "field": "car_id",
                        "message": "Must not be blank",
                        "code": "REQUIRED",
                    }
                ]
            )

        result = self._catalog.get_car(request.car_id)

        if isinstance(result, Found):
            return GetCarByIdResponse(car=result.car)
        if isinstance(result, LookupFailed):
            raise StoreUnavailableError(result.error, car_id=request.car_id)
        raise NotFoundError(resource="Car", identifier=request.car_id)
