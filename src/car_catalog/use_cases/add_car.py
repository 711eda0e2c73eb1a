"""Add car listing use case."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from car_catalog.domain.car import NewCar
from car_catalog.domain.errors import StoreUnavailableError, UnauthorizedError
from car_catalog.domain.results import InsertFailed
from car_catalog.domain.user import User
from car_catalog.ports.car_catalog import CarCatalog


@dataclass(frozen=True, slots=True)
class AddCarRequest:
    new_car: NewCar
    user: User | None


@dataclass(frozen=True, slots=True)
class AddCarResponse:
    car_id: str


class AddCar:
    """
    Create a listing on behalf of a signed-in user.

    Fills in the AI hint from make and model when it is left blank, validates
    every field, then inserts through the catalog. The listing becomes
    visible in searches once the subscription delivers it, not before.
    """

    def __init__(self, car_catalog: CarCatalog) -> None:
        self._catalog = car_catalog

    def execute(self, request: AddCarRequest) -> AddCarResponse:
        """
        Raises:
            UnauthorizedError: If no user is signed in
            CarValidationError: If any field is invalid
            StoreUnavailableError: If the insert failed
        """
        if request.user is None:
            raise UnauthorizedError("You must be logged in to add a car.")

        new_car = request.new_car
        if not new_car.data_ai_hint.strip():
            new_car = dataclasses.replace(
                new_car, data_ai_hint=NewCar.default_ai_hint(new_car.make, new_car.model)
            )

        new_car.validate()

        result = self._catalog.add_car(new_car)
        if isinstance(result, InsertFailed):
            raise StoreUnavailableError(result.error)

        return AddCarResponse(car_id=result.car_id)
