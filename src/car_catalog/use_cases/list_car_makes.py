"""Make suggestions for the incremental make selector."""

from __future__ import annotations

from dataclasses import dataclass

from car_catalog.domain.catalog import MakeOption, available_makes, make_options
from car_catalog.ports.car_catalog import CarCatalog


@dataclass(frozen=True, slots=True)
class ListCarMakesRequest:
    query: str = ""


@dataclass(frozen=True, slots=True)
class ListCarMakesResponse:
    options: list[MakeOption]


class ListCarMakes:
    """
    Distinct makes of the whole catalog, never of a filtered subset.

    Derived from the current snapshot on every call, so a new snapshot is
    reflected immediately while filter changes have no effect.
    """

    def __init__(self, car_catalog: CarCatalog) -> None:
        self._catalog = car_catalog

    def execute(self, request: ListCarMakesRequest) -> ListCarMakesResponse:
        makes = available_makes(self._catalog.cars)
        return ListCarMakesResponse(options=make_options(makes, request.query))
