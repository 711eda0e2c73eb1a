from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from car_catalog.domain.car import DEFAULT_SORT, Car, CatalogFilters, SortOption
from car_catalog.domain.catalog import apply_filters_and_sort
from car_catalog.domain.results import Failed, Loaded
from car_catalog.ports.car_catalog import CarCatalog


class CatalogStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class SearchCarCatalogRequest:
    filters: CatalogFilters
    sort: SortOption = DEFAULT_SORT


@dataclass(frozen=True, slots=True)
class SearchCarCatalogResponse:
    status: CatalogStatus
    cars: list[Car]
    error: str | None = None


class SearchCarCatalog:
    """
    Car search over the locally synchronized catalog.

    Filters then sorts the current collection. The three collection states
    stay distinct in the response:
    - LOADING: no snapshot yet, no cars
    - READY: cars may legitimately be empty
    - ERROR: subscription failed; cars come from the last known snapshot
    """

    def __init__(self, car_catalog: CarCatalog) -> None:
        self._catalog = car_catalog

    def execute(self, request: SearchCarCatalogRequest) -> SearchCarCatalogResponse:
        """
        Execute catalog search.

        Args:
            request: Filters and sort option

        Returns:
            Response with catalog status and the filtered, sorted cars

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        request.filters.validate()

        state = self._catalog.state

        if isinstance(state, Loaded):
            return SearchCarCatalogResponse(
                status=CatalogStatus.READY,
                cars=apply_filters_and_sort(state.data, request.filters, request.sort),
            )

        if isinstance(state, Failed):
            return SearchCarCatalogResponse(
                status=CatalogStatus.ERROR,
                cars=apply_filters_and_sort(
                    state.last_known or (), request.filters, request.sort
                ),
                error=state.error,
            )

        return SearchCarCatalogResponse(status=CatalogStatus.LOADING, cars=[])
