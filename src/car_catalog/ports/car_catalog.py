from __future__ import annotations

from abc import ABC, abstractmethod

from car_catalog.domain.car import Car, NewCar
from car_catalog.domain.results import InsertResult, LoadState, LookupResult


class CarCatalog(ABC):
    """
    Port for the locally held, continuously synchronized car collection.

    Consumers only ever see immutable tuples; every derived view (filtered,
    sorted) must be a new sequence. Failures come back as typed results,
    never as exceptions.
    """

    @property
    @abstractmethod
    def state(self) -> LoadState[tuple[Car, ...]]:
        """Loading, Loaded(cars) or Failed(error, last_known)."""
        ...

    @property
    @abstractmethod
    def cars(self) -> tuple[Car, ...]:
        """Current collection (last known on failure, empty while loading)."""
        ...

    @abstractmethod
    def find_cached(self, car_id: str) -> Car | None:
        """Local-only lookup. Never touches the network."""
        ...

    @abstractmethod
    def get_car(self, car_id: str) -> LookupResult:
        """Cache first, then the store: Found, NotFound or LookupFailed."""
        ...

    @abstractmethod
    def add_car(self, new_car: NewCar) -> InsertResult:
        """
        Insert through the store: Inserted(car_id) or InsertFailed.

        The new car appears in `cars` only once the subscription delivers it.
        """
        ...
