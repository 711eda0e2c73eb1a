"""Local, subscription-fed copy of the car collection."""

from __future__ import annotations

import logging
import threading
from typing import Sequence

from car_catalog.domain.car import Car, NewCar
from car_catalog.domain.errors import StoreUnavailableError
from car_catalog.domain.results import (
    Failed,
    Found,
    Inserted,
    InsertFailed,
    InsertResult,
    Loaded,
    Loading,
    LoadState,
    LookupFailed,
    LookupResult,
    NotFound,
)
from car_catalog.ports.car_catalog import CarCatalog
from car_catalog.ports.car_document_store import CarDocumentStore, Subscription

logger = logging.getLogger(__name__)

SUBSCRIPTION_ERROR_MESSAGE = "Failed to load the car list."


class LiveCarCatalog(CarCatalog):
    """
    Owns the in-memory car collection and keeps it in sync with the store.

    - start() opens exactly one subscription, tearing down any previous one
    - every snapshot replaces the whole collection
    - a subscription error keeps the last known cars and flips to Failed
    - get_car() checks the local copy before asking the store
    - add_car() does not append locally; the subscription brings the car in

    Snapshot callbacks can arrive on any thread (FastAPI runs sync routes in
    a thread pool), so the state swap happens under a lock. Callbacks from a
    subscription that has since been replaced are ignored.
    """

    def __init__(self, store: CarDocumentStore) -> None:
        self._store = store
        self._lock = threading.Lock()
        self._state: LoadState[tuple[Car, ...]] = Loading()
        self._subscription: Subscription | None = None
        self._generation = 0

    # ==========================================================================
    # Subscription lifecycle
    # ==========================================================================

    def start(self) -> None:
        with self._lock:
            previous = self._detach()
            generation = self._generation
            self._state = Loading()
        self._release(previous)

        try:
            subscription = self._store.subscribe(
                on_snapshot=lambda cars: self._apply_snapshot(generation, cars),
                on_error=lambda exc: self._apply_error(generation, exc),
            )
        except StoreUnavailableError as exc:
            self._apply_error(generation, exc)
            return

        with self._lock:
            superseded = generation != self._generation
            if not superseded:
                self._subscription = subscription

        if superseded:
            # A later start() or stop() ran while subscribe() was in flight.
            subscription.unsubscribe()
            return

        logger.info("Car catalog subscription started", extra={"generation": generation})

    def stop(self) -> None:
        with self._lock:
            previous = self._detach()
        self._release(previous)

    def _detach(self) -> Subscription | None:
        # Caller holds the lock. Callbacks still in flight for the old
        # subscription become stale once the generation moves on.
        previous, self._subscription = self._subscription, None
        self._generation += 1
        return previous

    def _release(self, subscription: Subscription | None) -> None:
        if subscription is None:
            return
        subscription.unsubscribe()
        logger.info("Car catalog subscription stopped")

    @property
    def is_subscribed(self) -> bool:
        with self._lock:
            return self._subscription is not None

    def _apply_snapshot(self, generation: int, cars: Sequence[Car]) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._state = Loaded(tuple(cars))

    def _apply_error(self, generation: int, exc: Exception) -> None:
        logger.error(
            "Car catalog subscription failed",
            exc_info=exc,
            extra={"generation": generation},
        )
        with self._lock:
            if generation != self._generation:
                return
            previous = self._state
            if isinstance(previous, Loaded):
                last_known: tuple[Car, ...] | None = previous.data
            elif isinstance(previous, Failed):
                last_known = previous.last_known
            else:
                last_known = None
            self._state = Failed(SUBSCRIPTION_ERROR_MESSAGE, last_known=last_known)

    # ==========================================================================
    # Read-only views
    # ==========================================================================

    @property
    def state(self) -> LoadState[tuple[Car, ...]]:
        with self._lock:
            return self._state

    @property
    def cars(self) -> tuple[Car, ...]:
        with self._lock:
            return self._current_cars()

    def _current_cars(self) -> tuple[Car, ...]:
        state = self._state
        if isinstance(state, Loaded):
            return state.data
        if isinstance(state, Failed) and state.last_known is not None:
            return state.last_known
        return ()

    # ==========================================================================
    # Lookups and writes
    # ==========================================================================

    def find_cached(self, car_id: str) -> Car | None:
        return next((car for car in self.cars if car.id == car_id), None)

    def get_car(self, car_id: str) -> LookupResult:
        cached = self.find_cached(car_id)
        if cached is not None:
            return Found(cached)

        try:
            car = self._store.get(car_id)
        except StoreUnavailableError as exc:
            logger.warning("Car lookup failed", extra={"car_id": car_id, "reason": exc.message})
            return LookupFailed(exc.message)

        if car is None:
            return NotFound()
        return Found(car)

    def add_car(self, new_car: NewCar) -> InsertResult:
        try:
            car_id = self._store.add(new_car)
        except StoreUnavailableError as exc:
            logger.warning(
                "Car insert failed",
                extra={"make": new_car.make, "model": new_car.model, "reason": exc.message},
            )
            return InsertFailed(exc.message)

        logger.info("Car inserted", extra={"car_id": car_id})
        return Inserted(car_id)
