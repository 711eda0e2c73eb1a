from __future__ import annotations

import threading
import uuid
from typing import Callable

from car_catalog.adapters.snapshot_listeners import SnapshotListener, SnapshotListeners
from car_catalog.domain.car import Car, NewCar
from car_catalog.ports.car_document_store import (
    CarDocumentStore,
    ErrorCallback,
    SnapshotCallback,
    Subscription,
)


class InMemoryCarDocumentStore(CarDocumentStore):
    """
    Canonical contract implementation for tests and local development.

    - Stores cars in insertion order
    - Snapshots are ordered by year descending (stable on insertion order)
    - Every change produces a full snapshot for every subscriber
    - With auto_deliver=False snapshots are queued until deliver_pending(),
      which models a transport that has not caught up yet
    """

    def __init__(
        self,
        cars: list[Car] | None = None,
        auto_deliver: bool = True,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._cars: list[Car] = list(cars or [])
        self._auto_deliver = auto_deliver
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self._lock = threading.Lock()
        self._listeners = SnapshotListeners()
        self._pending: list[tuple[SnapshotListener, tuple[Car, ...]]] = []

    def subscribe(
        self, on_snapshot: SnapshotCallback, on_error: ErrorCallback
    ) -> Subscription:
        listener = self._listeners.add(on_snapshot, on_error)
        self._publish([listener])
        return listener

    def add(self, new_car: NewCar) -> str:
        with self._lock:
            car_id = self._id_factory()
            self._cars.append(new_car.with_id(car_id))
        self._publish(self._listeners.snapshot_listeners())
        return car_id

    def get(self, car_id: str) -> Car | None:
        with self._lock:
            return next((car for car in self._cars if car.id == car_id), None)

    def deliver_pending(self) -> int:
        """Deliver queued snapshots in order. Returns how many were delivered."""
        with self._lock:
            pending, self._pending = self._pending, []
        for listener, snapshot in pending:
            self._listeners.notify(snapshot, [listener])
        return len(pending)

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    def _snapshot(self) -> tuple[Car, ...]:
        with self._lock:
            return tuple(sorted(self._cars, key=lambda car: car.year, reverse=True))

    def _publish(self, listeners: list[SnapshotListener]) -> None:
        snapshot = self._snapshot()
        if self._auto_deliver:
            self._listeners.notify(snapshot, listeners)
            return
        with self._lock:
            self._pending.extend((listener, snapshot) for listener in listeners)
