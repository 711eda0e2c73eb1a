"""Listener bookkeeping shared by the document store adapters."""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Sequence

from car_catalog.domain.car import Car
from car_catalog.ports.car_document_store import (
    ErrorCallback,
    SnapshotCallback,
    Subscription,
)

logger = logging.getLogger(__name__)


class SnapshotListener(Subscription):
    def __init__(
        self,
        registry: SnapshotListeners,
        on_snapshot: SnapshotCallback,
        on_error: ErrorCallback,
    ) -> None:
        self._registry = registry
        self.on_snapshot = on_snapshot
        self.on_error = on_error
        self.active = True

    def unsubscribe(self) -> None:
        self._registry.remove(self)


class SnapshotListeners:
    """
    Thread-safe set of live-query listeners.

    Notifications go out in call order. A listener that raises is logged and
    skipped so one broken consumer cannot stall the others.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._listeners: list[SnapshotListener] = []

    def add(self, on_snapshot: SnapshotCallback, on_error: ErrorCallback) -> SnapshotListener:
        listener = SnapshotListener(self, on_snapshot, on_error)
        with self._lock:
            self._listeners.append(listener)
        return listener

    def remove(self, listener: SnapshotListener) -> None:
        with self._lock:
            listener.active = False
            if listener in self._listeners:
                self._listeners.remove(listener)

    def snapshot_listeners(self) -> list[SnapshotListener]:
        with self._lock:
            return list(self._listeners)

    def __len__(self) -> int:
        with self._lock:
            return len(self._listeners)

    def notify(
        self,
        cars: Sequence[Car],
        listeners: Iterable[SnapshotListener] | None = None,
    ) -> None:
        snapshot = tuple(cars)
        for listener in self.snapshot_listeners() if listeners is None else listeners:
            if not listener.active:
                continue
            try:
                listener.on_snapshot(snapshot)
            except Exception:
                logger.exception(
                    "Snapshot listener raised",
                    extra={"snapshot_size": len(snapshot)},
                )

    def notify_error(
        self,
        exc: Exception,
        listeners: Iterable[SnapshotListener] | None = None,
    ) -> None:
        for listener in self.snapshot_listeners() if listeners is None else listeners:
            if not listener.active:
                continue
            try:
                listener.on_error(exc)
            except Exception:
                logger.exception("Snapshot error listener raised")
