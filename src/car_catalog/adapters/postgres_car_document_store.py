"""PostgreSQL implementation of CarDocumentStore."""

from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager
from typing import Callable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from car_catalog.adapters.snapshot_listeners import SnapshotListener, SnapshotListeners
from car_catalog.domain.car import Car, NewCar
from car_catalog.domain.errors import StoreUnavailableError
from car_catalog.infra.db.models.car import CarRow
from car_catalog.infra.db.session import get_session
from car_catalog.ports.car_document_store import (
    CarDocumentStore,
    ErrorCallback,
    SnapshotCallback,
    Subscription,
)

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AbstractContextManager[Session]]


class PostgresCarDocumentStore(CarDocumentStore):
    """
    PostgreSQL implementation of CarDocumentStore.

    - Uses SQLAlchemy ORM, one short session per operation
    - Snapshots are SELECT ... ORDER BY year DESC, created_at
    - add() broadcasts a fresh snapshot to every subscriber after commit
    - refresh() re-queries and broadcasts unconditionally
    - with poll_interval set, a background thread re-queries every interval
      while anyone is subscribed and broadcasts only when the rows changed,
      so rows written by other processes (seed script, psql) reach subscribers
    - Broadcasts are serialized, so subscribers never see an older snapshot
      after a newer one
    - SQLAlchemyError becomes StoreUnavailableError (or on_error for subscribers)
    - Converts CarRow (infrastructure) to Car (domain)
    """

    def __init__(
        self,
        session_factory: SessionFactory = get_session,
        poll_interval: float | None = None,
    ) -> None:
        """
        Initialize store with a session factory.

        Args:
            session_factory: Context manager factory yielding a committed-on-exit session
            poll_interval: Seconds between change checks; None or 0 disables polling
        """
        self._session_factory = session_factory
        self._poll_interval = poll_interval
        self._listeners = SnapshotListeners()
        self._broadcast_lock = threading.Lock()
        self._last_snapshot: tuple[Car, ...] | None = None
        self._poll_lock = threading.Lock()
        self._poller: threading.Thread | None = None
        self._stop_polling = threading.Event()

    def subscribe(
        self, on_snapshot: SnapshotCallback, on_error: ErrorCallback
    ) -> Subscription:
        listener = self._listeners.add(on_snapshot, on_error)
        self._broadcast([listener])
        self._ensure_polling()
        return listener

    def add(self, new_car: NewCar) -> str:
        """
        Insert a car and broadcast the new snapshot.

        Returns:
            Store-assigned UUID as string

        Raises:
            StoreUnavailableError: If the INSERT fails
        """
        row = self._to_row(new_car)
        try:
            with self._session_factory() as session:
                session.add(row)
                session.flush()  # populates the uuid4 default
                car_id = str(row.id)
        except SQLAlchemyError as exc:
            logger.error(
                "Failed to insert car",
                exc_info=exc,
                extra={"make": new_car.make, "model": new_car.model},
            )
            raise StoreUnavailableError("Failed to add car") from exc

        self.refresh()
        return car_id

    def get(self, car_id: str) -> Car | None:
        """
        Get car by ID.

        Args:
            car_id: Car ID (expected to be a valid UUID string)

        Returns:
            Car entity if found, None otherwise (including malformed ids)

        Raises:
            StoreUnavailableError: If the SELECT fails
        """
        try:
            key = UUID(car_id)
        except ValueError:  # Not one of our ids, so it cannot exist
            return None

        try:
            with self._session_factory() as session:
                row = session.execute(
                    select(CarRow).where(CarRow.id == key)
                ).scalar_one_or_none()
                return self._to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.error("Failed to fetch car", exc_info=exc, extra={"car_id": car_id})
            raise StoreUnavailableError("Failed to fetch car", car_id=car_id) from exc

    def refresh(self) -> None:
        """Re-run the live query and push the result to every subscriber."""
        self._broadcast(None)

    def close(self) -> None:
        """Stop the polling thread. Subscriptions stay registered."""
        with self._poll_lock:
            poller, self._poller = self._poller, None
            stop = self._stop_polling

        if poller is None:
            return

        stop.set()
        if poller is not threading.current_thread():
            poller.join(timeout=5)
        logger.info("Car store polling stopped")

    @property
    def is_polling(self) -> bool:
        with self._poll_lock:
            return self._poller is not None

    # ==========================================================================
    # Change detection
    # ==========================================================================

    def _ensure_polling(self) -> None:
        if not self._poll_interval:
            return

        with self._poll_lock:
            if self._poller is not None:
                return
            self._stop_polling = threading.Event()
            self._poller = threading.Thread(
                target=self._poll,
                args=(self._stop_polling,),
                name="car-store-poller",
                daemon=True,
            )
            self._poller.start()

        logger.info("Car store polling started", extra={"interval_seconds": self._poll_interval})

    def _poll(self, stop: threading.Event) -> None:
        while not stop.wait(self._poll_interval):
            if len(self._listeners):
                self._broadcast(None, only_changes=True)

    def _broadcast(
        self, listeners: list[SnapshotListener] | None, only_changes: bool = False
    ) -> None:
        with self._broadcast_lock:
            # The remembered snapshot is what every subscriber has seen.
            reaches_everyone = listeners is None or len(self._listeners) == 1

            try:
                snapshot = tuple(self._load_snapshot())
            except SQLAlchemyError as exc:
                logger.error("Failed to load cars snapshot", exc_info=exc)
                if reaches_everyone:
                    self._last_snapshot = None
                self._listeners.notify_error(
                    StoreUnavailableError("Failed to load cars"), listeners
                )
                return

            if only_changes and snapshot == self._last_snapshot:
                return
            if reaches_everyone:
                self._last_snapshot = snapshot
            self._listeners.notify(snapshot, listeners)

    def _load_snapshot(self) -> list[Car]:
        query = select(CarRow).order_by(CarRow.year.desc(), CarRow.created_at)
        with self._session_factory() as session:
            rows = session.execute(query).scalars().all()
            return [self._to_domain(row) for row in rows]

    def _to_row(self, new_car: NewCar) -> CarRow:
        return CarRow(
            make=new_car.make,
            model=new_car.model,
            year=new_car.year,
            price=new_car.price,
            horsepower=new_car.horsepower,
            mpg=new_car.mpg,
            image_url=new_car.image_url,
            data_ai_hint=new_car.data_ai_hint,
            features=list(new_car.features),
        )

    def _to_domain(self, row: CarRow) -> Car:
        """
        Convert database model (CarRow) to domain entity (Car).

        Args:
            row: SQLAlchemy CarRow model

        Returns:
            Car domain entity
        """
        return Car(
            id=str(row.id),  # Convert UUID to string
            make=row.make,
            model=row.model,
            year=row.year,
            price=row.price,  # Already Decimal from NUMERIC column
            horsepower=row.horsepower,
            mpg=row.mpg,
            image_url=row.image_url,
            data_ai_hint=row.data_ai_hint or "",
            features=tuple(row.features or ()),
        )
