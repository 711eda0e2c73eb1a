from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Sequence

from car_catalog.domain.car import Car, NewCar

SnapshotCallback = Callable[[Sequence[Car]], None]
ErrorCallback = Callable[[Exception], None]


class Subscription(ABC):
    """Handle for a live query. Delivery stops after unsubscribe()."""

    @abstractmethod
    def unsubscribe(self) -> None: ...


class CarDocumentStore(ABC):
    """
    Port for the document store holding the car listings.

    Contract:
        - subscribe() delivers full snapshots of every car, ordered by year
          descending, once on subscription and again after every change.
          Snapshots replace, they are never patches.
        - add() assigns the identifier. The new car shows up in a later
          snapshot; add() itself does not touch subscribers synchronously
          unless the implementation's transport does.
        - Transport failures raise StoreUnavailableError from add()/get()
          and are reported through on_error for subscriptions.
    """

    @abstractmethod
    def subscribe(
        self, on_snapshot: SnapshotCallback, on_error: ErrorCallback
    ) -> Subscription:
        """
        Open a live query over all cars ordered by year descending.

        Args:
            on_snapshot: Called with the complete current collection
            on_error: Called when the query cannot be served

        Returns:
            Subscription handle used to stop delivery
        """
        ...

    @abstractmethod
    def add(self, new_car: NewCar) -> str:
        """
        Insert a car. Precondition: new_car has been validated by the caller.

        Returns:
            Store-assigned identifier

        Raises:
            StoreUnavailableError: If the write could not be performed
        """
        ...

    @abstractmethod
    def get(self, car_id: str) -> Car | None:
        """
        Read one car directly from the store.

        Returns:
            Car if it exists, None otherwise

        Raises:
            StoreUnavailableError: If the read could not be performed
        """
        ...

    def close(self) -> None:
        """Release background resources such as change polling. No-op by default."""
