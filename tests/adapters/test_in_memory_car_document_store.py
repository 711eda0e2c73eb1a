"""
Test suite for InMemoryCarDocumentStore.

This is the canonical implementation of the CarDocumentStore contract:
- subscribe() delivers a full snapshot right away and after every change
- snapshots are ordered by year descending, ties in insertion order
- add() assigns the identifier
- get() reads straight from the store
- deferred delivery models a transport that has not caught up yet
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

import pytest

from car_catalog.adapters.in_memory_car_document_store import InMemoryCarDocumentStore
from car_catalog.domain.car import Car, NewCar


def _car(car_id: str, year: int, make: str = "Toyota") -> Car:
    return Car(
        id=car_id,
        make=make,
        model="M",
        year=year,
        price=Decimal("20000"),
        horsepower=150,
        mpg=30.0,
        image_url="https://placehold.co/600x400.png",
    )


def _new_car(year: int = 2022) -> NewCar:
    return NewCar(
        make="Honda",
        model="Civic",
        year=year,
        price=Decimal("22000.00"),
        horsepower=158,
        mpg=36.0,
        image_url="https://placehold.co/600x400.png",
    )


class Recorder:
    def __init__(self) -> None:
        self.snapshots: list[list[Car]] = []
        self.errors: list[Exception] = []

    def on_snapshot(self, cars: Sequence[Car]) -> None:
        self.snapshots.append(list(cars))

    def on_error(self, exc: Exception) -> None:
        self.errors.append(exc)

    @property
    def last_ids(self) -> list[str]:
        return [car.id for car in self.snapshots[-1]]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


# ==============================================================================
# Subscription
# ==============================================================================


def test_subscribe_delivers_initial_snapshot_newest_year_first(recorder: Recorder) -> None:
    store = InMemoryCarDocumentStore([_car("old", 2015), _car("new", 2023), _car("mid", 2019)])

    store.subscribe(recorder.on_snapshot, recorder.on_error)

    assert len(recorder.snapshots) == 1
    assert recorder.last_ids == ["new", "mid", "old"]


def test_snapshot_ties_keep_insertion_order(recorder: Recorder) -> None:
    store = InMemoryCarDocumentStore([_car("a", 2020), _car("b", 2020), _car("c", 2020)])

    store.subscribe(recorder.on_snapshot, recorder.on_error)

    assert recorder.last_ids == ["a", "b", "c"]


def test_empty_store_delivers_empty_snapshot(recorder: Recorder) -> None:
    store = InMemoryCarDocumentStore()

    store.subscribe(recorder.on_snapshot, recorder.on_error)

    assert recorder.snapshots == [[]]


def test_add_pushes_full_snapshot_to_every_subscriber() -> None:
    store = InMemoryCarDocumentStore([_car("existing", 2018)], id_factory=lambda: "abc123")
    first, second = Recorder(), Recorder()
    store.subscribe(first.on_snapshot, first.on_error)
    store.subscribe(second.on_snapshot, second.on_error)

    store.add(_new_car(year=2022))

    for recorder in (first, second):
        assert len(recorder.snapshots) == 2
        assert recorder.last_ids == ["abc123", "existing"]


def test_unsubscribe_stops_delivery(recorder: Recorder) -> None:
    store = InMemoryCarDocumentStore()
    subscription = store.subscribe(recorder.on_snapshot, recorder.on_error)

    subscription.unsubscribe()
    store.add(_new_car())

    assert len(recorder.snapshots) == 1
    assert store.subscriber_count == 0


def test_raising_listener_does_not_block_others(recorder: Recorder) -> None:
    store = InMemoryCarDocumentStore()

    def broken(cars: Sequence[Car]) -> None:
        raise RuntimeError("listener bug")

    store.subscribe(broken, recorder.on_error)
    store.subscribe(recorder.on_snapshot, recorder.on_error)
    store.add(_new_car())

    assert len(recorder.snapshots) == 2


# ==============================================================================
# Writes and point reads
# ==============================================================================


def test_add_returns_generated_uuid() -> None:
    store = InMemoryCarDocumentStore()

    car_id = store.add(_new_car())

    assert len(car_id) == 36
    assert store.get(car_id) is not None


def test_get_returns_stored_car() -> None:
    store = InMemoryCarDocumentStore(id_factory=lambda: "abc123")

    store.add(_new_car())

    car = store.get("abc123")
    assert car is not None
    assert (car.make, car.model, car.year) == ("Honda", "Civic", 2022)


def test_get_unknown_id_returns_none() -> None:
    assert InMemoryCarDocumentStore().get("missing") is None


# ==============================================================================
# Deferred delivery
# ==============================================================================


def test_deferred_store_queues_snapshots_until_delivered(recorder: Recorder) -> None:
    store = InMemoryCarDocumentStore(auto_deliver=False, id_factory=lambda: "abc123")
    store.subscribe(recorder.on_snapshot, recorder.on_error)
    store.add(_new_car())

    # Readable from the store, but not pushed to anyone yet
    assert recorder.snapshots == []
    assert store.get("abc123") is not None

    assert store.deliver_pending() == 2
    assert [len(snapshot) for snapshot in recorder.snapshots] == [0, 1]
    assert store.deliver_pending() == 0
