from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest

from car_catalog.domain.car import Car
from car_catalog.domain.catalog import ALL_MAKES_OPTION, MakeOption
from car_catalog.ports.car_catalog import CarCatalog
from car_catalog.use_cases.list_car_makes import ListCarMakes, ListCarMakesRequest


def _car(make: str) -> Car:
    return Car(
        id=make,
        make=make,
        model="M",
        year=2020,
        price=Decimal("1"),
        horsepower=150,
        mpg=30.0,
        image_url="https://placehold.co/600x400.png",
    )


@pytest.fixture()
def mock_catalog() -> Mock:
    catalog = Mock(spec=CarCatalog)
    catalog.cars = (_car("Toyota"), _car("BMW"), _car("Toyota"), _car("Tesla"))
    return catalog


def test_lists_distinct_makes_after_sentinel(mock_catalog: Mock) -> None:
    result = ListCarMakes(mock_catalog).execute(ListCarMakesRequest())

    assert result.options == [
        ALL_MAKES_OPTION,
        MakeOption("BMW", "BMW"),
        MakeOption("Tesla", "Tesla"),
        MakeOption("Toyota", "Toyota"),
    ]


def test_query_narrows_options(mock_catalog: Mock) -> None:
    result = ListCarMakes(mock_catalog).execute(ListCarMakesRequest(query="t"))

    assert [option.value for option in result.options] == ["", "Tesla", "Toyota"]


def test_new_snapshot_is_reflected_on_next_call(mock_catalog: Mock) -> None:
    use_case = ListCarMakes(mock_catalog)
    use_case.execute(ListCarMakesRequest())

    mock_catalog.cars = (_car("Volvo"),)

    result = use_case.execute(ListCarMakesRequest())
    assert [option.value for option in result.options] == ["", "Volvo"]


def test_empty_catalog_offers_only_sentinel() -> None:
    catalog = Mock(spec=CarCatalog)
    catalog.cars = ()

    result = ListCarMakes(catalog).execute(ListCarMakesRequest())

    assert result.options == [ALL_MAKES_OPTION]
