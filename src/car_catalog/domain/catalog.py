"""Client-side catalog pipeline: filter, then sort, plus the make suggestions.

Every function here is pure. Inputs are never mutated; each call returns a
new list so callers can re-derive filtered results independently of sorting.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Iterable, Sequence

from pyuca import Collator

from car_catalog.domain.car import DEFAULT_SORT, Car, CatalogFilters, SortOption

ALL_MAKES_LABEL = "All makes"


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loading the DUCET table is slow; do it once per process.
    return Collator()


def make_collation_key(make: str) -> tuple[int, ...]:
    """Locale-aware sort key for make names (Unicode Collation Algorithm)."""
    return _collator().sort_key(make)


_SORT_KEYS: dict[SortOption, tuple[Callable[[Car], Any], bool]] = {
    SortOption.PRICE_ASC: (lambda car: car.price, False),
    SortOption.PRICE_DESC: (lambda car: car.price, True),
    SortOption.YEAR_ASC: (lambda car: car.year, False),
    SortOption.YEAR_DESC: (lambda car: car.year, True),
    SortOption.MAKE_ASC: (lambda car: make_collation_key(car.make), False),
    SortOption.MAKE_DESC: (lambda car: make_collation_key(car.make), True),
}


def filter_cars(cars: Iterable[Car], filters: CatalogFilters) -> list[Car]:
    """Cars satisfying every defined constraint, in input order."""
    return [car for car in cars if filters.matches(car)]


def sort_cars(cars: Iterable[Car], option: SortOption = DEFAULT_SORT) -> list[Car]:
    """
    Fresh list ordered by the given option.

    sorted() is stable in both directions, so ties keep their input order
    even for descending options.
    """
    key, reverse = _SORT_KEYS[SortOption(option)]
    return sorted(cars, key=key, reverse=reverse)


def apply_filters_and_sort(
    cars: Iterable[Car], filters: CatalogFilters, option: SortOption = DEFAULT_SORT
) -> list[Car]:
    return sort_cars(filter_cars(cars, filters), option)


def available_makes(cars: Iterable[Car]) -> list[str]:
    """Distinct makes of the full collection, sorted lexically."""
    return sorted({car.make for car in cars})


@dataclass(frozen=True, slots=True)
class MakeOption:
    value: str
    label: str


ALL_MAKES_OPTION = MakeOption(value="", label=ALL_MAKES_LABEL)


def make_options(makes: Sequence[str], query: str = "") -> list[MakeOption]:
    """
    Options for the incremental make selector.

    The "all makes" sentinel (empty filter value) is always first; the
    remaining options are narrowed by a case-insensitive substring match.
    """
    needle = query.strip().casefold()
    matching = [make for make in makes if needle in make.casefold()]
    return [ALL_MAKES_OPTION, *(MakeOption(value=make, label=make) for make in matching)]
