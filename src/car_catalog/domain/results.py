"""Tagged result variants.

Loading / loaded / failed, found / not-found / failed, and so on are kept as
separate types so an empty collection can never be confused with a failed
fetch. Callers branch with isinstance().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from car_catalog.domain.car import Car

T = TypeVar("T")


# ==============================================================================
# Collection state
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Loading:
    """No snapshot has arrived yet."""


@dataclass(frozen=True, slots=True)
class Loaded(Generic[T]):
    data: T


@dataclass(frozen=True, slots=True)
class Failed(Generic[T]):
    """Subscription failed. last_known holds the previous data, if any."""

    error: str
    last_known: T | None = None


LoadState = Union[Loading, Loaded[T], Failed[T]]


# ==============================================================================
# Point lookup
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Found:
    car: Car


@dataclass(frozen=True, slots=True)
class NotFound:
    pass


@dataclass(frozen=True, slots=True)
class LookupFailed:
    error: str


LookupResult = Union[Found, NotFound, LookupFailed]


# ==============================================================================
# Insert
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Inserted:
    car_id: str


@dataclass(frozen=True, slots=True)
class InsertFailed:
    error: str


InsertResult = Union[Inserted, InsertFailed]


# ==============================================================================
# Recommendation
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Recommendations:
    text: str


@dataclass(frozen=True, slots=True)
class NoRecommendations:
    pass


@dataclass(frozen=True, slots=True)
class RecommendationFailed:
    error: str


RecommendationResult = Union[Recommendations, NoRecommendations, RecommendationFailed]
