"""Free-text car recommendation use case."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from car_catalog.domain.errors import CompletionServiceError, ConflictError
from car_catalog.domain.recommendation import RecommendationRequest
from car_catalog.domain.results import (
    NoRecommendations,
    RecommendationFailed,
    RecommendationResult,
    Recommendations,
)
from car_catalog.ports.completion_service import CompletionService

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RecommendCarsRequest:
    recommendation: RecommendationRequest
    requester: str


class RecommendationInProgressError(ConflictError):
    error_code: str = "RECOMMENDATION_IN_PROGRESS"


class RecommendCars:
    """
    One completion call per request, no retries.

    Outcomes:
    - Recommendations(text) for non-blank text
    - NoRecommendations() when the service answers with blank text
    - RecommendationFailed(error) for any service failure

    Overlapping requests from the same requester are rejected rather than
    raced: while one is in flight, the next raises
    RecommendationInProgressError. Instances are long-lived so the in-flight
    set is shared across HTTP requests.
    """

    def __init__(self, completion_service: CompletionService) -> None:
        self._completion_service = completion_service
        self._lock = threading.Lock()
        self._in_flight: set[str] = set()

    def execute(self, request: RecommendCarsRequest) -> RecommendationResult:
        """
        Raises:
            ValidationError: If preferences are shorter than 10 characters
            RecommendationInProgressError: If this requester already has a request in flight
        """
        request.recommendation.validate()

        with self._lock:
            if request.requester in self._in_flight:
                raise RecommendationInProgressError(
                    "A recommendation request is already in progress"
                )
            self._in_flight.add(request.requester)

        try:
            text = self._completion_service.recommend(request.recommendation.preferences)
        except CompletionServiceError as exc:
            logger.warning(
                "Recommendation request failed",
                extra={"requester": request.requester, "reason": exc.message},
            )
            return RecommendationFailed(exc.message)
        finally:
            with self._lock:
                self._in_flight.discard(request.requester)

        if not text.strip():
            return NoRecommendations()
        return Recommendations(text)
