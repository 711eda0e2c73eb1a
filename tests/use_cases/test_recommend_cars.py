"""
Test suite for RecommendCars use case.

Covers local validation, classification of the service answer and the
reject-while-pending rule for overlapping requests.
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from car_catalog.domain.errors import CompletionServiceError, ConflictError, ValidationError
from car_catalog.domain.recommendation import RecommendationRequest
from car_catalog.domain.results import (
    NoRecommendations,
    RecommendationFailed,
    Recommendations,
)
from car_catalog.ports.completion_service import CompletionService
from car_catalog.use_cases.recommend_cars import (
    RecommendationInProgressError,
    RecommendCars,
    RecommendCarsRequest,
)

PREFERENCES = "Family SUV under $30k with good mileage"


def _request(preferences: str = PREFERENCES, requester: str = "host:1.2.3.4") -> RecommendCarsRequest:
    return RecommendCarsRequest(
        recommendation=RecommendationRequest(preferences=preferences),
        requester=requester,
    )


@pytest.fixture()
def mock_service() -> Mock:
    return Mock(spec=CompletionService)


# ==============================================================================
# Outcomes
# ==============================================================================


def test_text_is_returned_as_recommendations(mock_service: Mock) -> None:
    mock_service.recommend.return_value = "1. Honda CR-V\n2. Mazda CX-5"

    result = RecommendCars(mock_service).execute(_request())

    assert result == Recommendations("1. Honda CR-V\n2. Mazda CX-5")
    mock_service.recommend.assert_called_once_with(PREFERENCES)


@pytest.mark.parametrize("text", ["", "   \n"])
def test_blank_text_is_no_recommendations_not_failure(mock_service: Mock, text: str) -> None:
    mock_service.recommend.return_value = text

    assert RecommendCars(mock_service).execute(_request()) == NoRecommendations()


def test_service_failure_is_recommendation_failed(mock_service: Mock) -> None:
    mock_service.recommend.side_effect = CompletionServiceError(
        "Failed to fetch recommendations from AI."
    )

    result = RecommendCars(mock_service).execute(_request())

    assert result == RecommendationFailed("Failed to fetch recommendations from AI.")
    assert mock_service.recommend.call_count == 1


# ==============================================================================
# Validation
# ==============================================================================


def test_nine_characters_never_reach_service(mock_service: Mock) -> None:
    with pytest.raises(ValidationError):
        RecommendCars(mock_service).execute(_request(preferences="123456789"))

    mock_service.recommend.assert_not_called()


# ==============================================================================
# Overlapping requests
# ==============================================================================


def test_overlapping_request_from_same_requester_is_rejected(mock_service: Mock) -> None:
    use_case = RecommendCars(mock_service)
    nested_errors: list[Exception] = []

    def recommend(preferences: str) -> str:
        try:
            use_case.execute(_request())
        except RecommendationInProgressError as exc:
            nested_errors.append(exc)
        return "1. Toyota Highlander"

    mock_service.recommend.side_effect = recommend

    result = use_case.execute(_request())

    assert result == Recommendations("1. Toyota Highlander")
    [error] = nested_errors
    assert isinstance(error, ConflictError)
    assert error.error_code == "RECOMMENDATION_IN_PROGRESS"
    assert mock_service.recommend.call_count == 1


def test_other_requesters_are_not_blocked(mock_service: Mock) -> None:
    use_case = RecommendCars(mock_service)
    nested: list[object] = []
    entered: list[str] = []

    def recommend(preferences: str) -> str:
        if not entered:
            entered.append(preferences)
            nested.append(use_case.execute(_request(requester="user:other")))
        return "text"

    mock_service.recommend.side_effect = recommend

    use_case.execute(_request(requester="user:me"))

    assert nested == [Recommendations("text")]
    assert mock_service.recommend.call_count == 2


def test_requester_is_released_after_failure(mock_service: Mock) -> None:
    use_case = RecommendCars(mock_service)
    mock_service.recommend.side_effect = [CompletionServiceError("boom"), "second try"]

    use_case.execute(_request())

    assert use_case.execute(_request()) == Recommendations("second try")


def test_invalid_request_does_not_claim_requester(mock_service: Mock) -> None:
    use_case = RecommendCars(mock_service)
    mock_service.recommend.return_value = "ok text"

    with pytest.raises(ValidationError):
        use_case.execute(_request(preferences="short"))

    assert use_case.execute(_request()) == Recommendations("ok text")
