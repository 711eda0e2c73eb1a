from __future__ import annotations

from car_catalog.domain.errors import CompletionServiceError
from car_catalog.domain.recommendation import RecommendationRequest
from car_catalog.domain.results import (
    RecommendationFailed,
    RecommendationResult,
    Recommendations,
)
from car_catalog.entrypoints.http.dtos.recommendation import (
    RecommendationRequestDTO,
    RecommendationResponseDTO,
)
from car_catalog.use_cases.recommend_cars import RecommendCarsRequest


class RecommendationMapper:
    @staticmethod
    def to_domain_request(dto: RecommendationRequestDTO, requester: str) -> RecommendCarsRequest:
        return RecommendCarsRequest(
            recommendation=RecommendationRequest(preferences=dto.preferences),
            requester=requester,
        )

    @staticmethod
    def to_response(result: RecommendationResult) -> RecommendationResponseDTO:
        """
        Converts the tagged outcome to the REST body.

        Raises:
            CompletionServiceError: For RecommendationFailed, so the
                exception handlers answer 502 instead of an empty 200
        """
        if isinstance(result, RecommendationFailed):
            raise CompletionServiceError(result.error)
        if isinstance(result, Recommendations):
            return RecommendationResponseDTO(status="ok", recommendations=result.text)
        return RecommendationResponseDTO(status="empty", recommendations=None)
