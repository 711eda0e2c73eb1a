"""OpenAI-backed implementation of CompletionService."""

from __future__ import annotations

import logging

import openai
from openai import OpenAI
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from car_catalog.domain.errors import CompletionServiceError
from car_catalog.infra.config import DEFAULT_OPENAI_MODEL
from car_catalog.ports.completion_service import CompletionService

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to fetch recommendations from AI."

RECOMMENDATION_PROMPT = """You are an expert car recommendation engine.

You receive a JSON object with a single field, "preferences": the user's
free-text description of the car they want (budget, fuel efficiency,
seating, use, and so on).

Based on the user's preferences, recommend a list of vehicles that match
their criteria. Provide the recommendations in a readable format.

Reply with a JSON object with exactly one field, "recommendations", whose
value is the formatted recommendations text."""


class RecommendCarsInput(BaseModel):
    preferences: str = Field(
        description="Desired car features, such as fuel efficiency, seating capacity, and budget.",
    )


class RecommendCarsOutput(BaseModel):
    recommendations: str = Field(
        description="Recommended vehicles matching the user's criteria, as readable text.",
    )


class OpenAICompletionService(CompletionService):
    """
    Sends {"preferences": ...} to a chat completion with a fixed instruction
    prompt and parses {"recommendations": ...} out of the JSON reply.

    Every failure (network, API status, empty or malformed output) surfaces
    as a single CompletionServiceError. No retries.
    """

    def __init__(
        self,
        client: OpenAI,
        model: str = DEFAULT_OPENAI_MODEL,
        temperature: float = 0.7,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature

    def recommend(self, preferences: str) -> str:
        payload = RecommendCarsInput(preferences=preferences)

        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": RECOMMENDATION_PROMPT},
                    {"role": "user", "content": payload.model_dump_json()},
                ],
                temperature=self._temperature,
                response_format={"type": "json_object"},
            )
        except openai.OpenAIError as exc:
            logger.error(
                "Completion request failed",
                exc_info=exc,
                extra={"model": self._model, "error_type": type(exc).__name__},
            )
            raise CompletionServiceError(FAILURE_MESSAGE) from exc

        content = response.choices[0].message.content if response.choices else None
        if not content:
            logger.error("Completion returned no content", extra={"model": self._model})
            raise CompletionServiceError(FAILURE_MESSAGE)

        try:
            output = RecommendCarsOutput.model_validate_json(content)
        except PydanticValidationError as exc:
            logger.error(
                "Completion output did not match schema",
                exc_info=exc,
                extra={"model": self._model},
            )
            raise CompletionServiceError(FAILURE_MESSAGE) from exc

        return output.recommendations
