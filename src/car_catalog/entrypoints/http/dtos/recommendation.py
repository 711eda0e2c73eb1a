from typing import Literal

from pydantic import BaseModel, Field


class RecommendationRequestDTO(BaseModel):
    # Length is checked by the domain so short input gets the TOO_SHORT code.
    preferences: str = Field(
        ...,
        description="What you are looking for, in your own words (at least 10 characters)",
        examples=["Family SUV under $30k with good mileage and a third row"],
    )


class RecommendationResponseDTO(BaseModel):
    status: Literal["ok", "empty"]
    recommendations: str | None = None
