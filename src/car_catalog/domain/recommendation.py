from __future__ import annotations

from dataclasses import dataclass

from car_catalog.domain.errors import ValidationError

MIN_PREFERENCES_LENGTH = 10


@dataclass(frozen=True, slots=True)
class RecommendationRequest:
    """Free-text description of what the buyer is looking for."""

    preferences: str

    def validate(self) -> None:
        """
        Reject descriptions too short to be useful.

        Raises:
            ValidationError: If preferences has fewer than 10 characters
        """
        if len(self.preferences) < MIN_PREFERENCES_LENGTH:
            raise ValidationError(
                errors=[
                    {
                        "field": "preferences",
                        "message": (
                            "Please describe your preferences in at least "
                            f"{MIN_PREFERENCES_LENGTH} characters."
                        ),
                        "code": "TOO_SHORT",
                    }
                ]
            )
