from __future__ import annotations

from abc import ABC, abstractmethod


class CompletionService(ABC):
    """
    Port for the hosted prompt-in/text-out recommendation backend.

    Input is {"preferences": str}, output is {"recommendations": str}.
    The text is not grounded against the catalog.
    """

    @abstractmethod
    def recommend(self, preferences: str) -> str:
        """
        Ask the service for recommendations.

        Returns:
            The recommendations text (possibly empty)

        Raises:
            CompletionServiceError: On any transport or service failure
        """
        ...
