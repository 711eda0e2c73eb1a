from __future__ import annotations

from abc import ABC, abstractmethod

from car_catalog.domain.news import NewsArticle


class NewsRepository(ABC):
    @abstractmethod
    def list_articles(self) -> list[NewsArticle]:
        """All articles, newest first."""
        ...

    @abstractmethod
    def get_by_slug(self, slug: str) -> NewsArticle | None: ...
