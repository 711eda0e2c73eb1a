"""Get news article by slug use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_catalog.domain.errors import NotFoundError
from car_catalog.domain.news import NewsArticle
from car_catalog.ports.news_repository import NewsRepository


@dataclass(frozen=True, slots=True)
class GetNewsArticleRequest:
    slug: str


@dataclass(frozen=True, slots=True)
class GetNewsArticleResponse:
    article: NewsArticle


class GetNewsArticle:
    def __init__(self, news_repository: NewsRepository) -> None:
        self._repository = news_repository

    def execute(self, request: GetNewsArticleRequest) -> GetNewsArticleResponse:
        """
        Raises:
            NotFoundError: If no article has this slug
        """
        article = self._repository.get_by_slug(request.slug)

        if article is None:
            raise NotFoundError(resource="NewsArticle", identifier=request.slug)

        return GetNewsArticleResponse(article=article)
