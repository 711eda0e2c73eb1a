from __future__ import annotations

from dataclasses import dataclass

from car_catalog.domain.news import NewsArticle
from car_catalog.ports.news_repository import NewsRepository


@dataclass(frozen=True, slots=True)
class ListNewsArticlesResponse:
    articles: list[NewsArticle]


class ListNewsArticles:
    def __init__(self, news_repository: NewsRepository) -> None:
        self._repository = news_repository

    def execute(self) -> ListNewsArticlesResponse:
        return ListNewsArticlesResponse(articles=self._repository.list_articles())
