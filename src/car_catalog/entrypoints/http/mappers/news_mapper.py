from __future__ import annotations

from car_catalog.domain.news import NewsArticle
from car_catalog.entrypoints.http.dtos.news import (
    NewsArticleDTO,
    NewsListResponseDTO,
    NewsSummaryDTO,
)


class NewsMapper:
    @staticmethod
    def to_summary(article: NewsArticle) -> NewsSummaryDTO:
        return NewsSummaryDTO(
            id=article.id,
            slug=article.slug,
            title=article.title,
            date=article.date,
            author=article.author,
            image_url=article.image_url,
            data_ai_hint=article.data_ai_hint,
            summary=article.summary,
        )

    @staticmethod
    def to_article(article: NewsArticle) -> NewsArticleDTO:
        return NewsArticleDTO(
            **NewsMapper.to_summary(article).model_dump(),
            content=article.content,
        )

    @staticmethod
    def to_list_response(articles: list[NewsArticle]) -> NewsListResponseDTO:
        return NewsListResponseDTO(articles=[NewsMapper.to_summary(a) for a in articles])
