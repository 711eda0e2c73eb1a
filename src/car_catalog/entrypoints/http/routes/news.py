from fastapi import APIRouter, Depends

from car_catalog.entrypoints.http.dependencies import (
    get_get_news_article_use_case,
    get_list_news_use_case,
)
from car_catalog.entrypoints.http.dtos.news import NewsArticleDTO, NewsListResponseDTO
from car_catalog.entrypoints.http.error_responses import ErrorResponse
from car_catalog.entrypoints.http.mappers.news_mapper import NewsMapper
from car_catalog.use_cases.get_news_article import GetNewsArticle, GetNewsArticleRequest
from car_catalog.use_cases.list_news_articles import ListNewsArticles


router = APIRouter(tags=["News"])


@router.get(
    "/news",
    response_model=NewsListResponseDTO,
    summary="List news articles",
    description="Article summaries, newest first.",
)
def list_news(
    use_case: ListNewsArticles = Depends(get_list_news_use_case),
) -> NewsListResponseDTO:
    result = use_case.execute()
    return NewsMapper.to_list_response(result.articles)


@router.get(
    "/news/{slug}",
    response_model=NewsArticleDTO,
    summary="Read a news article",
    responses={404: {"model": ErrorResponse, "description": "Unknown slug"}},
)
def get_news_article(
    slug: str,
    use_case: GetNewsArticle = Depends(get_get_news_article_use_case),
) -> NewsArticleDTO:
    result = use_case.execute(GetNewsArticleRequest(slug=slug))
    return NewsMapper.to_article(result.article)
