"""Tests for the /v1/news routes."""

from __future__ import annotations

from datetime import date
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from car_catalog.domain.errors import NotFoundError
from car_catalog.domain.news import NewsArticle
from car_catalog.entrypoints.http.dependencies import (
    get_get_news_article_use_case,
    get_list_news_use_case,
)
from car_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from car_catalog.entrypoints.http.routes.news import router
from car_catalog.use_cases.get_news_article import GetNewsArticleResponse
from car_catalog.use_cases.list_news_articles import ListNewsArticlesResponse

ARTICLE = NewsArticle(
    id="1",
    slug="future-of-electric-cars-2025",
    title="The Future of Electric Cars",
    date=date(2024, 7, 28),
    author="Alex Johnson",
    image_url="https://placehold.co/600x400.png",
    data_ai_hint="electric car",
    summary="Electric vehicles are rapidly evolving.",
    content="<p>Electrification keeps accelerating.</p>",
)


@pytest.fixture
def app() -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def mock_use_case() -> Mock:
    return Mock()


def test_list_news(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = ListNewsArticlesResponse(articles=[ARTICLE])
    app.dependency_overrides[get_list_news_use_case] = lambda: mock_use_case

    response = client.get("/v1/news")

    assert response.status_code == 200
    assert response.json() == {
        "articles": [
            {
                "id": "1",
                "slug": "future-of-electric-cars-2025",
                "title": "The Future of Electric Cars",
                "date": "2024-07-28",
                "author": "Alex Johnson",
                "image_url": "https://placehold.co/600x400.png",
                "data_ai_hint": "electric car",
                "summary": "Electric vehicles are rapidly evolving.",
            }
        ]
    }


def test_list_news_empty(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = ListNewsArticlesResponse(articles=[])
    app.dependency_overrides[get_list_news_use_case] = lambda: mock_use_case

    assert client.get("/v1/news").json() == {"articles": []}


def test_get_article_includes_content(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    mock_use_case.execute.return_value = GetNewsArticleResponse(article=ARTICLE)
    app.dependency_overrides[get_get_news_article_use_case] = lambda: mock_use_case

    response = client.get("/v1/news/future-of-electric-cars-2025")

    assert response.status_code == 200
    assert response.json()["content"] == "<p>Electrification keeps accelerating.</p>"
    assert mock_use_case.execute.call_args[0][0].slug == "future-of-electric-cars-2025"


def test_get_unknown_article_is_404(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    mock_use_case.execute.side_effect = NotFoundError("NewsArticle", "nope")
    app.dependency_overrides[get_get_news_article_use_case] = lambda: mock_use_case

    response = client.get("/v1/news/nope")

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"
