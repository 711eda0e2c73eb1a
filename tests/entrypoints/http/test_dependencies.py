"""
Unit tests for FastAPI dependency injection functions.

This test suite verifies the dependency wiring logic:
- Use cases are built per request around application-scoped objects
- The recommendation use case is shared (it tracks in-flight requests)
- Bearer tokens resolve to users through the identity provider
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from car_catalog.domain.errors import ServiceUnavailableError, UnauthorizedError
from car_catalog.domain.user import User
from car_catalog.entrypoints.http.container import AppContainer
from car_catalog.entrypoints.http.dependencies import (
    get_add_car_use_case,
    get_bearer_token,
    get_container,
    get_current_user,
    get_get_car_by_id_use_case,
    get_get_news_article_use_case,
    get_list_car_makes_use_case,
    get_list_news_use_case,
    get_optional_user,
    get_recommend_cars_use_case,
    get_search_catalog_use_case,
    get_sign_in_use_case,
    get_sign_out_use_case,
    get_sign_up_use_case,
)
from car_catalog.use_cases.add_car import AddCar
from car_catalog.use_cases.authenticate import SignIn, SignOut, SignUp
from car_catalog.use_cases.get_car_by_id import GetCarById
from car_catalog.use_cases.get_news_article import GetNewsArticle
from car_catalog.use_cases.list_car_makes import ListCarMakes
from car_catalog.use_cases.list_news_articles import ListNewsArticles
from car_catalog.use_cases.search_car_catalog import SearchCarCatalog

USER = User(uid="u-1", email="driver@example.com")


@pytest.fixture
def container() -> AppContainer:
    return AppContainer(
        store=Mock(),
        catalog=Mock(),
        news_repository=Mock(),
        identity_provider=Mock(),
        recommend_cars=Mock(),
    )


def test_get_container_reads_app_state(container: AppContainer) -> None:
    request = Mock()
    request.app.state.container = container

    assert get_container(request) is container


# ==============================================================================
# Use case factories
# ==============================================================================


@pytest.mark.parametrize(
    ("factory", "use_case_type", "attribute", "dependency"),
    [
        (get_search_catalog_use_case, SearchCarCatalog, "_catalog", "catalog"),
        (get_list_car_makes_use_case, ListCarMakes, "_catalog", "catalog"),
        (get_get_car_by_id_use_case, GetCarById, "_catalog", "catalog"),
        (get_add_car_use_case, AddCar, "_catalog", "catalog"),
        (get_list_news_use_case, ListNewsArticles, "_repository", "news_repository"),
        (get_get_news_article_use_case, GetNewsArticle, "_repository", "news_repository"),
        (get_sign_up_use_case, SignUp, "_identity_provider", "identity_provider"),
        (get_sign_in_use_case, SignIn, "_identity_provider", "identity_provider"),
        (get_sign_out_use_case, SignOut, "_identity_provider", "identity_provider"),
    ],
)
def test_factories_wire_container_objects(
    container: AppContainer, factory, use_case_type: type, attribute: str, dependency: str
) -> None:
    use_case = factory(container)

    assert isinstance(use_case, use_case_type)
    assert getattr(use_case, attribute) is getattr(container, dependency)


def test_factories_return_fresh_use_cases(container: AppContainer) -> None:
    assert get_search_catalog_use_case(container) is not get_search_catalog_use_case(container)


def test_recommend_cars_is_shared(container: AppContainer) -> None:
    assert get_recommend_cars_use_case(container) is container.recommend_cars
    assert get_recommend_cars_use_case(container) is get_recommend_cars_use_case(container)


def test_recommend_cars_unconfigured_raises(container: AppContainer) -> None:
    container.recommend_cars = None

    with pytest.raises(ServiceUnavailableError):
        get_recommend_cars_use_case(container)


# ==============================================================================
# Authentication
# ==============================================================================


def test_bearer_token_extracted_from_credentials() -> None:
    credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials="tok")

    assert get_bearer_token(credentials) == "tok"
    assert get_bearer_token(None) is None


def test_optional_user_resolves_token(container: AppContainer) -> None:
    container.identity_provider.resolve.return_value = USER

    assert get_optional_user("tok", container) == USER
    container.identity_provider.resolve.assert_called_once_with("tok")


def test_optional_user_without_token_skips_provider(container: AppContainer) -> None:
    assert get_optional_user(None, container) is None
    container.identity_provider.resolve.assert_not_called()


def test_current_user_requires_user() -> None:
    assert get_current_user(USER) == USER

    with pytest.raises(UnauthorizedError):
        get_current_user(None)
