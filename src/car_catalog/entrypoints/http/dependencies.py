"""
Dependency injection for FastAPI routes.

Key principle: use cases are cheap and built per request; the objects they
wrap (live catalog, identity provider, recommendation guard) are
application-scoped and come from the container on app.state.
"""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from car_catalog.domain.errors import ServiceUnavailableError, UnauthorizedError
from car_catalog.domain.user import User
from car_catalog.entrypoints.http.container import AppContainer
from car_catalog.use_cases.add_car import AddCar
from car_catalog.use_cases.authenticate import SignIn, SignOut, SignUp
from car_catalog.use_cases.get_car_by_id import GetCarById
from car_catalog.use_cases.get_news_article import GetNewsArticle
from car_catalog.use_cases.list_car_makes import ListCarMakes
from car_catalog.use_cases.list_news_articles import ListNewsArticles
from car_catalog.use_cases.recommend_cars import RecommendCars
from car_catalog.use_cases.search_car_catalog import SearchCarCatalog

bearer_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> AppContainer:
    """Application container created by build_app()."""
    return request.app.state.container


# ==============================================================================
# Catalog
# ==============================================================================


def get_search_catalog_use_case(
    container: AppContainer = Depends(get_container),
) -> SearchCarCatalog:
    """
    Factory function that returns a configured SearchCarCatalog use case.

    Args:
        container: Application container (injected by FastAPI)

    Returns:
        SearchCarCatalog: Use case reading the shared live catalog
    """
    return SearchCarCatalog(car_catalog=container.catalog)


def get_list_car_makes_use_case(
    container: AppContainer = Depends(get_container),
) -> ListCarMakes:
    return ListCarMakes(car_catalog=container.catalog)


def get_get_car_by_id_use_case(
    container: AppContainer = Depends(get_container),
) -> GetCarById:
    return GetCarById(car_catalog=container.catalog)


def get_add_car_use_case(container: AppContainer = Depends(get_container)) -> AddCar:
    return AddCar(car_catalog=container.catalog)


# ==============================================================================
# News
# ==============================================================================


def get_list_news_use_case(
    container: AppContainer = Depends(get_container),
) -> ListNewsArticles:
    return ListNewsArticles(news_repository=container.news_repository)


def get_get_news_article_use_case(
    container: AppContainer = Depends(get_container),
) -> GetNewsArticle:
    return GetNewsArticle(news_repository=container.news_repository)


# ==============================================================================
# Recommendations
# ==============================================================================


def get_recommend_cars_use_case(
    container: AppContainer = Depends(get_container),
) -> RecommendCars:
    """
    The shared RecommendCars instance.

    Not built per request: it remembers which requesters have a call in flight.

    Raises:
        ServiceUnavailableError: If no completion service is configured
    """
    if container.recommend_cars is None:
        raise ServiceUnavailableError("Recommendation service is not configured")
    return container.recommend_cars


# ==============================================================================
# Authentication
# ==============================================================================


def get_sign_up_use_case(container: AppContainer = Depends(get_container)) -> SignUp:
    return SignUp(identity_provider=container.identity_provider)


def get_sign_in_use_case(container: AppContainer = Depends(get_container)) -> SignIn:
    return SignIn(identity_provider=container.identity_provider)


def get_sign_out_use_case(container: AppContainer = Depends(get_container)) -> SignOut:
    return SignOut(identity_provider=container.identity_provider)


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    return credentials.credentials if credentials else None


def get_optional_user(
    token: str | None = Depends(get_bearer_token),
    container: AppContainer = Depends(get_container),
) -> User | None:
    """Signed-in user, or None for anonymous requests and unknown tokens."""
    if token is None:
        return None
    return container.identity_provider.resolve(token)


def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    """
    Signed-in user for auth-gated routes.

    Raises:
        UnauthorizedError: If there is no valid session token
    """
    if user is None:
        raise UnauthorizedError("Authentication required")
    return user
