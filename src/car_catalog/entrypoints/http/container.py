"""Application-scoped objects.

Unlike the per-request use cases, these live as long as the app: the live
catalog holds the one store subscription, and the recommendation use case
tracks in-flight requests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from openai import OpenAI

from car_catalog.adapters.in_memory_car_document_store import InMemoryCarDocumentStore
from car_catalog.adapters.in_memory_identity_provider import InMemoryIdentityProvider
from car_catalog.adapters.live_car_catalog import LiveCarCatalog
from car_catalog.adapters.openai_completion_service import OpenAICompletionService
from car_catalog.adapters.static_news_repository import StaticNewsRepository
from car_catalog.infra import config
from car_catalog.ports.car_document_store import CarDocumentStore
from car_catalog.ports.identity_provider import IdentityProvider
from car_catalog.ports.news_repository import NewsRepository
from car_catalog.use_cases.recommend_cars import RecommendCars

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    store: CarDocumentStore
    catalog: LiveCarCatalog
    news_repository: NewsRepository
    identity_provider: IdentityProvider
    recommend_cars: RecommendCars | None = None  # None when no API key is configured


def build_store() -> CarDocumentStore:
    backend = config.store_backend()

    if backend == "postgres":
        from car_catalog.adapters.postgres_car_document_store import (
            PostgresCarDocumentStore,
        )

        return PostgresCarDocumentStore(poll_interval=config.store_poll_seconds())

    return InMemoryCarDocumentStore()


def build_recommend_cars() -> RecommendCars | None:
    api_key = config.openai_api_key()

    if api_key is None:
        logger.warning("OPENAI_API_KEY is not set; recommendations are disabled")
        return None

    client = OpenAI(api_key=api_key, timeout=config.openai_timeout_seconds())
    service = OpenAICompletionService(client=client, model=config.openai_model())
    return RecommendCars(completion_service=service)


def build_container() -> AppContainer:
    store = build_store()

    return AppContainer(
        store=store,
        catalog=LiveCarCatalog(store),
        news_repository=StaticNewsRepository(),
        identity_provider=InMemoryIdentityProvider(),
        recommend_cars=build_recommend_cars(),
    )
