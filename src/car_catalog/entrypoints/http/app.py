from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from car_catalog.entrypoints.http.container import AppContainer, build_container
from car_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from car_catalog.entrypoints.http.routes.auth import router as auth_router
from car_catalog.entrypoints.http.routes.cars import router as cars_router
from car_catalog.entrypoints.http.routes.health import router as health_router
from car_catalog.entrypoints.http.routes.news import router as news_router
from car_catalog.entrypoints.http.routes.recommendations import (
    router as recommendations_router,
)
from car_catalog.infra.db.session import dispose_engine


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    container: AppContainer = app.state.container

    # One live subscription per running app; torn down on shutdown.
    container.catalog.start()
    try:
        yield
    finally:
        container.catalog.stop()
        container.store.close()
        dispose_engine()


def build_app(container: AppContainer | None = None) -> FastAPI:
    app = FastAPI(
        title="Car Catalog API",
        description="""
        Car catalog API for browsing listings, reading news, and getting recommendations.

        ## Features
        - Browse the catalog with filters and sorting
        - Make suggestions for incremental search
        - Get car details
        - Add listings (signed-in users)
        - Automotive news
        - Free-text AI car recommendations

        ## Authentication
        Sign up or log in under /v1/auth to get a bearer token.
        Only adding listings requires it.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        contact={
            "name": "Car Catalog Team",
            "email": "dev@car-catalog.dev",
        },
        license_info={
            "name": "Proprietary",
        },
        lifespan=lifespan,
    )

    app.state.container = container or build_container()

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(cars_router, prefix="/v1")
    app.include_router(news_router, prefix="/v1")
    app.include_router(recommendations_router, prefix="/v1")
    app.include_router(auth_router, prefix="/v1")

    return app


app = build_app()
