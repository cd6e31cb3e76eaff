import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from personal_site.api.http import (
    health_router, notes_router, pages_router, projects_router, site_router
)
from personal_site.config import Settings, get_settings
from personal_site.core.db import create_engine, create_session_factory, init_models
from personal_site.core.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Сборка приложения; конфигурация создается один раз и хранится в app.state"""
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_engine(settings)
        await init_models(engine)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        logger.info(f"Started {settings.site.name} at {settings.site_url}")
        try:
            yield
        finally:
            await engine.dispose()
            logger.info("Content store connection closed")

    app = FastAPI(
        title=settings.site.name,
        description=settings.home.description,
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(site_router)
    app.include_router(pages_router)
    app.include_router(notes_router)
    app.include_router(projects_router)

    return app
