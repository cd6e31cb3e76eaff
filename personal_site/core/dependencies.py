from fastapi import Request

from personal_site.config import Settings


# Функция для dependency injection в FastAPI
async def get_db(request: Request):
    async with request.app.state.session_factory() as session:
        yield session


def get_app_settings(request: Request) -> Settings:
    """Конфигурация, созданная при старте приложения"""
    return request.app.state.settings
