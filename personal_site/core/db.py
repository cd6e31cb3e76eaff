from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from personal_site.config import Settings
from personal_site.db.base import Base


def create_engine(settings: Settings) -> AsyncEngine:
    """Асинхронный движок для хранилища контента"""
    return create_async_engine(settings.database_url, future=True, echo=settings.db_echo)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def init_models(engine: AsyncEngine) -> None:
    """Создание таблиц, если их еще нет"""
    # Регистрируем модели в метаданных
    import personal_site.db.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
