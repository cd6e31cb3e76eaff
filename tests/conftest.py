import asyncio
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from personal_site.config import Settings
from personal_site.core.db import create_engine, create_session_factory, init_models
from personal_site.main import create_app
from tests.helpers import sample_entries, seed


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        site_url="https://example.com/",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'content.db'}",
    )


@pytest_asyncio.fixture
async def session(settings: Settings):
    engine = create_engine(settings)
    await init_models(engine)
    async with create_session_factory(engine)() as session:
        yield session
    await engine.dispose()


@pytest_asyncio.fixture
async def seeded_session(settings: Settings):
    await seed(settings, sample_entries())
    engine = create_engine(settings)
    async with create_session_factory(engine)() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def client(settings: Settings):
    asyncio.run(seed(settings, sample_entries()))
    with TestClient(create_app(settings)) as test_client:
        yield test_client
