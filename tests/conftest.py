"""Конфигурация и фикстуры для тестов Pytest."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from inventory_api.core.config import Settings
from inventory_api.db.session import build_session_factory, init_schema
from inventory_api.main import create_app

# Используем асинхронный драйвер для SQLite для тестов
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
STATIC_DIR = Path(__file__).resolve().parents[1] / "static"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    Фикстура для создания асинхронного движка БД для тестов.

    Каждый тест получает свою пустую базу в памяти.
    """
    async_engine = create_async_engine(
        TEST_DATABASE_URL, echo=False, poolclass=StaticPool
    )
    await init_schema(async_engine)

    yield async_engine

    await async_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Фикстура, создающая фабрику сессий для тестов.
    """
    return build_session_factory(engine)


@pytest.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """
    Фикстура, предоставляющая сессию БД для каждого теста.
    """
    async with session_factory() as db_session:
        yield db_session


@pytest.fixture
def test_settings() -> Settings:
    """Настройки без чтения файла .env."""
    return Settings(_env_file=None, STATIC_DIR=str(STATIC_DIR))  # type: ignore[call-arg]


@pytest.fixture
def app(
    test_settings: Settings, session_factory: async_sessionmaker[AsyncSession]
) -> FastAPI:
    """
    Приложение с тестовой фабрикой сессий.

    ASGITransport не запускает lifespan, поэтому фабрика кладется
    в app.state вручную.
    """
    application = create_app(test_settings)
    application.state.session_factory = session_factory
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """HTTP-клиент, обращающийся к приложению напрямую."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as http_client:
        yield http_client


@pytest.fixture
async def drop_products_table(engine: AsyncEngine) -> None:
    """Удаляет таблицу, чтобы любой запрос к ней завершался ошибкой базы."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
