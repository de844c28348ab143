"""Главный файл приложения. Точка входа."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from inventory_api.core.config import Settings, settings
from inventory_api.core.errors import InventoryError, StorageError
from inventory_api.core.logging import configure_logging
from inventory_api.db.session import build_engine, build_session_factory, init_schema
from inventory_api.handlers import products, stats


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Контекстный менеджер для управления жизненным циклом приложения.

    Движок базы данных открывается один раз при старте и закрывается
    при остановке (uvicorn переводит SIGINT/SIGTERM в shutdown).
    """
    app_settings: Settings = app.state.settings
    configure_logging(app_settings.LOG_LEVEL)
    logging.info("--- LIFESPAN START ---")

    logging.info("1. Connecting to the database...")
    engine = build_engine(app_settings.database_url, echo=app_settings.SQL_ECHO)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    logging.info("2. Creating schema if missing...")
    await init_schema(engine)
    logging.info("--- LIFESPAN STARTUP COMPLETE. APP IS READY. ---")

    yield

    logging.info("--- LIFESPAN SHUTDOWN ---")
    await engine.dispose()
    logging.info("Database connection closed.")


async def inventory_error_handler(request: Request, exc: InventoryError) -> JSONResponse:
    """Переводит типизированные ошибки в JSON-ответ {"error": ...}."""
    if isinstance(exc, StorageError):
        logging.error(
            "Storage error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc,
        )
    else:
        logging.info(
            "%s %s -> %s %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
        )
    return JSONResponse(content={"error": exc.message}, status_code=exc.status_code)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Собирает приложение FastAPI.

    Args:
        app_settings: Настройки; по умолчанию берутся из окружения.

    Returns:
        Готовое приложение с API и веб-интерфейсом.
    """
    app_settings = app_settings or settings
    app = FastAPI(title="Inventory Management API", lifespan=lifespan)
    app.state.settings = app_settings

    app.add_exception_handler(InventoryError, inventory_error_handler)  # type: ignore[arg-type]
    app.include_router(products.router)
    app.include_router(stats.router)

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    # Статика монтируется последней, чтобы не перекрывать маршруты API
    static_dir = Path(app_settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logging.warning("Static directory %s not found, UI is disabled", static_dir)

    return app


app = create_app()


def run() -> None:
    """Запуск сервера uvicorn."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


# --- Точка входа для локального запуска ---
if __name__ == "__main__":
    run()
