"""Настройки конфигурации приложения."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Загружает настройки из переменных окружения и файла .env.

    Атрибуты:
        model_config: Конфигурация для Pydantic моделей.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # База данных. DATABASE_URL имеет приоритет над остальными полями.
    DATABASE_URL: str | None = None
    POSTGRES_USER: str | None = None
    POSTGRES_PASSWORD: str | None = None
    POSTGRES_DB: str | None = None
    POSTGRES_HOST: str | None = None
    POSTGRES_PORT: int = 5432
    # Файл SQLite, если PostgreSQL не настроен
    SQLITE_PATH: str = "inventory.db"
    SQL_ECHO: bool = False

    # HTTP-сервер
    HOST: str = "0.0.0.0"  # noqa: S104
    PORT: int = 3000
    # Каталог со статикой веб-интерфейса
    STATIC_DIR: str = "static"

    LOG_LEVEL: str = "INFO"
    # Порог "мало на складе" для статистики
    LOW_STOCK_THRESHOLD: int = 20

    @property
    def database_url(self) -> str:
        """
        Собирает строку подключения к базе данных.

        Returns:
            Строка подключения для асинхронного движка SQLAlchemy.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.POSTGRES_HOST:
            return (
                f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
            )
        return f"sqlite+aiosqlite:///{self.SQLITE_PATH}"


settings = Settings()
