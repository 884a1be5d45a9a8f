"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings read from the environment or ``.env`` (names are case-insensitive).

    ``USER_STORE`` picks what backs the users endpoints; the ``DB_*`` values
    are only read when it is ``database``.
    """

    user_store: Literal["placeholder", "database"] = Field(default="placeholder")

    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432)
    db_user: str = Field(default="postgres")
    db_password: str = Field(default="postgres")
    db_name: str = Field(default="users_db")
    db_echo: bool = Field(default=False)
    db_pool_size: int = Field(default=5)
    db_max_overflow: int = Field(default=10)
    db_create_tables: bool = Field(default=True)

    environment: Literal["dev", "prod", "test"] = Field(default="dev")
    debug: bool = Field(default=False)
    app_name: str = Field(default="User Resource API")
    app_version: str = Field(default="1.0.0")
    cors_origins: str = Field(default="http://localhost:3000")
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def database_url(self) -> str:
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def uses_database(self) -> bool:
        return self.user_store == "database"


@lru_cache
def get_settings() -> Settings:
    """Settings are read once; tests reset them with ``get_settings.cache_clear()``."""
    return Settings()
