# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List


def split_csv(value: str) -> List[str]:
    """'GET, POST' -> ['GET', 'POST']"""
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Application settings read from environment variables"""

    # App
    APP_NAME: str = Field(default="ReadingTracker", description="Application name")
    DEBUG: bool = Field(default=False, description="Debug mode")
    PORT: int = Field(default=3000, description="Listener port")

    # CORS
    CORS_ORIGIN: str = Field(default="*", description="Allowed origins, comma separated")
    CORS_METHODS: str = Field(default="GET, POST, PUT, DELETE, OPTIONS")
    CORS_HEADERS: str = Field(default="Content-Type, Authorization")
    CORS_EXPOSE_HEADERS: str = Field(default="Content-Type, Authorization")

    # Security (reserved, not consumed by any route yet)
    JWT_SECRET: str = Field(default="secret", description="Token signing secret")
    JWT_ALGORITHM: str = Field(default="HS256", description="Token signing algorithm")
    JWT_EXPIRES_IN: str = Field(
        default="1h", pattern=r"^\d+[smhd]?$", description="Token lifetime, e.g. 30m, 1h, 7d"
    )

    # Database
    DB_HOST: str = Field(default="localhost")
    DB_PORT: int = Field(default=5432)
    DB_USER: str = Field(default="reading")
    DB_PASSWORD: str = Field(default="reading")
    DB_DATABASE: str = Field(default="reading")
    DATABASE_URL: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL, overrides the DB_* parts when set",
    )

    # Connection pool
    DB_POOL_SIZE: int = Field(default=20, gt=0, description="Upper bound of pooled connections")
    DB_MAX_OVERFLOW: int = Field(default=0, ge=0)
    DB_POOL_TIMEOUT: float = Field(
        default=2.0, gt=0, description="Seconds to wait for a free connection"
    )
    DB_POOL_RECYCLE: int = Field(default=1800, description="Seconds before a connection is recycled")
    DB_ECHO: bool = Field(default=False, description="Log every SQL statement")
    DB_CREATE_TABLES: bool = Field(default=True, description="Create tables on startup")

    # Rate limiting
    RATE_LIMIT: str = Field(default="100/minute", description="Default slowapi limit")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_DATABASE}"
        )

    @property
    def cors_origins(self) -> List[str]:
        return split_csv(self.CORS_ORIGIN)

    @property
    def cors_methods(self) -> List[str]:
        return split_csv(self.CORS_METHODS)

    @property
    def cors_headers(self) -> List[str]:
        return split_csv(self.CORS_HEADERS)

    @property
    def cors_expose_headers(self) -> List[str]:
        return split_csv(self.CORS_EXPOSE_HEADERS)


settings = Settings()
