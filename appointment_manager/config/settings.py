from urllib.parse import quote_plus

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Loaded automatically from environment variables and ``.env``.
    """

    # API Configuration
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Appointment Manager API"
    PROJECT_DESCRIPTION: str = "API for scheduling and tracking medical appointments"
    VERSION: str = "0.1.0"

    # PostgreSQL Database Settings
    DB_HOST: str = Field("localhost", description="PostgreSQL host")
    DB_PORT: int = Field(5432, description="PostgreSQL port")
    DB_NAME: str = Field("appointments", description="Database name")
    DB_USER: str = Field("postgres", description="PostgreSQL user")
    DB_PASSWORD: str | None = Field(None, description="PostgreSQL password")
    DB_ECHO: bool = Field(False, description="Log SQL queries (debug only)")
    DB_CREATE_TABLES: bool = Field(False, description="Create missing tables on startup")

    # Database connection pool settings
    DB_POOL_SIZE: int = Field(20, description="Connection pool size")
    DB_MAX_OVERFLOW: int = Field(30, description="Maximum pool overflow")
    DB_POOL_RECYCLE: int = Field(3600, description="Recycle connections every N seconds")

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Runtime environment")
    LOG_LEVEL: str = Field("INFO", description="Root logging level")

    # CORS
    CORS_ALLOWED_ORIGINS: str = Field("*", description="Comma-separated allowed origins, '*' for any")

    # Pagination
    DEFAULT_PAGE_SIZE: int = Field(10, description="Page size used when the client sends none")
    MAX_PAGE_SIZE: int = Field(100, description="Largest page size accepted by the API")

    # Sentry Configuration
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN for error tracking")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("DB_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v):
        if v < 1:
            raise ValueError("DB_POOL_SIZE must be at least 1")
        return v

    @field_validator("DB_MAX_OVERFLOW")
    @classmethod
    def validate_max_overflow(cls, v):
        if v < 0:
            raise ValueError("DB_MAX_OVERFLOW cannot be negative")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @computed_field
    @property
    def database_url(self) -> str:
        """Async (asyncpg) connection URL with escaped credentials."""
        user = quote_plus(self.DB_USER)
        if self.DB_PASSWORD:
            password = quote_plus(self.DB_PASSWORD)
            return f"postgresql+asyncpg://{user}:{password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        return f"postgresql+asyncpg://{user}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @computed_field
    @property
    def cors_origins(self) -> list[str]:
        origins = [origin.strip() for origin in self.CORS_ALLOWED_ORIGINS.split(",") if origin.strip()]
        return origins or ["*"]

    @computed_field
    @property
    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local"]


# Cached settings singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return a cached Settings instance.
    Avoids re-reading the environment on every call.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
