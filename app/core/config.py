"""Application configuration from environment variables."""

from functools import lru_cache
from urllib.parse import quote_plus
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Progress Analytics API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"

    # Database (PostgreSQL)
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "postgres"
    database_password: str = ""  # Set in .env - never commit
    database_name: str = "progress"
    database_ssl_mode: str = "disable"

    # Pool (production tuning)
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # CORS: comma-separated list of allowed origins in production
    cors_origins: str = ""

    # Day boundary for streak bucketing ("today" / "yesterday"), IANA zone name
    progress_timezone: str = "UTC"

    def _build_db_url(self, scheme: str = "postgresql", ssl_query: str = "") -> str:
        user = quote_plus(self.database_user)
        password = quote_plus(self.database_password)
        url = (
            f"{scheme}://{user}:{password}@{self.database_host}:{self.database_port}"
            f"/{self.database_name}"
        )
        return f"{url}?{ssl_query}" if ssl_query else url

    @property
    def database_url(self) -> str:
        """Synchronous URL for Alembic and tooling."""
        if self.database_ssl_mode == "disable":
            return self._build_db_url(scheme="postgresql")
        return self._build_db_url(scheme="postgresql", ssl_query=f"sslmode={self.database_ssl_mode}")

    @property
    def async_database_url(self) -> str:
        """Async URL for FastAPI (asyncpg driver). asyncpg takes the libpq sslmode names as `ssl`."""
        if self.database_ssl_mode == "disable":
            return self._build_db_url(scheme="postgresql+asyncpg")
        return self._build_db_url(scheme="postgresql+asyncpg", ssl_query=f"ssl={self.database_ssl_mode}")

    @property
    def allowed_origins(self) -> list[str]:
        """CORS origins: everything in debug, localhost in development, CORS_ORIGINS otherwise."""
        if self.debug:
            return ["*"]
        if self.environment == "development":
            return ["http://localhost:3000", "http://127.0.0.1:3000"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def day_boundary_tz(self) -> ZoneInfo:
        """Zone whose midnight separates one logged day from the next."""
        return ZoneInfo(self.progress_timezone)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
