"""Application configuration from environment variables."""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import (
    DEFAULT_RECOVERY_HOURS,
    FRESHNESS_THRESHOLD,
    MUSCLE_RECOVERY_HOURS,
)
from app.core.enums import MuscleGroupName, WeightUnit


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Workout Tracker API"
    debug: bool = False
    environment: str = "development"

    # API
    api_v1_prefix: str = "/api/v1"

    # Database (PostgreSQL)
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "postgres"
    database_password: str = ""  # Set in .env - never commit
    database_name: str = "workout_tracker"
    database_ssl_mode: str = "disable"

    # Pool
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # CORS: comma-separated list of allowed origins in production
    cors_origins: str = ""

    # Training defaults
    weight_unit: WeightUnit = WeightUnit.LBS
    freshness_threshold: float = Field(default=FRESHNESS_THRESHOLD, ge=0, le=1)
    default_recovery_hours: float = Field(default=DEFAULT_RECOVERY_HOURS, gt=0)
    # Per-muscle overrides, e.g. RECOVERY_HOURS='{"Chest": 96}'
    recovery_hours: dict[MuscleGroupName, float] = Field(default_factory=dict)

    def _build_db_url(self, scheme: str = "postgresql", ssl_query: str = "sslmode=disable") -> str:
        user = quote_plus(self.database_user)
        password = quote_plus(self.database_password)
        return (
            f"{scheme}://{user}:{password}@{self.database_host}:{self.database_port}"
            f"/{self.database_name}?{ssl_query}"
        )

    @property
    def database_url(self) -> str:
        """Synchronous URL for Alembic and tooling."""
        return self._build_db_url(scheme="postgresql", ssl_query=f"sslmode={self.database_ssl_mode}")

    @property
    def async_database_url(self) -> str:
        """Async URL for FastAPI (asyncpg driver)."""
        ssl = "require" if self.database_ssl_mode != "disable" else "disable"
        return self._build_db_url(scheme="postgresql+asyncpg", ssl_query=f"ssl={ssl}")

    @property
    def recovery_windows(self) -> dict[MuscleGroupName, float]:
        """Recovery window in hours for every muscle group, overrides applied."""
        windows = {mg: float(MUSCLE_RECOVERY_HOURS.get(mg, self.default_recovery_hours)) for mg in MuscleGroupName}
        windows.update({mg: float(h) for mg, h in self.recovery_hours.items()})
        return windows


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
