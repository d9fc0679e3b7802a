# settings.py
"""
Smart Fitness Planner API Settings.

Pydantic settings management with environment variable support.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Database
    DATABASE_URL: str = Field(
        default="sqlite:///./smart_fitness.db",
        description="SQLAlchemy database URL (sqlite or postgresql)"
    )

    # Environment
    ENV: str = Field(default="development")
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # CORS
    CORS_ORIGINS: str = "http://localhost:4200,http://localhost:3000"

    # Plan generation
    ACTIVITY_MULTIPLIER: float = Field(
        default=1.5,
        gt=1.0,
        description="Activity multiplier applied to BMR for every calorie target"
    )
    COMPLETION_MAX_ATTEMPTS: int = Field(
        default=3,
        ge=1,
        description="Compare-and-swap attempts for completion toggles"
    )

    # Sentry Error Tracking
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    @property
    def is_sqlite(self) -> bool:
        """Check if using SQLite (vs PostgreSQL)."""
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def expose_error_details(self) -> bool:
        """Storage error text is only returned to clients outside production."""
        return self.DEBUG and self.ENV != "production"

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
