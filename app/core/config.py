"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Training Records: weekly summaries and coaching recommendations."
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Training Records maintainers"]
    PROJECT_URL: str = ""

    DEBUG: bool = False

    # Database
    DATABASE_URL: Optional[str] = None
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "postgres"

    # Calendar
    REFERENCE_TIMEZONE: str = "UTC"
    WEEK_START_WEEKDAY: int = 6  # Sunday, datetime.weekday() numbering

    # Weekly summary / recommendation rules
    TREND_TOLERANCE: float = 0.01
    MAX_RECOMMENDATION_WORDS: int = 200
    INSUFFICIENT_DAYS_THRESHOLD: int = 3

    # Text generator (Gemini)
    GEMINI_API_KEY: str = ""
    GENERATOR_MODEL: str = "gemini-2.5-flash-lite"
    GENERATOR_TEMPERATURE: float = 0.7
    GENERATOR_MAX_OUTPUT_TOKENS: int = 500
    GENERATOR_TIMEOUT_S: float = 20.0
    GENERATOR_MAX_ATTEMPTS: int = 2

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
