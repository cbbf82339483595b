"""
Configuration settings for the resume builder profile service.

Handles environment variables, configuration loading, and default settings.
Completeness thresholds are not configuration; they live in
completeness/engine.py.
"""

from dataclasses import dataclass
from typing import Optional
import os


DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
]


@dataclass
class DatabaseConfig:
    """Configuration for profile storage."""

    url: str = "sqlite:///resume_builder.db"
    echo: bool = False


@dataclass
class ApiConfig:
    """Configuration for the HTTP API."""

    title: str = "Resume Builder Profile API"
    version: str = "1.0.0"
    cors_origins: list = None

    def __post_init__(self):
        if self.cors_origins is None:
            self.cors_origins = list(DEFAULT_CORS_ORIGINS)


@dataclass
class AppSettings:
    """Main application settings aggregating all configurations."""

    database: DatabaseConfig = None
    api: ApiConfig = None
    debug: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        if self.database is None:
            self.database = DatabaseConfig()
        if self.api is None:
            self.api = ApiConfig()

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Load settings from environment variables."""
        origins: Optional[str] = os.getenv("CORS_ORIGINS")
        api_config = ApiConfig(
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()] if origins else None,
        )

        database_config = DatabaseConfig(
            url=os.getenv("DATABASE_URL", "sqlite:///resume_builder.db"),
            echo=os.getenv("DATABASE_ECHO", "False").lower() == "true",
        )

        return cls(
            database=database_config,
            api=api_config,
            debug=os.getenv("DEBUG", "False").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
