"""Configuration management for the dbadmin system."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .types import Environment

TRUTHY_VALUES = ("true", "1", "yes", "on")


class Settings(BaseModel):
    """Application settings."""

    # Environment
    version: str = Field(default="0.1.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development/production/testing)",
    )

    # API Settings
    api_title: str = Field(default="dbadmin API", description="API title")
    api_version: str = Field(default="1.0.0", description="API version")
    cors_allow_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(
        default=False, description="Whether to also write a rotating log file"
    )

    # Database Settings
    database_url: str = Field(
        default="mysql+pymysql://root@localhost:3306/",
        description="SQLAlchemy URL of the administered server",
    )
    db_connect_timeout: int = Field(
        default=10, description="Connect timeout passed to the driver in seconds"
    )
    db_pool_recycle: int = Field(
        default=3600, description="Seconds after which pooled connections recycle"
    )

    # Index Settings
    legacy_fulltext_filter: bool = Field(
        default=False,
        description="Use the legacy guard clause for FULLTEXT in index kind filters",
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == Environment.TESTING


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in TRUTHY_VALUES


def load_settings() -> Settings:
    """Load settings from environment variables."""

    # Load .env file if it exists
    load_dotenv()

    cors_origins_str = os.getenv("DBADMIN_CORS_ORIGINS", "*")
    if cors_origins_str == "*":
        cors_origins = ["*"]
    else:
        cors_origins = [origin.strip() for origin in cors_origins_str.split(",")]

    return Settings(
        environment=Environment(os.getenv("DBADMIN_ENV", "development")),
        api_title=os.getenv("DBADMIN_API_TITLE", "dbadmin API"),
        api_version=os.getenv("DBADMIN_API_VERSION", "1.0.0"),
        cors_allow_origins=cors_origins,
        log_level=os.getenv("DBADMIN_LOG_LEVEL", "INFO").upper(),
        log_to_file=_env_flag("DBADMIN_LOG_TO_FILE"),
        database_url=os.getenv(
            "DBADMIN_DATABASE_URL", "mysql+pymysql://root@localhost:3306/"
        ),
        db_connect_timeout=int(os.getenv("DBADMIN_DB_CONNECT_TIMEOUT", "10")),
        db_pool_recycle=int(os.getenv("DBADMIN_DB_POOL_RECYCLE", "3600")),
        legacy_fulltext_filter=_env_flag("DBADMIN_LEGACY_FULLTEXT_FILTER"),
    )
