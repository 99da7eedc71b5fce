"""
RecetArre settings.

Every value can be overridden with an environment variable of the same name
(case-insensitive) or a line in a local .env file.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Deployment stage; production hides the interactive docs"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """Runtime configuration for the ingredient API."""

    # Service identity
    app_name: str = Field(default="RecetArre", description="Name reported by /health-check")
    app_version: str = Field(default="1.0.0", description="Version reported in docs and health")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Deployment stage"
    )
    debug: bool = Field(default=False, description="FastAPI debug tracebacks")

    # uvicorn
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")

    # Ingredients table
    database_url: str = Field(
        default="postgresql+psycopg2://user@localhost:5432/recetarre",
        description="SQLAlchemy URL of the database holding the Ingredients table",
    )
    db_echo: bool = Field(default=False, description="Log every SQL statement")
    db_init_attempts: int = Field(
        default=8, ge=1, description="Schema creation attempts before startup fails"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Seconds to wait between schema creation attempts"
    )

    # Bearer token validation
    jwt_secret_key: str = Field(
        default="recetarre-secret-key-change-in-production",
        description="Key used to verify bearer tokens",
    )
    jwt_algorithm: str = Field(default="HS256", description="Bearer token algorithm")
    jwt_audience: Optional[str] = Field(
        default=None, description="Expected token audience (not checked when unset)"
    )
    jwt_issuer: Optional[str] = Field(
        default=None, description="Expected token issuer (not checked when unset)"
    )

    # logging.basicConfig
    log_level: str = Field(default="INFO", description="Root log level name")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Root log record format",
    )

    # Browser clients
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Origins allowed to call the API from a browser",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Let browsers send the Authorization header cross-origin"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Methods allowed cross-origin"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Request headers allowed cross-origin"
    )

    # Routing and OpenAPI
    api_prefix: str = Field(default="/api", description="Prefix of the ingredient routes and docs")
    api_title: str = Field(
        default="RecetArre API", description="OpenAPI title"
    )
    api_description: str = Field(
        default="Ingredient catalogue for the RecetArre recipe service",
        description="OpenAPI description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Accept ENVIRONMENT=Production as well as production"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """uvicorn reloads on code changes only in development"""
        return self.environment == Environment.DEVELOPMENT


settings = Settings()
