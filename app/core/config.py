"""
Configuration management for the remote job board backend.

This module provides centralized configuration management supporting:
- Environment variables and .env files
- OpenAI-compatible generative text endpoints (OpenRouter by default)
- Local object storage for CVs and generated documents
- Local development defaults

Settings are resolved once at startup; the tailoring components receive
frozen configuration value objects built from them instead of reading
the environment at call time.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.get_logger(__name__)


class Settings(BaseSettings):
    """
    Main application settings with smart defaults for local development.
    """

    # Environment Detection
    ENVIRONMENT: str = Field(
        default="local",
        description="Environment (local/development/staging/production)"
    )
    DEBUG: bool = Field(
        default=False,
        description="Debug mode"
    )

    # Core Application Settings
    APP_NAME: str = Field(
        default="Remote Job Board API",
        description="Application name"
    )
    APP_VERSION: str = Field(
        default="1.0.0",
        description="Application version"
    )

    # Security (Required)
    SECRET_KEY: str = Field(
        ...,
        description="JWT signing secret key (min 32 chars)"
    )
    JWT_ALGORITHM: str = Field(
        default="HS256",
        description="JWT algorithm"
    )
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=60,
        description="Access token expiry in minutes"
    )
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(
        default=7,
        description="Refresh token expiry in days"
    )

    # Password Security
    BCRYPT_ROUNDS: int = Field(
        default=12,
        description="BCrypt hashing rounds"
    )
    PASSWORD_MIN_LENGTH: int = Field(
        default=6,
        description="Minimum password length"
    )

    # Server Configuration
    HOST: str = Field(
        default="0.0.0.0",
        description="Server host"
    )
    PORT: int = Field(
        default=10000,
        description="Server port"
    )

    # CORS Configuration
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Comma-separated CORS origins"
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )
    LOG_FORMAT: str = Field(
        default="console",
        description="Log format (json/console)"
    )

    # PostgreSQL Configuration
    POSTGRES_URL: Optional[str] = Field(
        default=None,
        description="PostgreSQL connection URL"
    )
    POSTGRES_HOST: str = Field(
        default="localhost",
        description="PostgreSQL host"
    )
    POSTGRES_PORT: int = Field(
        default=5432,
        description="PostgreSQL port"
    )
    POSTGRES_USER: str = Field(
        default="jobboard",
        description="PostgreSQL user"
    )
    POSTGRES_PASSWORD: str = Field(
        default="jobboard",
        description="PostgreSQL password"
    )
    POSTGRES_DB: str = Field(
        default="remote_jobs",
        description="PostgreSQL database name"
    )
    DATABASE_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="Connection and pool checkout timeout in seconds"
    )

    # Generative Text Configuration (OpenAI-compatible)
    LLM_API_KEY: Optional[str] = Field(
        default=None,
        description="Bearer credential for the generative text service"
    )
    LLM_BASE_URL: str = Field(
        default="https://openrouter.ai/api/v1",
        description="Base URL of the OpenAI-compatible endpoint"
    )
    LLM_MODEL: str = Field(
        default="openai/gpt-4o-mini",
        description="Chat model identifier"
    )
    LLM_MAX_TOKENS: int = Field(
        default=300,
        description="Maximum output tokens for a tailored summary"
    )
    LLM_TEMPERATURE: float = Field(
        default=0.7,
        description="Sampling temperature for a tailored summary"
    )
    LLM_TIMEOUT_SECONDS: float = Field(
        default=20.0,
        description="Request timeout for the generative text service"
    )

    # Object Storage Configuration
    STORAGE_PATH: str = Field(
        default="./storage",
        description="Root directory of the local object store"
    )
    STORAGE_PUBLIC_BASE_URL: Optional[str] = Field(
        default=None,
        description="Public URL prefix returned for stored objects"
    )
    STORAGE_TIMEOUT_SECONDS: float = Field(
        default=15.0,
        description="Timeout for object store reads and writes"
    )
    CV_FOLDER: str = Field(
        default="remote-job-manager/cvs",
        description="Object store folder for uploaded CVs"
    )
    TAILORED_CV_FOLDER: str = Field(
        default="remote-job-manager/tailored-cvs",
        description="Object store folder for generated tailored CVs"
    )
    MAX_CV_SIZE: int = Field(
        default=5 * 1024 * 1024,  # 5MB
        description="Maximum CV upload size in bytes"
    )

    # Tailoring Pipeline
    SOURCE_TEXT_BUDGET: int = Field(
        default=1500,
        description="Characters of extracted CV text sent to the summary prompt"
    )
    SUMMARY_LINE_WIDTH: int = Field(
        default=90,
        description="Maximum characters per summary line in the composed PDF"
    )
    TAILORING_TIMEOUT_SECONDS: float = Field(
        default=60.0,
        description="Global time budget for one tailoring request"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator('SECRET_KEY')
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Validate that secret key is secure enough."""
        if len(v) < 32:
            raise ValueError("SECRET_KEY must be at least 32 characters long")
        return v

    @field_validator('ENVIRONMENT')
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate and normalize environment name."""
        v = v.lower()
        if v not in ('local', 'development', 'staging', 'production'):
            logger.warning("Unknown environment, defaulting to 'local'", environment=v)
            return 'local'
        return v

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == 'production'

    def get_cors_origins(self) -> List[str]:
        """Get CORS origins as a list."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def get_postgres_url(self) -> str:
        """Get PostgreSQL connection URL."""
        if self.POSTGRES_URL:
            return self.POSTGRES_URL
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    def is_llm_configured(self) -> bool:
        """Check if a generative text credential is present."""
        return bool(self.LLM_API_KEY)

    def summary_generator_config(self) -> "SummaryGeneratorConfig":
        return SummaryGeneratorConfig(
            api_key=self.LLM_API_KEY,
            base_url=self.LLM_BASE_URL,
            model=self.LLM_MODEL,
            max_tokens=self.LLM_MAX_TOKENS,
            temperature=self.LLM_TEMPERATURE,
            timeout_seconds=self.LLM_TIMEOUT_SECONDS,
        )

    def document_store_config(self) -> "DocumentStoreConfig":
        return DocumentStoreConfig(
            base_path=self.STORAGE_PATH,
            public_base_url=self.STORAGE_PUBLIC_BASE_URL,
            timeout_seconds=self.STORAGE_TIMEOUT_SECONDS,
        )

    def tailoring_config(self) -> "TailoringConfig":
        return TailoringConfig(
            output_folder=self.TAILORED_CV_FOLDER,
            source_text_budget=self.SOURCE_TEXT_BUDGET,
            summary_line_width=self.SUMMARY_LINE_WIDTH,
            timeout_seconds=self.TAILORING_TIMEOUT_SECONDS,
        )


@dataclass(frozen=True)
class SummaryGeneratorConfig:
    """Resolved configuration for the summary generator."""

    api_key: Optional[str]
    base_url: str = "https://openrouter.ai/api/v1"
    model: str = "openai/gpt-4o-mini"
    max_tokens: int = 300
    temperature: float = 0.7
    timeout_seconds: float = 20.0

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)


@dataclass(frozen=True)
class DocumentStoreConfig:
    """Resolved configuration for the document store gateway."""

    base_path: str = "./storage"
    public_base_url: Optional[str] = None
    timeout_seconds: float = 15.0


@dataclass(frozen=True)
class TailoringConfig:
    """Resolved configuration for the tailoring orchestrator."""

    output_folder: str = "remote-job-manager/tailored-cvs"
    source_text_budget: int = 1500
    summary_line_width: int = 90
    timeout_seconds: float = 60.0


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings.

    Loads settings from environment variables and the .env file and
    returns a validated, cached Settings instance.
    """
    settings = Settings()

    logger.info(
        "Configuration ready",
        environment=settings.ENVIRONMENT,
        debug=settings.DEBUG,
        llm_configured=settings.is_llm_configured(),
        llm_model=settings.LLM_MODEL,
        storage_path=settings.STORAGE_PATH,
    )

    return settings
