"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# LLM Provider Configuration Models
# =====================================================================


class OllamaConfig(BaseModel):
    """Self-hosted Ollama configuration."""

    base_url: str = Field(
        default="http://localhost:11434", alias="OLLAMA_BASE_URL", description="Ollama server base URL"
    )
    model: str = Field(default="llama3.2", alias="OLLAMA_MODEL", description="Default Ollama model to use")

    model_config = {"populate_by_name": True}


class OpenRouterConfig(BaseModel):
    """OpenRouter API configuration."""

    api_key: Optional[str] = Field(
        default=None, alias="OPENROUTER_API_KEY", description="OpenRouter API key for authentication"
    )
    model: str = Field(default="deepseek-chat", alias="OPENROUTER_MODEL", description="Default OpenRouter model")
    base_url: str = Field(
        default="https://openrouter.ai/api/v1",
        alias="OPENROUTER_BASE_URL",
        description="OpenRouter API base URL",
    )

    model_config = {"populate_by_name": True}


class PostgreSQLConfig(BaseModel):
    """PostgreSQL database configuration."""

    db: str = Field(default="pitchdeck", alias="POSTGRES_DB", description="PostgreSQL database name")
    user: str = Field(default="pitchdeck", alias="POSTGRES_USER", description="PostgreSQL database user")
    password: str = Field(default="changeme", alias="POSTGRES_PASSWORD", description="PostgreSQL database password")
    host: str = Field(default="postgres", alias="POSTGRES_HOST", description="PostgreSQL database host address")
    port: int = Field(default=5432, alias="POSTGRES_PORT", description="PostgreSQL database port number")

    model_config = {"populate_by_name": True}

    @property
    def url(self) -> str:
        """Build an async SQLAlchemy URL from the individual settings."""
        return f"postgresql+asyncpg://{self.user}:{self.password}@{self.host}:{self.port}/{self.db}"


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Grouped settings (``ollama``, ``openrouter``, ``postgres``, ``cors``) are built
    from the flat fields below, so every variable is declared exactly once here.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # PitchDeck-AI Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="PitchDeck-AI server host address to bind to",
        alias="PITCHDECK_AI_SERVER_HOST",
    )
    server_port: int = Field(
        default=8000,
        description="PitchDeck-AI server port number",
        alias="PITCHDECK_AI_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="PitchDeck-AI server logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="PITCHDECK_AI_LOG_LEVEL",
    )
    slow_request_ms: float = Field(
        default=30000.0,
        description="Requests slower than this many milliseconds are logged as warnings",
        alias="PITCHDECK_AI_SLOW_REQUEST_MS",
    )

    # =====================================================================
    # LLM Configuration
    # =====================================================================
    llm_provider: Literal["openrouter", "ollama"] = Field(
        default="openrouter",
        description="Which LLM backend serves generation requests",
        alias="LLM_PROVIDER",
    )
    llm_timeout_seconds: float = Field(
        default=120.0,
        description="Timeout for a single LLM HTTP call in seconds",
        alias="LLM_TIMEOUT_SECONDS",
    )
    ollama_base_url: str = Field(default="http://localhost:11434", alias="OLLAMA_BASE_URL")
    ollama_model: str = Field(default="llama3.2", alias="OLLAMA_MODEL")
    openrouter_api_key: Optional[str] = Field(default=None, alias="OPENROUTER_API_KEY")
    openrouter_model: str = Field(default="deepseek-chat", alias="OPENROUTER_MODEL")
    openrouter_base_url: str = Field(default="https://openrouter.ai/api/v1", alias="OPENROUTER_BASE_URL")

    # =====================================================================
    # Storage Configuration
    # =====================================================================
    storage_backend: Literal["memory", "database"] = Field(
        default="memory",
        description="Persistence backend for users and pitch decks",
        alias="STORAGE_BACKEND",
    )
    database_url: Optional[str] = Field(
        default=None,
        description="Async SQLAlchemy connection URL used when STORAGE_BACKEND=database; built from POSTGRES_* when unset",
        alias="DATABASE_URL",
    )
    postgres_db: str = Field(default="pitchdeck", alias="POSTGRES_DB")
    postgres_user: str = Field(default="pitchdeck", alias="POSTGRES_USER")
    postgres_password: str = Field(default="changeme", alias="POSTGRES_PASSWORD")
    postgres_host: str = Field(default="postgres", alias="POSTGRES_HOST")
    postgres_port: int = Field(default=5432, alias="POSTGRES_PORT")

    # =====================================================================
    # CORS Configuration
    # =====================================================================
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    @model_validator(mode="after")
    def _default_database_url(self) -> "Settings":
        if not self.database_url:
            self.database_url = self.postgres.url
        return self

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def ollama(self) -> OllamaConfig:
        """Get Ollama configuration from environment variables."""
        return OllamaConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def openrouter(self) -> OpenRouterConfig:
        """Get OpenRouter configuration from environment variables."""
        return OpenRouterConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def postgres(self) -> PostgreSQLConfig:
        """Get PostgreSQL configuration from environment variables."""
        return PostgreSQLConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
