"""Application configuration using Pydantic BaseSettings."""

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _sanitize_env_string(value: str) -> str:
    """Sanitize an environment variable string value.

    Removes whitespace, quotes, and control characters to prevent issues with:
    - Trailing carriage returns (\\r) or newlines (\\n) from Windows line endings
    - Accidental quotes around values in env files or container dashboards
    - Leading/trailing whitespace from copy-paste errors

    Args:
        value: The raw string value from environment variable.

    Returns:
        Cleaned string with quotes, whitespace, and control characters removed.
    """
    value = value.strip()
    if (value.startswith('"') and value.endswith('"')) or (
        value.startswith("'") and value.endswith("'")
    ):
        value = value[1:-1].strip()
    value = value.replace("\r", "").replace("\n", "").replace("\t", "")
    return value


def find_env_file() -> Path | None:
    """Find .env file in current or parent directories."""
    current = Path.cwd()
    for path in [current, current.parent]:
        env_file = path / ".env"
        if env_file.exists():
            return env_file
    return None


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=find_env_file(),
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    # === Project ===
    PROJECT_NAME: str = "llm_registry"
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = False
    ENVIRONMENT: Literal["development", "local", "staging", "production"] = "local"

    # === Logfire ===
    LOGFIRE_TOKEN: str | None = None
    LOGFIRE_SERVICE_NAME: str = "llm_registry"
    LOGFIRE_ENVIRONMENT: str = "development"

    # === First-party providers ===
    # A provider is enabled only when its value is non-blank.
    OPENAI_API_KEY: str = ""
    GOOGLE_GENERATIVE_AI_API_KEY: str = ""
    ANTHROPIC_API_KEY: str = ""
    XAI_API_KEY: str = ""
    OPENROUTER_API_KEY: str = ""
    # Ollama has a local default endpoint but is still opt-in via this value.
    # OpenAI-compatible form, e.g. "http://localhost:11434/v1"; a native
    # "/api" URL is rewritten to "/v1".
    OLLAMA_BASE_URL: str = ""

    # === OpenAI-compatible providers ===
    # JSON list: [{"name", "baseURL", "apiKey"?, "models": [{"name", "supportsTools"?}]}]
    OPENAI_COMPATIBLE_DATA: str = ""

    # === Default model ===
    # "provider/model"; E2E_DEFAULT_MODEL is accepted for older deployments.
    DEFAULT_MODEL: str = Field(
        default="",
        validation_alias=AliasChoices("DEFAULT_MODEL", "E2E_DEFAULT_MODEL"),
    )

    @field_validator(
        "OPENAI_API_KEY",
        "GOOGLE_GENERATIVE_AI_API_KEY",
        "ANTHROPIC_API_KEY",
        "XAI_API_KEY",
        "OPENROUTER_API_KEY",
        "OLLAMA_BASE_URL",
        "DEFAULT_MODEL",
        mode="before",
    )
    @classmethod
    def sanitize_sensitive_strings(cls, v: str | None) -> str | None:
        """Sanitize credential and endpoint fields to handle copy-paste issues."""
        if v is None or v == "":
            return v
        return _sanitize_env_string(v)

    # === CORS ===
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:8080"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list[str] = ["*"]
    CORS_ALLOW_HEADERS: list[str] = ["*"]

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: list[str], info: ValidationInfo) -> list[str]:
        """Reject a wildcard CORS origin in production."""
        env = info.data.get("ENVIRONMENT", "local") if info.data else "local"
        if "*" in v and env == "production":
            raise ValueError(
                "CORS_ORIGINS cannot contain '*' in production! Specify explicit allowed origins."
            )
        return v


settings = Settings()
