from typing import Any, Literal
from pydantic import Field, SecretStr, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.career_agent.exceptions import ConfigurationError


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    LOG_FILE: str | None = Field(
        default=None,
        description="Path to log file. If not set, logs only go to stderr.",
    )
    PROVIDER: Literal["anthropic", "openrouter"] = Field(
        default="anthropic", description="Provider to use for model api"
    )
    ANTHROPIC_API_KEY: SecretStr | None = Field(
        default=None, description="Api Key for the Anthropic provider"
    )
    OPENROUTER_API_KEY: SecretStr | None = Field(
        default=None, description="Api Key for the OpenRouter provider"
    )
    MODEL_NAME: str = Field(
        default="claude-sonnet-4-20250514",
        description="AI model to use for generation",
    )
    MAX_TOKENS: int = Field(
        default=2048, gt=0, description="Maximum tokens in a single response"
    )
    MAX_ITERATIONS: int = Field(
        default=1, ge=1, description="Model requests allowed per task"
    )
    TASK_TIMEOUT_SECONDS: float = Field(
        default=60.0, gt=0, description="Timeout for one streamed model task"
    )

    @model_validator(mode="after")
    def _require_provider_key(self) -> "AppConfig":
        key = self.api_key_field
        secret = getattr(self, key)
        if secret is None or not secret.get_secret_value():
            raise ValueError(f"Environment variable {key} is not set")
        return self

    @property
    def api_key_field(self) -> str:
        return f"{self.PROVIDER.upper()}_API_KEY"

    @property
    def api_key(self) -> str:
        secret: SecretStr = getattr(self, self.api_key_field)
        return secret.get_secret_value()


def load_settings(**overrides: Any) -> AppConfig:
    """
    Build the settings from the environment (and `.env`), applying overrides.

    Raises:
        ConfigurationError: If a required value is missing or invalid.
    """
    try:
        return AppConfig(**overrides)
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise ConfigurationError(messages) from e
