"""Configuration for prom-analyzer."""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from prom_analyzer.errors import ConfigError

REQUIRED_ENV_VARS = ("PROMETHEUS_BASE_URL", "ANTHROPIC_BASE_URL", "ANTHROPIC_API_KEY")


class PromAnalyzerSettings(BaseSettings):
    """Configuration for prom-analyzer.

    Attributes:
        prometheus_base_url: Prometheus API base URL (e.g., http://prom:9090/api/v1).
        anthropic_base_url: Anthropic API base URL (e.g., https://api.anthropic.com/v1).
        anthropic_api_key: Anthropic API key.
        timeout: Request timeout in seconds for both backends.
        log_level: Logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    prometheus_base_url: str = Field(min_length=1, description="Prometheus API base URL")
    anthropic_base_url: str = Field(min_length=1, description="Anthropic API base URL")
    anthropic_api_key: str = Field(min_length=1, repr=False, description="Anthropic API key")
    timeout: float = Field(
        default=30.0,
        gt=0,
        validation_alias="prom_analyzer_timeout",
        description="Request timeout in seconds",
    )
    log_level: str = Field(
        default="WARNING",
        validation_alias="prom_analyzer_log_level",
        description="Logging level",
    )


def load_settings(**overrides: object) -> PromAnalyzerSettings:
    """Build settings from the environment (and .env), failing with ConfigError.

    Args:
        **overrides: Explicit values that take precedence over the environment.

    Returns:
        The validated settings.

    Raises:
        ConfigError: If a required value is missing or invalid.
    """
    try:
        return PromAnalyzerSettings(**overrides)
    except ValidationError as e:
        problems = []
        for err in e.errors():
            field = str(err["loc"][0]) if err["loc"] else "settings"
            name = field.upper() if field.upper() in REQUIRED_ENV_VARS else field
            if err["type"] == "missing":
                problems.append(f"{name} not set")
            else:
                problems.append(f"{name}: {err['msg']}")
        raise ConfigError("Invalid configuration: " + "; ".join(problems)) from e


__all__ = ["PromAnalyzerSettings", "REQUIRED_ENV_VARS", "load_settings"]
