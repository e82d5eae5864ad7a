"""Define the process-wide configuration for the article pipeline."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator

from .exceptions import ConfigurationError

DEFAULT_MODEL = "gpt-4o-search-preview"
DEFAULT_STEP_TIMEOUT = 120.0

_TRUTHY = {"1", "true", "yes", "on"}


def api_key_variables(model: str) -> tuple[str, ...]:
    """Environment variables holding the credential for the provider `model` routes to, in lookup order."""
    if "/" in model:
        return ("OPENROUTER_API_KEY",)
    if model.startswith("gemini"):
        return ("GOOGLE_API_KEY",)
    return ("OPEN_AI_KEY", "OPENAI_API_KEY")


class Configuration(BaseModel):
    """The configuration for the pipeline and its completion service."""

    model_config = {"frozen": True}

    api_key: Optional[SecretStr] = Field(
        default=None,
        description="Credential for the provider the model routes to (OpenAI, OpenRouter or Google).",
    )

    model: str = Field(
        default=DEFAULT_MODEL,
        description="The model used for every pipeline step.",
    )

    base_url: Optional[str] = Field(
        default=None,
        description="Optional base URL of an OpenAI-compatible gateway.",
    )

    step_timeout: float = Field(
        default=DEFAULT_STEP_TIMEOUT,
        gt=0,
        description="Upper bound in seconds for a single completion call.",
    )

    allow_empty_output: bool = Field(
        default=False,
        description="Accept an empty completion as a valid step result instead of failing the step.",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level for the entry points.",
    )

    api_url: str = Field(
        default="http://localhost:8000",
        description="Root URL of the pipeline API, used by the UI.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Configuration":
        """Create a Configuration from environment variables.

        A `.env` file is loaded first when reading the real process environment.

        Args:
            environ: Mapping to read instead of `os.environ`.

        Returns:
            Configuration: The validated configuration.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        model = environ.get("NEWS_PLAYGROUND_MODEL") or DEFAULT_MODEL
        values = {
            "api_key": next((environ[name] for name in api_key_variables(model) if environ.get(name)), None),
            "model": model,
            "base_url": environ.get("OPENAI_BASE_URL") or None,
            "step_timeout": environ.get("NEWS_PLAYGROUND_STEP_TIMEOUT"),
            "log_level": environ.get("NEWS_PLAYGROUND_LOG_LEVEL"),
            "api_url": environ.get("NEWS_PLAYGROUND_API_URL"),
        }
        if (allow_empty := environ.get("NEWS_PLAYGROUND_ALLOW_EMPTY_OUTPUT")) is not None:
            values["allow_empty_output"] = allow_empty.strip().lower() in _TRUTHY

        try:
            return cls(**{key: value for key, value in values.items() if value not in (None, "")})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def require_api_key(self) -> str:
        """Return the credential, failing if none was configured."""
        if self.api_key is None or not self.api_key.get_secret_value():
            variables = " or ".join(api_key_variables(self.model))
            raise ConfigurationError(f"No API key configured for model '{self.model}'. Set {variables}.")
        return self.api_key.get_secret_value()
