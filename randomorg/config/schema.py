"""Configuration schema using Pydantic.

Persisted to ~/.randomorg/config.json; every field can also be set through
``RANDOM_ORG_*`` environment variables (nested fields use ``__``).
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.random.org/json-rpc/2/invoke"


class LogConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    file_enabled: bool = False  # Write ~/.randomorg/logs/<command>.log


class Config(BaseSettings):
    """Root configuration for randomorg."""
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float | None = None  # None waits indefinitely; calls are never retried
    log: LogConfig = Field(default_factory=LogConfig)

    model_config = SettingsConfigDict(
        env_prefix="RANDOM_ORG_",
        env_nested_delimiter="__",
    )
