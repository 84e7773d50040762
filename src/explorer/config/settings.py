"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified)
  2. Environment variables (EXPLORER_ prefix)
  3. Default values
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from explorer.exceptions import ConfigurationError


class ConnectionSettings(BaseModel):
    """Search engine connection configuration."""

    engine: str = Field(default="elasticsearch", description="Engine binding: elasticsearch, opensearch")
    hosts: list[str] = Field(default_factory=lambda: ["http://localhost:9200"], description="Engine node URLs")
    username: str | None = Field(default=None, description="HTTP basic-auth username")
    password: str | None = Field(default=None, description="HTTP basic-auth password")
    api_key: str | None = Field(default=None, description="API key authentication")
    verify_certs: bool = Field(default=True, description="Verify TLS certificates")
    request_timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")
    extra: dict[str, Any] = Field(default_factory=dict, description="Extra keyword arguments for the native client")

    @field_validator("hosts", mode="before")
    @classmethod
    def _parse_hosts(cls, v: Any) -> list[str]:
        """Accept a list, a JSON array string (env var) or a single host URL."""
        if not isinstance(v, str):
            return list(v)
        if v.lstrip().startswith("["):
            return [str(host) for host in json.loads(v)]
        return [v] if v else []


class IndexSettings(BaseModel):
    """Mapping properties and engine settings for one index."""

    properties: dict[str, Any] = Field(default_factory=dict, description="Field mappings, e.g. {'title': 'text'}")
    settings: dict[str, Any] = Field(default_factory=dict, description="Engine index settings")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root settings.

    Nested settings use double underscores: EXPLORER_CONNECTION__ENGINE=opensearch

    Example:
        EXPLORER_CONNECTION__HOSTS='["https://search:9200"]'
        EXPLORER_CONNECTION__API_KEY=...
        EXPLORER_OBSERVABILITY__LOG_FORMAT=console
    """

    model_config = {
        "env_prefix": "EXPLORER_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    connection: ConnectionSettings = Field(default_factory=ConnectionSettings)
    indexes: dict[str, IndexSettings] = Field(default_factory=dict, description="Index descriptors by name")
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Keys present in the YAML file override environment variables; keys
        it omits still come from the environment or defaults.

        Raises:
            ConfigurationError: If the file does not exist.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
