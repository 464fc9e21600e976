"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified)
  2. Environment variables (SEARCHBRIDGE_ prefix)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class DoofinderSettings(BaseModel):
    """Doofinder search provider configuration."""

    zone: str = Field(default="eu1", description="Search zone, used to build the base URI")
    hash_id: str = Field(default="", description="Search engine hash id")
    auth_key: str = Field(default="", description="Value of the Authorization header")
    filter_map: dict[str, str] = Field(
        default_factory=dict,
        description="Provider filter name -> caller-facing filter name",
    )
    product_id_key: str = Field(
        default="id",
        description="Field name or JMESPath expression locating the product id in a result",
    )
    timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout in seconds")

    @field_validator("filter_map", mode="before")
    @classmethod
    def _parse_filter_map(cls, v: Any) -> Any:
        """Parse filter map from JSON string (env var) or mapping."""
        if isinstance(v, str):
            import json

            if not v:
                return {}
            return json.loads(v)
        return v

    @field_validator("filter_map")
    @classmethod
    def _check_filter_map(cls, v: dict[str, str]) -> dict[str, str]:
        seen: dict[str, str] = {}
        for provider_name, caller_name in v.items():
            if caller_name in seen:
                raise ValueError(
                    f"filter_map is not one-to-one: '{seen[caller_name]}' and "
                    f"'{provider_name}' both map to '{caller_name}'"
                )
            seen[caller_name] = provider_name
        return v


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the SEARCHBRIDGE_ prefix.
    Nested settings use double underscores: SEARCHBRIDGE_DOOFINDER__ZONE=us1

    Example:
        SEARCHBRIDGE_DOOFINDER__HASH_ID=6a96504dc173514cab1e0198af92e6e9
        SEARCHBRIDGE_DOOFINDER__AUTH_KEY=eu1-abc123
        SEARCHBRIDGE_DOOFINDER__FILTER_MAP='{"brand": "marca"}'
    """

    model_config = {
        "env_prefix": "SEARCHBRIDGE_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    doofinder: DoofinderSettings = Field(default_factory=DoofinderSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are passed as init arguments and take
        precedence over environment variables.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
