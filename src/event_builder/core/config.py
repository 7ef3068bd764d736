"""Configuration management.

Loads from TOML config files + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings

from .enums import EventType

if TYPE_CHECKING:
    from event_builder.catalog.catalog import EventCatalog


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class OutputConfig(BaseModel):
    indent: int | None = 2  # None prints the payload on a single line
    sort_keys: bool = False


class ObservabilityConfig(BaseModel):
    log_level: str = "WARNING"
    log_format: str = "console"  # "json" or "console"


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level application settings.

    Loaded from TOML config files, overridden by environment variables.
    """

    default_event_type: EventType = EventType.PURCHASE
    catalog_path: str | None = None  # None -> built-in catalog

    output: OutputConfig = Field(default_factory=OutputConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "EVENT_BUILDER_", "env_nested_delimiter": "__"}

    def build_catalog(self) -> EventCatalog:
        """Return the catalog selected by ``catalog_path``."""
        from event_builder.catalog.catalog import default_catalog
        from event_builder.catalog.loader import load_catalog

        if self.catalog_path is None:
            return default_catalog()
        return load_catalog(self.catalog_path)


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top.
    """
    from .errors import ConfigError

    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        import tomli

        try:
            with open(path, "rb") as f:
                data = tomli.load(f)
        except tomli.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    if overrides:
        data.update(overrides)

    try:
        return Settings(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc
