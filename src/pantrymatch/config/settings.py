"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".pantrymatch"


def default_config_path() -> Path:
    """Return the path of the user config file."""
    return _default_config_dir() / "config.yaml"


@dataclass
class CatalogConfig:
    """Where recipes come from. None means the built-in pasta catalog."""

    path: Optional[Path] = None


@dataclass
class ResolverConfig:
    """Ingredient closure configuration."""

    mode: str = "single"  # "single" or "full"


@dataclass
class OutputConfig:
    """Report output configuration."""

    format: str = "text"  # "text", "table", "json", "markdown"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class Settings:
    """Main application settings."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.pantrymatch/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse catalog config
        if data.get("catalog"):
            catalog_data = data["catalog"]
            if catalog_data.get("path"):
                settings.catalog.path = Path(catalog_data["path"]).expanduser()

        if data.get("resolver"):
            resolver_data = data["resolver"]
            if "mode" in resolver_data:
                settings.resolver.mode = str(resolver_data["mode"])

        if data.get("output"):
            output_data = data["output"]
            if "format" in output_data:
                settings.output.format = str(output_data["format"])

        if data.get("logging"):
            logging_data = data["logging"]
            if "level" in logging_data:
                settings.logging.level = str(logging_data["level"]).upper()

        return settings

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.pantrymatch/config.yaml
        """
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_dict(self) -> dict:
        return {
            "catalog": {
                "path": str(self.catalog.path) if self.catalog.path else None,
            },
            "resolver": {
                "mode": self.resolver.mode,
            },
            "output": {
                "format": self.output.format,
            },
            "logging": {
                "level": self.logging.level,
            },
        }


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings() -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load()
    return _settings
