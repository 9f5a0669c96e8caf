"""
Configuration manager for helperkit.

Loads the TOML configuration file, applies environment variable overrides,
validates the result and persists changes.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

from ...constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME
from ...exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .models import CloudProvider, HelperKitConfig, HelperKitSettings, WebHelperOptions


@dataclass
class EnvironmentOverride:
    """Helper for applying environment variable overrides."""
    config_section: Dict[str, Any]
    settings: HelperKitSettings

    def apply_if_set(self, setting_name: str, config_key: str) -> None:
        """Apply setting if it's set in environment."""
        value = getattr(self.settings, setting_name, None)
        if value is not None:
            self.config_section[config_key] = value


class ConfigManager:
    """Configuration manager with TOML persistence and environment overrides."""

    def __init__(
        self,
        config_file: Optional[Path] = None,
        settings: Optional[HelperKitSettings] = None,
    ):
        """Initialize configuration manager.

        Args:
            config_file: Path to custom config file. If None, uses
                ``~/.config/helperkit/config.toml``.
            settings: Environment settings; read from the process
                environment when omitted.
        """
        if config_file:
            self.config_file = Path(config_file)
        else:
            self.config_file = Path.home() / ".config" / CONFIG_DIR_NAME / CONFIG_FILE_NAME

        self._config: Optional[HelperKitConfig] = None
        self._settings = settings

    @property
    def config_directory(self) -> Path:
        return self.config_file.parent

    def load_config(self) -> HelperKitConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.exists():
            config_data = self._load_toml_file(self.config_file)

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = HelperKitConfig(**config_data)
        except (ValueError, TypeError) as e:
            raise ConfigurationValidationError([f"Configuration validation failed: {e}"]) from e

        return self._config

    def reload(self) -> HelperKitConfig:
        """Drop the cached configuration and load it again."""
        self._config = None
        return self.load_config()

    def _load_toml_file(self, path: Path) -> Dict[str, Any]:
        """Load configuration data from a TOML file."""
        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(path), f"Invalid TOML syntax: {e}", "valid TOML format"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file: {path}",
                help_text=f"Check file permissions and path ({e.strerror})",
            ) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        settings = self._settings or HelperKitSettings()

        for section in ("cloud_auth", "http", "logging"):
            config_data.setdefault(section, {})

        cloud_auth = EnvironmentOverride(config_data["cloud_auth"], settings)
        cloud_auth.apply_if_set("cloud_provider", "provider")
        cloud_auth.apply_if_set("cloud_auth_key", "authentication_key")
        cloud_auth.apply_if_set("cloud_header_name", "custom_header_name")

        http = EnvironmentOverride(config_data["http"], settings)
        http.apply_if_set("http_base_url", "base_url")
        http.apply_if_set("http_timeout", "timeout_seconds")

        logging_section = EnvironmentOverride(config_data["logging"], settings)
        logging_section.apply_if_set("logging_level", "level")
        logging_section.apply_if_set("logging_format", "format")

        if isinstance(config_data["cloud_auth"].get("provider"), str):
            config_data["cloud_auth"]["provider"] = config_data["cloud_auth"]["provider"].lower()
        if isinstance(config_data["logging"].get("level"), str):
            config_data["logging"]["level"] = config_data["logging"]["level"].upper()

        return config_data

    def _remove_none_values(self, data):
        """Recursively remove None values from dictionary to avoid TOML serialization issues."""
        if isinstance(data, dict):
            return {k: self._remove_none_values(v) for k, v in data.items() if v is not None}
        elif isinstance(data, list):
            return [self._remove_none_values(item) for item in data if item is not None]
        else:
            return data

    def save_config(self, config: Optional[HelperKitConfig] = None) -> None:
        """Save configuration to the TOML file."""
        if config is None:
            config = self.load_config()

        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        config_dict = self._remove_none_values(config.model_dump(mode="json"))

        try:
            with open(self.config_file, "wb") as f:
                tomli_w.dump(config_dict, f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write configuration file: {self.config_file}",
                help_text=f"Check file permissions and path ({e.strerror})",
            ) from e

        self._config = config

    def get_cloud_auth(self) -> WebHelperOptions:
        """Return the cloud authentication options."""
        return self.load_config().cloud_auth

    def set_cloud_auth(
        self,
        provider: CloudProvider,
        authentication_key: str,
        custom_header_name: Optional[str] = None,
    ) -> WebHelperOptions:
        """Replace the cloud authentication section and persist it."""
        config = self.load_config()

        try:
            options = WebHelperOptions(
                provider=provider,
                authentication_key=authentication_key,
                custom_header_name=custom_header_name,
            )
        except (ValueError, TypeError) as e:
            raise ConfigurationValidationError([f"Invalid cloud_auth configuration values: {e}"]) from e

        # Surface a missing custom header name now rather than on the first request
        if options.authentication_key:
            options.auth_header()

        config.cloud_auth = options
        self.save_config(config)
        return options

    def reset_config(self) -> None:
        """Reset configuration to defaults."""
        self._config = HelperKitConfig()
        self.save_config()
