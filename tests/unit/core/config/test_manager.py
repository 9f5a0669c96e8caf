"""
Unit tests for ConfigManager.
"""

import sys

import pytest

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from helperkit.core.config import (
    CloudProvider,
    ConfigManager,
    ConfigurationError,
    ConfigurationValidationError,
    HelperKitSettings,
    InvalidConfigurationError,
    LogLevel,
)


class TestLoadConfig:
    def test_defaults_without_file(self, config_manager):
        config = config_manager.load_config()

        assert config.cloud_auth.provider == CloudProvider.AZURE
        assert config.cloud_auth.authentication_key == ""
        assert config.http.timeout_seconds == 30

    def test_default_location(self, empty_settings):
        manager = ConfigManager(settings=empty_settings)
        assert manager.config_file.parts[-3:] == (".config", "helperkit", "config.toml")

    def test_load_toml(self, config_manager, config_file):
        config_file.write_text(
            "[cloud_auth]\n"
            'provider = "custom"\n'
            'authentication_key = "file-key"\n'
            'custom_header_name = "X-Key"\n'
            "\n"
            "[http]\n"
            'base_url = "https://api.example.com"\n'
            "timeout_seconds = 12\n"
            "\n"
            "[logging]\n"
            'level = "debug"\n'
        )

        config = config_manager.load_config()

        assert config.cloud_auth.auth_header() == ("X-Key", "file-key")
        assert config.http.base_url == "https://api.example.com"
        assert config.http.timeout_seconds == 12
        assert config.logging.level == LogLevel.DEBUG

    def test_provider_case_insensitive(self, config_manager, config_file):
        config_file.write_text('[cloud_auth]\nprovider = "GCP"\n')

        assert config_manager.load_config().cloud_auth.provider == CloudProvider.GCP

    def test_load_is_cached(self, config_manager, config_file):
        first = config_manager.load_config()
        config_file.write_text('[cloud_auth]\nprovider = "aws"\n')

        assert config_manager.load_config() is first
        assert config_manager.reload().cloud_auth.provider == CloudProvider.AWS

    def test_invalid_toml(self, config_manager, config_file):
        config_file.write_text("[cloud_auth\nprovider = ")

        with pytest.raises(InvalidConfigurationError) as exc_info:
            config_manager.load_config()

        assert exc_info.value.field == str(config_file)

    def test_invalid_values(self, config_manager, config_file):
        config_file.write_text('[cloud_auth]\nprovider = "oracle"\n')

        with pytest.raises(ConfigurationValidationError):
            config_manager.load_config()

    def test_validation_error_is_configuration_error(self, config_manager, config_file):
        config_file.write_text("[http]\ntimeout_seconds = 0\n")

        with pytest.raises(ConfigurationError):
            config_manager.load_config()


class TestEnvironmentOverrides:
    def test_env_overrides_file(self, config_file, clean_environment, monkeypatch):
        config_file.write_text('[cloud_auth]\nprovider = "azure"\nauthentication_key = "file"\n')
        monkeypatch.setenv("HELPERKIT_CLOUD_PROVIDER", "AWS")
        monkeypatch.setenv("HELPERKIT_CLOUD_AUTH_KEY", "env-key")
        monkeypatch.setenv("HELPERKIT_HTTP_TIMEOUT", "45")
        monkeypatch.setenv("HELPERKIT_LOGGING_LEVEL", "warning")

        config = ConfigManager(config_file, settings=HelperKitSettings(_env_file=None)).load_config()

        assert config.cloud_auth.auth_header() == ("x-api-key", "env-key")
        assert config.http.timeout_seconds == 45
        assert config.logging.level == LogLevel.WARNING

    def test_custom_header_from_env(self, config_file, clean_environment, monkeypatch):
        monkeypatch.setenv("HELPERKIT_CLOUD_PROVIDER", "custom")
        monkeypatch.setenv("HELPERKIT_CLOUD_AUTH_KEY", "k")
        monkeypatch.setenv("HELPERKIT_CLOUD_HEADER_NAME", "X-Env-Key")

        config = ConfigManager(config_file).load_config()

        assert config.cloud_auth.auth_header() == ("X-Env-Key", "k")

    def test_unset_env_leaves_file_values(self, config_manager, config_file):
        config_file.write_text('[http]\nbase_url = "https://file.example.com"\n')

        assert config_manager.load_config().http.base_url == "https://file.example.com"


class TestSaveConfig:
    def test_set_cloud_auth_persists(self, config_manager, config_file, empty_settings):
        config_manager.set_cloud_auth(CloudProvider.GCP, "secret")

        with open(config_file, "rb") as f:
            saved = tomllib.load(f)

        assert saved["cloud_auth"] == {"provider": "gcp", "authentication_key": "secret"}
        reloaded = ConfigManager(config_file, settings=empty_settings).load_config()
        assert reloaded.cloud_auth.auth_header() == ("Authorization", "Bearer secret")

    def test_set_cloud_auth_custom_requires_header(self, config_manager, config_file):
        with pytest.raises(ConfigurationError):
            config_manager.set_cloud_auth(CloudProvider.CUSTOM, "secret")

        assert not config_file.exists()

    def test_set_cloud_auth_invalid_provider(self, config_manager):
        with pytest.raises(ConfigurationValidationError):
            config_manager.set_cloud_auth("oracle", "secret")

    def test_get_cloud_auth(self, config_manager):
        config_manager.set_cloud_auth(CloudProvider.CUSTOM, "k", "X-Key")

        assert config_manager.get_cloud_auth().custom_header_name == "X-Key"

    def test_save_creates_directory(self, temp_dir, empty_settings):
        config_file = temp_dir / "nested" / "dir" / "config.toml"
        manager = ConfigManager(config_file, settings=empty_settings)

        manager.save_config()

        assert config_file.exists()

    def test_reset_config(self, config_manager, config_file):
        config_manager.set_cloud_auth(CloudProvider.AWS, "secret")

        config_manager.reset_config()

        assert config_manager.load_config().cloud_auth.authentication_key == ""
        with open(config_file, "rb") as f:
            assert tomllib.load(f)["cloud_auth"]["authentication_key"] == ""
