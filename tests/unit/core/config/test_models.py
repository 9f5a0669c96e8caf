"""
Unit tests for configuration models.
"""

import pytest
from pydantic import ValidationError

from helperkit.core.config import (
    CloudProvider,
    ConfigurationError,
    HelperKitConfig,
    HttpClientConfig,
    LoggingConfig,
    LogLevel,
    WebHelperOptions,
)
from helperkit.exceptions import MissingConfigurationError


class TestWebHelperOptions:
    """Auth header derivation."""

    def test_defaults(self):
        options = WebHelperOptions()

        assert options.provider == CloudProvider.AZURE
        assert options.authentication_key == ""
        assert options.custom_header_name is None

    @pytest.mark.parametrize(
        "provider,custom,expected_name,expected_value",
        [
            (CloudProvider.AZURE, None, "x-functions-key", "abc"),
            (CloudProvider.AWS, None, "x-api-key", "abc"),
            (CloudProvider.GCP, None, "Authorization", "Bearer abc"),
            (CloudProvider.CUSTOM, "X-My-Key", "X-My-Key", "abc"),
        ],
    )
    def test_auth_header_derivation(self, provider, custom, expected_name, expected_value):
        options = WebHelperOptions(
            provider=provider, authentication_key="abc", custom_header_name=custom
        )

        assert options.get_auth_header_name() == expected_name
        assert options.get_auth_header_value() == expected_value
        assert options.auth_header() == (expected_name, expected_value)

    def test_custom_name_ignored_for_builtin_provider(self):
        options = WebHelperOptions(
            provider=CloudProvider.AWS, authentication_key="abc", custom_header_name="X-Other"
        )
        assert options.get_auth_header_name() == "x-api-key"

    @pytest.mark.parametrize("custom", [None, "", "   "])
    def test_custom_without_name_fails(self, custom):
        options = WebHelperOptions(
            provider=CloudProvider.CUSTOM, authentication_key="abc", custom_header_name=custom
        )

        with pytest.raises(ConfigurationError) as exc_info:
            options.get_auth_header_name()

        assert exc_info.value.error_code == "CONFIG_CUSTOM_HEADER"

    def test_missing_provider_fails(self):
        options = WebHelperOptions(provider=None, authentication_key="abc")

        with pytest.raises(ConfigurationError):
            options.auth_header()

    def test_value_without_key_fails(self):
        with pytest.raises(MissingConfigurationError):
            WebHelperOptions(provider=CloudProvider.AWS).get_auth_header_value()

    def test_no_auth_header_without_key(self):
        assert WebHelperOptions(provider=CloudProvider.CUSTOM).auth_header() is None

    def test_none_key_normalized(self):
        options = WebHelperOptions(authentication_key=None)
        assert options.authentication_key == ""

    def test_provider_parsed_from_string(self):
        assert WebHelperOptions(provider="gcp").provider == CloudProvider.GCP

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValidationError):
            WebHelperOptions(provider="oracle")

    def test_assignment_validated(self):
        options = WebHelperOptions()

        options.provider = "aws"

        assert options.provider == CloudProvider.AWS
        with pytest.raises(ValidationError):
            options.provider = "oracle"

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            WebHelperOptions(region="us-east-1")


class TestHttpClientConfig:
    def test_defaults(self):
        http = HttpClientConfig()

        assert http.base_url is None
        assert http.timeout_seconds == 30
        assert http.accept == "application/json"

    def test_blank_base_url_is_none(self):
        assert HttpClientConfig(base_url="  ").base_url is None

    def test_base_url_scheme_required(self):
        with pytest.raises(ValidationError):
            HttpClientConfig(base_url="ftp://example.com")

    @pytest.mark.parametrize("timeout", [0, -1, 601])
    def test_timeout_bounds(self, timeout):
        with pytest.raises(ValidationError):
            HttpClientConfig(timeout_seconds=timeout)


class TestLoggingConfig:
    def test_defaults(self):
        config = LoggingConfig()

        assert config.level == LogLevel.INFO
        assert config.format == "console"
        assert config.output == ["console"]

    def test_invalid_format(self):
        with pytest.raises(ValidationError):
            LoggingConfig(format="xml")

    def test_invalid_output(self):
        with pytest.raises(ValidationError):
            LoggingConfig(output=["console", "syslog"])


class TestHelperKitConfig:
    def test_sections_default(self):
        config = HelperKitConfig()

        assert isinstance(config.cloud_auth, WebHelperOptions)
        assert isinstance(config.http, HttpClientConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_from_nested_dict(self):
        config = HelperKitConfig(
            cloud_auth={"provider": "aws", "authentication_key": "k"},
            http={"timeout_seconds": 10},
        )

        assert config.cloud_auth.auth_header() == ("x-api-key", "k")
        assert config.http.timeout_seconds == 10

    def test_unknown_section_rejected(self):
        with pytest.raises(ValidationError):
            HelperKitConfig(providers={})
