"""
Configuration models for helperkit.

Pydantic models describing the cloud authentication options used by the web
helpers, the transport defaults used by the client factory, and logging.
"""

from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...constants import (
    AWS_AUTH_HEADER,
    AZURE_AUTH_HEADER,
    BEARER_PREFIX,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    DEFAULT_TIMEOUT_SECONDS,
    GCP_AUTH_HEADER,
    JSON_MEDIA_TYPE,
    MAX_TIMEOUT_SECONDS,
    MIN_LOG_FILE_SIZE_BYTES,
)
from ...exceptions.config import ConfigurationError, MissingConfigurationError


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class CloudProvider(str, Enum):
    """Cloud providers with a known authentication header convention."""

    AZURE = "azure"
    AWS = "aws"
    GCP = "gcp"
    CUSTOM = "custom"


def _bearer(key: str) -> str:
    return f"{BEARER_PREFIX}{key}"


def _raw(key: str) -> str:
    return key


# provider -> (fixed header name or None when configurable, value builder)
_AUTH_SCHEMES: Dict[CloudProvider, Tuple[Optional[str], Callable[[str], str]]] = {
    CloudProvider.AZURE: (AZURE_AUTH_HEADER, _raw),
    CloudProvider.AWS: (AWS_AUTH_HEADER, _raw),
    CloudProvider.GCP: (GCP_AUTH_HEADER, _bearer),
    CloudProvider.CUSTOM: (None, _raw),
}


class WebHelperOptions(BaseModel):
    """Authentication settings for the async web helpers.

    Instances are shared by reference with the client: changing the key or
    provider after the client is built affects the next request.
    """

    provider: Optional[CloudProvider] = Field(
        CloudProvider.AZURE, description="Cloud provider that defines the auth header"
    )
    authentication_key: str = Field("", description="API key or token sent with each request")
    custom_header_name: Optional[str] = Field(
        None, description="Header name used when provider is 'custom'"
    )

    model_config = {"validate_assignment": True, "extra": "forbid"}

    @field_validator("authentication_key", mode="before")
    @classmethod
    def normalize_key(cls, v: Optional[str]) -> str:
        return "" if v is None else v

    @field_validator("custom_header_name")
    @classmethod
    def normalize_header_name(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v.strip()) == 0:
            return None
        return v

    def _scheme(self) -> Tuple[Optional[str], Callable[[str], str]]:
        try:
            return _AUTH_SCHEMES[self.provider]
        except KeyError:
            raise ConfigurationError(
                f"Unsupported cloud provider: {self.provider}",
                help_text=f"Use one of: {', '.join(p.value for p in CloudProvider)}",
                error_code="CONFIG_PROVIDER",
            ) from None

    def get_auth_header_name(self) -> str:
        """Return the header name for the configured provider."""
        name, _ = self._scheme()
        if name is not None:
            return name
        if not self.custom_header_name:
            raise ConfigurationError(
                "custom_header_name must be specified when using CloudProvider.CUSTOM",
                help_text="Set cloud_auth.custom_header_name or choose a built-in provider",
                error_code="CONFIG_CUSTOM_HEADER",
            )
        return self.custom_header_name

    def get_auth_header_value(self) -> str:
        """Return the header value for the configured provider and key."""
        if not self.authentication_key:
            raise MissingConfigurationError("cloud_auth.authentication_key")
        _, build_value = self._scheme()
        return build_value(self.authentication_key)

    def auth_header(self) -> Optional[Tuple[str, str]]:
        """Derive the ``(name, value)`` auth header, or ``None`` without a key."""
        if not self.authentication_key:
            return None
        return self.get_auth_header_name(), self.get_auth_header_value()


class HttpClientConfig(BaseModel):
    """Transport defaults used when the client factory builds an httpx client."""

    base_url: Optional[str] = Field(None, description="Base address for relative URLs")
    timeout_seconds: float = Field(
        DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        le=MAX_TIMEOUT_SECONDS,
        description="Overall request timeout in seconds",
    )
    accept: str = Field(JSON_MEDIA_TYPE, description="Default Accept header")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None or len(v.strip()) == 0:
            return None
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(
                    f"output must contain only: {', '.join(sorted(valid_outputs))}"
                )
        return v


class HelperKitConfig(BaseModel):
    """Complete helperkit configuration."""

    cloud_auth: WebHelperOptions = Field(default_factory=WebHelperOptions)
    http: HttpClientConfig = Field(default_factory=HttpClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class HelperKitSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    cloud_provider: Optional[str] = Field(None, alias="HELPERKIT_CLOUD_PROVIDER")
    cloud_auth_key: Optional[str] = Field(None, alias="HELPERKIT_CLOUD_AUTH_KEY")
    cloud_header_name: Optional[str] = Field(None, alias="HELPERKIT_CLOUD_HEADER_NAME")

    http_base_url: Optional[str] = Field(None, alias="HELPERKIT_HTTP_BASE_URL")
    http_timeout: Optional[float] = Field(None, alias="HELPERKIT_HTTP_TIMEOUT")

    logging_level: Optional[str] = Field(None, alias="HELPERKIT_LOGGING_LEVEL")
    logging_format: Optional[str] = Field(None, alias="HELPERKIT_LOGGING_FORMAT")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
