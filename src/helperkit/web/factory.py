"""
Factories that build ``AsyncWebHelpers`` with a configured transport.

    # From the configuration file and environment
    web = create_web_helpers_from_config()

    # Or with direct provider configuration
    web = create_web_helpers_for(CloudProvider.AZURE, "your-key-here")

The factories create the ``httpx.AsyncClient`` themselves, so the returned
helpers own the transport and close it in ``aclose()``.
"""

from typing import Callable, Optional, Union

import httpx

from ..core.config import ConfigManager, HelperKitConfig
from ..core.config.models import CloudProvider, HttpClientConfig, WebHelperOptions
from ..logging import get_logger
from .client import AsyncWebHelpers

ClientConfigurator = Callable[[httpx.AsyncClient], None]

logger = get_logger(__name__)


def create_web_helpers(
    options: Optional[WebHelperOptions] = None,
    *,
    http: Optional[HttpClientConfig] = None,
    configure_client: Optional[ClientConfigurator] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AsyncWebHelpers:
    """Build helpers over a new ``httpx.AsyncClient``.

    Args:
        options: Auth options, shared by reference with the helpers
        http: Transport defaults (base URL, timeout, Accept header)
        configure_client: Hook called with the new client before use
        transport: Custom httpx transport, mainly for tests
    """
    options = options if options is not None else WebHelperOptions()
    http = http or HttpClientConfig()

    client = httpx.AsyncClient(
        base_url=http.base_url or "",
        timeout=httpx.Timeout(http.timeout_seconds),
        transport=transport,
    )
    if configure_client is not None:
        configure_client(client)

    # Headers on the transport are replaced per request, so Accept lives with the helpers
    base_headers = {"Accept": http.accept} if http.accept else None
    helpers = AsyncWebHelpers(client, options, owns_transport=True, base_headers=base_headers)

    logger.debug(
        "Created web helpers",
        provider=options.provider.value if options.provider else None,
        base_url=http.base_url,
        timeout_seconds=http.timeout_seconds,
    )
    return helpers


def create_web_helpers_for(
    provider: CloudProvider,
    auth_key: str,
    custom_header_name: Optional[str] = None,
    **kwargs,
) -> AsyncWebHelpers:
    """Build helpers for a provider and key without a configuration file."""
    options = WebHelperOptions(
        provider=provider,
        authentication_key=auth_key,
        custom_header_name=custom_header_name,
    )
    return create_web_helpers(options, **kwargs)


def create_web_helpers_from_config(
    source: Union[HelperKitConfig, ConfigManager, None] = None,
    **kwargs,
) -> AsyncWebHelpers:
    """Build helpers from the ``cloud_auth`` and ``http`` configuration sections."""
    if source is None:
        source = ConfigManager()
    config = source.load_config() if isinstance(source, ConfigManager) else source

    kwargs.setdefault("http", config.http)
    return create_web_helpers(config.cloud_auth, **kwargs)
