"""
Async web helpers.

``AsyncWebHelpers`` wraps an ``httpx.AsyncClient`` with consistent header,
authentication, failure and JSON deserialization handling:

    options = WebHelperOptions(provider=CloudProvider.AWS, authentication_key="...")
    async with create_web_helpers(options) as web:
        web.add_header("x-tenant", "acme")
        user = await web.get("https://api.example.com/users/1", result_type=User)
        ok = await web.put_ok("https://api.example.com/users/1", user)

Before every request the transport's own header set is cleared, and the
outgoing headers are built as an ordered list of pairs: the auth header
derived from the options, the base headers, then the custom headers. Names
that differ only by case, or that repeat the auth header name, are sent as
separate values rather than replacing each other.
"""

import json
import threading
from functools import lru_cache
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type, TypeVar, Union

import httpx
from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError, to_json

from ..constants import JSON_CONTENT_TYPE
from ..core.config.models import WebHelperOptions
from ..core.security.sanitizer import SensitiveDataSanitizer
from ..exceptions import (
    DeserializationError,
    HttpStatusError,
    InvalidArgumentError,
    NullArgumentError,
    WebTransportError,
)
from ..logging import get_logger
from .models import HttpMethod, WebResponse

T = TypeVar("T")

Converter = Callable[[Any], Any]


@lru_cache(maxsize=256)
def _adapter_for(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def _type_name(result_type: Any) -> Optional[str]:
    if result_type is None:
        return None
    return getattr(result_type, "__name__", None) or repr(result_type)


class AsyncWebHelpers:
    """Typed JSON client over an ``httpx.AsyncClient``.

    The client is constructed once with a transport and a ``WebHelperOptions``
    instance held by reference. Custom headers persist across calls until
    ``clear_headers`` is called; the auth header is derived from the options
    on every request and is not affected by ``clear_headers``. Base headers
    (such as the factory's ``Accept``) are fixed at construction; a custom
    header with the same name, ignoring case, takes their place.

    Header mutation and the apply-and-build step share a lock, and each
    request captures its headers before the first await, so concurrent
    requests never see a partially applied header set.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        options: WebHelperOptions,
        owns_transport: bool = False,
        base_headers: Optional[Mapping[str, str]] = None,
    ):
        if client is None:
            raise NullArgumentError("client")
        if options is None:
            raise NullArgumentError("options")

        self._client = client
        self._options = options
        self._owns_transport = owns_transport
        self._base_headers: Dict[str, str] = dict(base_headers or {})
        self._custom_headers: Dict[str, str] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}")

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def options(self) -> WebHelperOptions:
        return self._options

    @property
    def api_key(self) -> str:
        return self._options.authentication_key

    @api_key.setter
    def api_key(self, value: str) -> None:
        self._options.authentication_key = value

    @property
    def base_headers(self) -> Dict[str, str]:
        """Defaults sent before the custom headers; not affected by ``clear_headers``."""
        return dict(self._base_headers)

    @property
    def headers(self) -> Dict[str, str]:
        """Snapshot of the custom headers."""
        with self._lock:
            return dict(self._custom_headers)

    def add_header(self, name: str, value: str) -> None:
        """Add or overwrite a custom header sent with every request."""
        if not name:
            raise InvalidArgumentError("name", "header name cannot be None or empty")
        if value is None:
            raise NullArgumentError("value", "header value cannot be None")

        with self._lock:
            self._custom_headers[name] = value

    def add_headers(self, headers: Mapping[str, str]) -> None:
        """Add each entry of ``headers``; stops at the first invalid entry."""
        if headers is None:
            raise NullArgumentError("headers", "headers mapping cannot be None")

        for name, value in headers.items():
            self.add_header(name, value)

    def clear_headers(self) -> None:
        """Remove all custom headers. The auth and base headers are unaffected."""
        with self._lock:
            self._custom_headers.clear()

    def _outgoing_headers(self) -> httpx.Headers:
        """Auth, base and custom headers as a list of pairs.

        Also clears the transport's own header set so only these are sent.
        """
        auth = self._options.auth_header()

        # Assigning client.headers would re-add the httpx defaults, so clear in place
        self._client.headers.clear()

        pairs: List[Tuple[str, str]] = []
        if auth is not None:
            pairs.append(auth)

        custom_names = {name.lower() for name in self._custom_headers}
        for name, value in self._base_headers.items():
            if name.lower() not in custom_names:
                pairs.append((name, value))

        pairs.extend(self._custom_headers.items())
        return httpx.Headers(pairs)

    def _serialize(self, body: Any) -> bytes:
        try:
            return to_json(body)
        except PydanticSerializationError as e:
            raise InvalidArgumentError("body", f"value is not JSON serializable: {e}") from e

    def _build_request(self, method: HttpMethod, url: str, body: Any) -> httpx.Request:
        content = None
        if body is not None:
            content = self._serialize(body)

        with self._lock:
            headers = self._outgoing_headers()
            if content is not None:
                headers["Content-Type"] = JSON_CONTENT_TYPE
            return self._client.build_request(
                method.value, url, content=content, headers=headers
            )

    def _log_request(self, request: httpx.Request) -> None:
        auth_name = None
        if self._options.authentication_key:
            auth_name = self._options.get_auth_header_name()
        self.logger.debug(
            f"Dispatching {request.method} {request.url}",
            headers=SensitiveDataSanitizer.sanitize_headers(
                dict(request.headers), {auth_name} if auth_name else frozenset()
            ),
        )

    def _log_response(self, response: httpx.Response) -> None:
        self.logger.debug(
            f"Response: {response.status_code} - {len(response.content)} bytes"
        )

    async def _execute(
        self, method: HttpMethod, url: str, body: Any, allow_failure: bool
    ) -> httpx.Response:
        request = self._build_request(method, url, body)
        self._log_request(request)

        try:
            response = await self._client.send(request)
            await response.aread()
        except httpx.RequestError as e:
            raise WebTransportError(str(e) or type(e).__name__, method.value, url) from e

        self._log_response(response)

        # Only tolerate failure if explicitly requested
        if not allow_failure and not response.is_success:
            raise HttpStatusError(
                response.status_code,
                response.text,
                method.value,
                url,
                response.reason_phrase,
            )

        return response

    def _deserialize(
        self,
        response: httpx.Response,
        result_type: Optional[Any],
        converter: Optional[Converter],
        method: HttpMethod,
        url: str,
    ) -> Any:
        content = response.content
        if not content:
            return None

        try:
            data = json.loads(content)
            # A JSON null reads the same as an empty body
            if data is None:
                return None
            if converter is not None:
                return converter(data)
            if result_type is not None:
                return _adapter_for(result_type).validate_json(content)
            return data
        except Exception as e:
            raise DeserializationError(
                str(e) or type(e).__name__, _type_name(result_type), method.value, url
            ) from e

    async def request(
        self,
        method: Union[str, HttpMethod],
        url: str,
        body: Any = None,
        *,
        result_type: Optional[Type[T]] = None,
        converter: Optional[Converter] = None,
        allow_failure: bool = False,
        deserialize: bool = True,
    ) -> WebResponse:
        """Send a request and return the response with its deserialized body.

        Args:
            method: HTTP method name
            url: Absolute URL, or relative to the transport's base URL
            body: Value serialized as the JSON request body; None sends no content
            result_type: Type to validate the JSON response into (pydantic)
            converter: Callable applied to the decoded JSON instead of result_type
            allow_failure: Return non-success responses instead of raising
            deserialize: Skip reading the body into ``result`` when False

        Raises:
            HttpStatusError: Non-success status and ``allow_failure`` is False
            WebTransportError: Connection, timeout or protocol failure
            DeserializationError: Body is not valid JSON for ``result_type``
            ConfigurationError: Auth header cannot be derived from the options
        """
        label = f"{str(method).upper()} request{' with body' if body is not None else ''} to {url}"
        try:
            http_method = HttpMethod.parse(method)
            if not url:
                raise InvalidArgumentError("url", "URL cannot be None or empty")

            self.logger.debug(f"Executing {label}")
            response = await self._execute(http_method, url, body, allow_failure)

            result = None
            if deserialize:
                result = self._deserialize(response, result_type, converter, http_method, url)

            return WebResponse(
                status_code=response.status_code,
                success=response.is_success,
                body=response.content,
                headers=dict(response.headers),
                result=result,
            )
        except Exception:
            self.logger.exception(f"Error executing {label}")
            raise

    async def get(
        self,
        url: str,
        body: Any = None,
        *,
        result_type: Optional[Type[T]] = None,
        converter: Optional[Converter] = None,
        allow_failure: bool = False,
    ) -> Optional[T]:
        response = await self.request(
            HttpMethod.GET, url, body,
            result_type=result_type, converter=converter, allow_failure=allow_failure,
        )
        return response.result

    async def post(
        self,
        url: str,
        body: Any = None,
        *,
        result_type: Optional[Type[T]] = None,
        converter: Optional[Converter] = None,
        allow_failure: bool = False,
    ) -> Optional[T]:
        response = await self.request(
            HttpMethod.POST, url, body,
            result_type=result_type, converter=converter, allow_failure=allow_failure,
        )
        return response.result

    async def put(
        self,
        url: str,
        body: Any = None,
        *,
        result_type: Optional[Type[T]] = None,
        converter: Optional[Converter] = None,
        allow_failure: bool = False,
    ) -> Optional[T]:
        response = await self.request(
            HttpMethod.PUT, url, body,
            result_type=result_type, converter=converter, allow_failure=allow_failure,
        )
        return response.result

    async def patch(
        self,
        url: str,
        body: Any = None,
        *,
        result_type: Optional[Type[T]] = None,
        converter: Optional[Converter] = None,
        allow_failure: bool = False,
    ) -> Optional[T]:
        response = await self.request(
            HttpMethod.PATCH, url, body,
            result_type=result_type, converter=converter, allow_failure=allow_failure,
        )
        return response.result

    async def delete(
        self,
        url: str,
        body: Any = None,
        *,
        result_type: Optional[Type[T]] = None,
        converter: Optional[Converter] = None,
        allow_failure: bool = False,
    ) -> Optional[T]:
        response = await self.request(
            HttpMethod.DELETE, url, body,
            result_type=result_type, converter=converter, allow_failure=allow_failure,
        )
        return response.result

    async def put_ok(self, url: str, body: Any, *, allow_failure: bool = False) -> bool:
        """PUT ``body`` and return whether the status indicates success."""
        response = await self.request(
            HttpMethod.PUT, url, body, allow_failure=allow_failure, deserialize=False
        )
        return response.success

    async def patch_ok(self, url: str, body: Any, *, allow_failure: bool = False) -> bool:
        """PATCH ``body`` and return whether the status indicates success."""
        response = await self.request(
            HttpMethod.PATCH, url, body, allow_failure=allow_failure, deserialize=False
        )
        return response.success

    async def delete_ok(self, url: str, body: Any = None, *, allow_failure: bool = False) -> bool:
        """DELETE (optionally with a body) and return whether the status indicates success."""
        response = await self.request(
            HttpMethod.DELETE, url, body, allow_failure=allow_failure, deserialize=False
        )
        return response.success

    async def aclose(self) -> None:
        """Close the transport if this instance created it."""
        if self._owns_transport:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncWebHelpers":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
