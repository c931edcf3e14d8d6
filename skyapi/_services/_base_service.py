import json
from logging import getLogger
from typing import Any, Optional, Union

from httpx import AsyncClient, Client, Request, Response

from .._auth import TokenProvider
from .._config import Config
from .._utils import (
    Endpoint,
    HttpMethod,
    RequestSpec,
    append_query,
    carries_body,
    is_client_or_server_error,
    log_request,
    log_response,
    user_agent_value,
)
from .._utils._retry import async_retrying, retrying
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import (
    CONTENT_TYPE_JSON,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_ENV,
    HEADER_USER_AGENT,
)
from ..models.exceptions import ApiError


class BaseService:
    """Turns request specs into SkyAPI calls and classifies the responses.

    Every service shares the `TokenProvider` of the `SkyApi` instance that
    created it, so a token acquired for one service is reused by the others.

    The async client pools its connections, so the `_async` methods of one
    instance should be driven from a single event loop.
    """

    def __init__(
        self,
        config: Config,
        token_provider: TokenProvider,
        *,
        transport: Optional[Any] = None,
    ) -> None:
        self._logger = getLogger("skyapi")
        self._config = config
        self._token_provider = token_provider

        client_kwargs = get_httpx_client_kwargs(config.timeout, transport)

        self._client = Client(**client_kwargs)
        self._client_async = AsyncClient(**client_kwargs)

        super().__init__()

    def request(
        self,
        method: Union[HttpMethod, str],
        url: Union[Endpoint, str],
        *,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
        security: bool = True,
        request_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """Sends one SkyAPI call and returns the parsed JSON response.

        Args:
            method: HTTP method, case-insensitive.
            url: Endpoint path without the version segment.
            params: Query parameters; lists repeat the key.
            json: Body parameters, only sent for PUT/POST/PATCH/DELETE.
            security: Whether the call carries the bearer token.
            request_id: Correlation id for the trace logs, never sent.
            timeout: Overrides the client timeout for this call.

        Raises:
            ApiError: If the endpoint answers with a 4xx or 5xx status.
            AuthError: If a required token cannot be obtained.
        """
        self._logger.debug(f"Request: {method} {url}")
        headers = self._base_headers()
        if security:
            token = self._token_provider.ensure_valid()
            if token:
                headers[HEADER_AUTHORIZATION] = f"Bearer {token}"

        request = self._build_request(
            method, url, params, json, headers=headers, timeout=timeout
        )
        self._log_request(request, request_id)

        response = retrying(self._config.retries)(self._client.send, request)

        return self._handle_response(response, request_id)

    async def request_async(
        self,
        method: Union[HttpMethod, str],
        url: Union[Endpoint, str],
        *,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
        security: bool = True,
        request_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """Asynchronously sends one SkyAPI call and returns the parsed JSON response."""
        self._logger.debug(f"Request: {method} {url}")
        headers = self._base_headers()
        if security:
            token = await self._token_provider.ensure_valid_async()
            if token:
                headers[HEADER_AUTHORIZATION] = f"Bearer {token}"

        request = self._build_request(
            method, url, params, json, headers=headers, timeout=timeout
        )
        self._log_request(request, request_id)

        response = await async_retrying(self._config.retries)(
            self._client_async.send, request
        )

        return self._handle_response(response, request_id)

    def request_spec(self, spec: RequestSpec) -> Any:
        return self.request(
            spec.method,
            spec.endpoint,
            params=spec.params,
            json=spec.json,
            security=spec.security,
            request_id=spec.request_id,
            timeout=spec.timeout,
        )

    async def request_spec_async(self, spec: RequestSpec) -> Any:
        return await self.request_async(
            spec.method,
            spec.endpoint,
            params=spec.params,
            json=spec.json,
            security=spec.security,
            request_id=spec.request_id,
            timeout=spec.timeout,
        )

    def url_for(self, endpoint: Union[Endpoint, str]) -> str:
        return self._config.base_url + Endpoint(endpoint).versioned(
            self._config.version
        )

    def _base_headers(self) -> dict[str, str]:
        headers = {HEADER_USER_AGENT: user_agent_value(type(self).__name__)}
        if self._config.env:
            headers[HEADER_ENV] = self._config.env
        return headers

    def _build_request(
        self,
        method: Union[HttpMethod, str],
        url: Union[Endpoint, str],
        params: Optional[dict[str, Any]],
        body: Optional[dict[str, Any]],
        *,
        headers: dict[str, str],
        timeout: Optional[float],
    ) -> Request:
        spec = RequestSpec(
            method=method,
            endpoint=Endpoint(url),
            params=params or {},
            json=body or {},
        )

        content: Optional[str] = None
        if carries_body(spec.method):
            headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON
            content = json.dumps(spec.json)

        kwargs: dict[str, Any] = {}
        if timeout is not None:
            kwargs["timeout"] = timeout

        return self._client.build_request(
            spec.method,
            append_query(self.url_for(spec.endpoint), spec.params),
            headers=headers,
            content=content,
            **kwargs,
        )

    def _log_request(self, request: Request, request_id: Optional[str]) -> None:
        log_request(
            request_id=request_id,
            method=request.method,
            url=str(request.url),
            headers={key: value for key, value in request.headers.items()},
            body=request.content.decode("utf-8") if request.content else None,
        )

    def _handle_response(self, response: Response, request_id: Optional[str]) -> Any:
        body = response.json() if response.content else None
        log_response(request_id=request_id, response=response, body=body)

        if is_client_or_server_error(response.status_code):
            raise ApiError(body, response.status_code)

        return body
