import asyncio
import json
import logging
import threading
import weakref
from typing import Any, Optional

from httpx import AsyncClient, Client, Response

from .._config import Config
from .._utils import is_client_or_server_error, log_request, log_response
from .._utils._retry import async_retrying, retrying
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import (
    CONTENT_TYPE_JSON,
    GRANT_TYPE_CLIENT_CREDENTIALS,
    TOKEN_PATH,
)
from ..models.exceptions import AuthError, stringify_body
from ._models import TokenRequest
from ._utils import is_token_expired

logger = logging.getLogger("skyapi.auth")


class TokenProvider:
    """Owns the bearer token used by the operations that require security.

    The token is either supplied up front (`Config.token`) or acquired with the
    OAuth2 client credentials grant (`Config.key` / `Config.secret`). Its
    expiry is read from the token's own `exp` claim on every check, and an
    expired token is replaced before the call proceeds.

    Refreshes are single-flight: concurrent callers wait for the refresh in
    progress and reuse its token instead of hitting the token endpoint again.
    Async refreshes are single-flight per event loop, so the same provider can
    be driven by successive `asyncio.run` calls.
    """

    def __init__(self, config: Config, *, transport: Optional[Any] = None) -> None:
        self._config = config
        self._token: Optional[str] = config.token

        client_kwargs = get_httpx_client_kwargs(config.timeout, transport)
        self._client = Client(**client_kwargs)
        self._client_async = AsyncClient(**client_kwargs)

        self._lock = threading.Lock()
        self._async_locks: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def token_url(self) -> str:
        base_url = self._config.token_base_url
        if base_url is None:
            raise AuthError(
                "Token endpoint is not configured. "
                "Set SKYAPI_ORIGIN or SKYAPI_DOMAIN."
            )
        return base_url + TOKEN_PATH

    def invalidate(self) -> None:
        """Drops the held token; the next secure call acquires a new one."""
        with self._lock:
            self._token = None

    def acquire(self) -> str:
        """Requests a new access token with the client credentials grant.

        Returns:
            str: The `access_token` of the token endpoint response.

        Raises:
            AuthError: If the token endpoint answers with a 4xx or 5xx status.
        """
        url = self.token_url
        headers = self._headers
        content = json.dumps(self._body)

        log_request(method="POST", url=url, headers=headers, body=content)
        response = retrying(self._config.retries)(
            self._client.post, url, headers=headers, content=content
        )
        return self._handle_response(response)

    async def acquire_async(self) -> str:
        """Asynchronously requests a new access token.

        Returns:
            str: The `access_token` of the token endpoint response.

        Raises:
            AuthError: If the token endpoint answers with a 4xx or 5xx status.
        """
        url = self.token_url
        headers = self._headers
        content = json.dumps(self._body)

        log_request(method="POST", url=url, headers=headers, body=content)
        response = await async_retrying(self._config.retries)(
            self._client_async.post, url, headers=headers, content=content
        )
        return self._handle_response(response)

    def ensure_valid(self) -> Optional[str]:
        """Returns a usable bearer token, refreshing it when needed.

        Returns:
            Optional[str]: The token, or None when neither a token nor client
                credentials are configured. Callers then proceed without an
                Authorization header.

        Raises:
            AuthError: If the refresh fails or the token cannot be decoded.
        """
        if not self._needs_refresh():
            return self._token

        with self._lock:
            if self._needs_refresh():
                self._token = self.acquire()
                logger.debug("Acquired a new access token")
            return self._token

    async def ensure_valid_async(self) -> Optional[str]:
        """Asynchronously returns a usable bearer token, refreshing it when needed."""
        if not self._needs_refresh():
            return self._token

        async with self._async_lock():
            if self._needs_refresh():
                self._token = await self.acquire_async()
                logger.debug("Acquired a new access token")
            return self._token

    def _async_lock(self) -> asyncio.Lock:
        # asyncio locks belong to one event loop, so each loop gets its own
        loop = asyncio.get_running_loop()
        lock = self._async_locks.get(loop)
        if lock is None:
            lock = self._async_locks[loop] = asyncio.Lock()
        return lock

    def _needs_refresh(self) -> bool:
        if self._token is None:
            return self._config.has_credentials

        if not is_token_expired(self._token):
            return False

        if not self._config.has_credentials:
            raise AuthError(
                "Access token expired and no client credentials are configured "
                "to refresh it."
            )
        return True

    @property
    def _headers(self) -> dict[str, str]:
        return {"Content-Type": CONTENT_TYPE_JSON}

    @property
    def _body(self) -> TokenRequest:
        return {
            "grant_type": GRANT_TYPE_CLIENT_CREDENTIALS,
            "client_id": self._config.key,  # type: ignore[typeddict-item]
            "client_secret": self._config.secret,  # type: ignore[typeddict-item]
            "audience": self._config.audience,  # type: ignore[typeddict-item]
        }

    def _handle_response(self, response: Response) -> str:
        body = response.json() if response.content else None
        log_response(response=response, body=body)

        if is_client_or_server_error(response.status_code):
            raise AuthError(stringify_body(body), response.status_code)

        try:
            return body["access_token"]
        except (KeyError, TypeError) as e:
            raise AuthError(
                f"Token response has no access_token: {stringify_body(body)}",
                response.status_code,
            ) from e
