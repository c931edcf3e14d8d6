import base64
import json
import logging
import time
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from skyapi import SkyApi

ORIGIN = "https://api.test"
TOKEN_URL = f"{ORIGIN}/v1/oauth/token"


def _segment(data: Dict[str, Any]) -> str:
    raw = json.dumps(data).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def encode_token(claims: Dict[str, Any]) -> str:
    return f"{_segment({'alg': 'none', 'typ': 'JWT'})}.{_segment(claims)}.sig"


def make_token(expires_in: float = 3600, **claims: Any) -> str:
    """Unsigned JWT whose `exp` is `expires_in` seconds from now."""
    return encode_token(
        {"sub": "client-id", "exp": int(time.time() + expires_in), **claims}
    )


def body_of(request: httpx.Request) -> Any:
    return json.loads(request.content) if request.content else None


class Recorder:
    """MockTransport handler that keeps every request it answers."""

    def __init__(
        self, handler: Optional[Callable[[httpx.Request], httpx.Response]] = None
    ) -> None:
        self.requests: List[httpx.Request] = []
        self.access_token = make_token()
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._handler is not None:
            return self._handler(request)
        if request.url.path == "/v1/oauth/token":
            return httpx.Response(200, json={"access_token": self.access_token})
        return httpx.Response(200, json={"ok": True})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def token_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/v1/oauth/token"]

    @property
    def api_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path != "/v1/oauth/token"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "SKYAPI_ENV",
        "SKYAPI_ORIGIN",
        "SKYAPI_DOMAIN",
        "SKYAPI_TENANT",
        "SKYAPI_KEY",
        "SKYAPI_SECRET",
        "SKYAPI_AUDIENCE",
        "SKYAPI_TOKEN",
        "SKYAPI_VERSION",
        "SKYAPI_RETRIES",
        "SKYAPI_LOG_FORMAT",
        "SKYAPI_DISABLE_SSL_VERIFY",
        "DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_logger_level():
    skyapi_logger = logging.getLogger("skyapi")
    level = skyapi_logger.level
    yield
    skyapi_logger.setLevel(level)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_sdk(recorder):
    def _make(**kwargs: Any) -> SkyApi:
        kwargs.setdefault("origin", ORIGIN)
        kwargs.setdefault("retries", 0)
        kwargs.setdefault("transport", recorder.transport)
        return SkyApi(**kwargs)

    return _make
