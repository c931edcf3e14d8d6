import asyncio
import json
import threading
import time
from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest
from conftest import ORIGIN, TOKEN_URL, Recorder, encode_token, make_token

from skyapi import AuthError
from skyapi._auth import TokenProvider, is_token_expired, parse_access_token
from skyapi._config import Config


def _provider(recorder: Recorder, **config) -> TokenProvider:
    config.setdefault("origin", ORIGIN)
    config.setdefault("retries", 0)
    return TokenProvider(Config(**config), transport=recorder.transport)


def test_parse_access_token_reads_claims():
    token = make_token(aud="skyapi")

    claims = parse_access_token(token)

    assert claims["aud"] == "skyapi"
    assert claims["sub"] == "client-id"


@pytest.mark.parametrize("token", ["not-a-jwt", "a.b", "a.@@@.c", "a.bm90IGpzb24.c"])
def test_parse_access_token_rejects_malformed_tokens(token):
    with pytest.raises(AuthError):
        parse_access_token(token)


def test_is_token_expired():
    assert is_token_expired(make_token(expires_in=-10))
    assert not is_token_expired(make_token(expires_in=600))


def test_token_without_exp_never_expires():
    assert not is_token_expired(encode_token({"sub": "client-id"}))


def test_presupplied_valid_token_makes_no_token_call(recorder):
    token = make_token()
    provider = _provider(recorder, token=token, key="k", secret="s")

    assert provider.ensure_valid() == token
    assert provider.ensure_valid() == token
    assert recorder.requests == []


def test_credentials_acquire_once_and_reuse(recorder):
    provider = _provider(recorder, key="k", secret="s", audience="https://aud")

    first = provider.ensure_valid()
    second = provider.ensure_valid()

    assert first == second == recorder.access_token
    assert len(recorder.token_requests) == 1

    request = recorder.token_requests[0]
    assert str(request.url) == TOKEN_URL
    assert request.method == "POST"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {
        "grant_type": "client_credentials",
        "client_id": "k",
        "client_secret": "s",
        "audience": "https://aud",
    }


def test_expired_token_is_refreshed(recorder):
    provider = _provider(
        recorder, token=make_token(expires_in=-60), key="k", secret="s"
    )

    assert provider.ensure_valid() == recorder.access_token
    assert len(recorder.token_requests) == 1


def test_expired_token_without_credentials_raises(recorder):
    provider = _provider(recorder, token=make_token(expires_in=-60))

    with pytest.raises(AuthError, match="expired"):
        provider.ensure_valid()
    assert recorder.requests == []


def test_no_token_and_no_credentials_yields_none(recorder):
    provider = _provider(recorder)

    assert provider.ensure_valid() is None
    assert recorder.requests == []


def test_token_endpoint_error_raises_auth_error():
    recorder = Recorder(
        lambda request: httpx.Response(401, json={"error": "invalid_client"})
    )
    provider = _provider(recorder, key="k", secret="bad")

    with pytest.raises(AuthError) as exc_info:
        provider.ensure_valid()

    assert exc_info.value.status_code == 401
    assert str(exc_info.value) == '{"error":"invalid_client"}'
    assert provider.token is None


def test_token_endpoint_error_keeps_non_ascii_text():
    recorder = Recorder(
        lambda request: httpx.Response(401, json={"error": "clé refusée"})
    )
    provider = _provider(recorder, key="k", secret="bad")

    with pytest.raises(AuthError) as exc_info:
        provider.acquire()

    assert str(exc_info.value) == '{"error":"clé refusée"}'


def test_token_response_without_access_token_raises_auth_error():
    recorder = Recorder(lambda request: httpx.Response(200, json={"token": "x"}))
    provider = _provider(recorder, key="k", secret="s")

    with pytest.raises(AuthError, match="access_token"):
        provider.acquire()


def test_token_url_uses_tenant_when_no_origin(recorder):
    provider = _provider(
        recorder, origin=None, domain="api.test", tenant="auth.test", key="k", secret="s"
    )

    provider.acquire()

    assert str(recorder.token_requests[0].url) == "https://auth.test/v1/oauth/token"


def test_token_url_falls_back_to_domain(recorder):
    provider = _provider(recorder, origin=None, domain="api.test", key="k", secret="s")

    assert provider.ensure_valid() == recorder.access_token
    assert str(recorder.token_requests[0].url) == "https://api.test/v1/oauth/token"


def test_token_url_requires_a_host(recorder):
    provider = _provider(recorder, origin=None, key="k", secret="s")

    with pytest.raises(AuthError, match="Token endpoint"):
        provider.ensure_valid()
    assert recorder.requests == []


def test_invalidate_forces_a_new_token(recorder):
    provider = _provider(recorder, key="k", secret="s")
    provider.ensure_valid()

    provider.invalidate()
    provider.ensure_valid()

    assert len(recorder.token_requests) == 2


def test_concurrent_threads_share_a_single_refresh():
    calls = []
    lock = threading.Lock()
    token = make_token()

    def handler(request):
        with lock:
            calls.append(request)
        time.sleep(0.05)
        return httpx.Response(200, json={"access_token": token})

    provider = _provider(Recorder(handler), key="k", secret="s")

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda _: provider.ensure_valid(), range(8)))

    assert results == [token] * 8
    assert len(calls) == 1


def test_concurrent_coroutines_share_a_single_refresh(recorder):
    provider = _provider(recorder, key="k", secret="s")

    async def main():
        return await asyncio.gather(*(provider.ensure_valid_async() for _ in range(5)))

    results = asyncio.run(main())

    assert results == [recorder.access_token] * 5
    assert len(recorder.token_requests) == 1


def test_acquire_async(recorder):
    provider = _provider(recorder, key="k", secret="s")

    assert asyncio.run(provider.acquire_async()) == recorder.access_token
    assert len(recorder.token_requests) == 1


def test_async_refresh_works_across_event_loops(recorder):
    provider = _provider(recorder, key="k", secret="s")

    async def main():
        return await asyncio.gather(*(provider.ensure_valid_async() for _ in range(3)))

    assert asyncio.run(main()) == [recorder.access_token] * 3
    provider.invalidate()
    assert asyncio.run(main()) == [recorder.access_token] * 3

    assert len(recorder.token_requests) == 2
