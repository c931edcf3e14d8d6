import asyncio
import json

import httpx
import pytest
from conftest import ORIGIN, Recorder, body_of, make_token
from tenacity import RetryCallState, Retrying, wait_none

from skyapi import ApiError, SkyApi
from skyapi._utils._retry import _last_outcome


@pytest.fixture
def no_wait(monkeypatch):
    monkeypatch.setattr(
        "skyapi._utils._retry.wait_exponential", lambda **kwargs: wait_none()
    )


def test_secured_call_sends_bearer_token(make_sdk, recorder):
    token = make_token()
    sdk = make_sdk(token=token)

    sdk.processes.retrieve("p1")

    request = recorder.requests[0]
    assert request.method == "GET"
    assert str(request.url) == f"{ORIGIN}/v2/processes/p1"
    assert request.headers["authorization"] == f"Bearer {token}"


def test_public_call_never_sends_authorization(make_sdk, recorder):
    sdk = make_sdk(token=make_token(), key="k", secret="s")

    sdk.coordinate_systems.list_geoids(lon=7.5, lat=46.9)

    assert len(recorder.requests) == 1
    assert "authorization" not in recorder.requests[0].headers


def test_secured_call_without_token_or_credentials_sends_no_authorization(
    make_sdk, recorder
):
    sdk = make_sdk()

    sdk.datasets.retrieve("d1")

    assert recorder.token_requests == []
    assert "authorization" not in recorder.requests[0].headers


def test_domain_and_credentials_scenario():
    recorder = Recorder(
        lambda request: (
            httpx.Response(200, json={"access_token": recorder.access_token})
            if request.url.path == "/v1/oauth/token"
            else httpx.Response(200, json={"uuid": "p1"})
        )
    )
    sdk = SkyApi(
        domain="api.example.com",
        key="k",
        secret="s",
        audience="aud",
        retries=0,
        transport=recorder.transport,
    )

    assert sdk.processes.retrieve("p1") == {"uuid": "p1"}
    assert sdk.processes.retrieve("p1") == {"uuid": "p1"}

    token_request, first, second = recorder.requests
    assert token_request.method == "POST"
    assert str(token_request.url) == "https://api.example.com/v1/oauth/token"
    assert body_of(token_request) == {
        "grant_type": "client_credentials",
        "client_id": "k",
        "client_secret": "s",
        "audience": "aud",
    }
    assert first.method == "GET"
    assert str(first.url) == "https://api.example.com/v2/processes/p1"
    assert first.headers["authorization"] == f"Bearer {recorder.access_token}"
    assert second.headers["authorization"] == f"Bearer {recorder.access_token}"


def test_tenant_hosts_the_token_endpoint():
    token = make_token()

    def handler(request):
        if request.url.host == "auth.test":
            return httpx.Response(200, json={"access_token": token})
        return httpx.Response(200, json={"uuid": "p1"})

    recorder = Recorder(handler)
    sdk = SkyApi(
        domain="api.test",
        tenant="auth.test",
        key="k",
        secret="s",
        retries=0,
        transport=recorder.transport,
    )

    sdk.processes.retrieve("p1")

    token_request, request = recorder.requests
    assert str(token_request.url) == "https://auth.test/v1/oauth/token"
    assert str(request.url) == "https://api.test/v2/processes/p1"
    assert request.headers["authorization"] == f"Bearer {token}"


def test_get_never_carries_a_body(make_sdk, recorder):
    sdk = make_sdk()

    sdk.datasets.retrieve("d1", exif=True)

    request = recorder.requests[0]
    assert request.content == b""
    assert "content-type" not in request.headers
    assert str(request.url.params) == "exif=true"


def test_body_omits_unset_arguments(make_sdk, recorder):
    sdk = make_sdk()

    sdk.datasets.create(name="North pit", duration=2)

    request = recorder.requests[0]
    assert request.headers["content-type"] == "application/json"
    assert body_of(request) == {"name": "North pit", "duration": 2}
    assert request.url.query == b""


def test_query_uses_repeat_array_format(make_sdk, recorder):
    sdk = make_sdk()

    sdk.api_client.request("GET", "/things", params={"type": "A", "tags": ["x", "y"]})

    assert recorder.requests[0].url.query == b"type=A&tags=x&tags=y"


def test_environment_and_user_agent_headers(make_sdk, recorder):
    make_sdk(env="stage").support.find_uuid("u1")
    make_sdk().support.find_uuid("u1")

    staged, plain = recorder.requests
    assert staged.headers["x-dh-env"] == "stage"
    assert "x-dh-env" not in plain.headers
    assert staged.headers["user-agent"].startswith("SkyAPI.Python.Sdk/")


def test_request_id_is_not_sent(make_sdk, recorder):
    sdk = make_sdk()

    sdk.exports.retrieve("e1", request_id="req-42")

    request = recorder.requests[0]
    assert "req-42" not in str(request.url)
    assert all("req-42" not in value for value in request.headers.values())


def test_version_and_origin_shape_the_url(make_sdk, recorder):
    sdk = make_sdk(origin="http://localhost:3000/", version=3)

    sdk.overlays.retrieve("o1")

    assert str(recorder.requests[0].url) == "http://localhost:3000/v3/overlays/o1"


def test_api_client_substitutes_path_params(make_sdk, recorder):
    sdk = make_sdk()

    sdk.api_client.request(
        "get", "/datasets/{uuid}/photos/{id}", path_params={"uuid": "d1", "id": "p1"}
    )

    assert recorder.requests[0].url.path == "/v2/datasets/d1/photos/p1"


def test_per_call_timeout_overrides_client_timeout(make_sdk, recorder):
    sdk = make_sdk(timeout=30)

    sdk.api_client.request("GET", "/things", timeout=5)
    sdk.api_client.request("GET", "/things")

    overridden, default = recorder.requests
    assert overridden.extensions["timeout"]["read"] == 5
    assert default.extensions["timeout"]["read"] == 30


def test_success_returns_parsed_body(make_sdk):
    sdk = make_sdk()

    assert sdk.precog_jobs.retrieve("j1") == {"ok": True}


def test_empty_body_returns_none():
    recorder = Recorder(lambda request: httpx.Response(204))
    sdk = SkyApi(origin=ORIGIN, retries=0, transport=recorder.transport)

    assert sdk.datasets.delete_file("d1", "f1") is None


def test_not_found_raises_api_error():
    recorder = Recorder(
        lambda request: httpx.Response(404, json={"message": "not found"})
    )
    sdk = SkyApi(origin=ORIGIN, retries=0, transport=recorder.transport)

    with pytest.raises(ApiError, match="not found") as exc_info:
        sdk.datasets.retrieve("missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.body == {"message": "not found"}
    assert str(exc_info.value) == '{"message":"not found"}'


def test_error_detail_keeps_non_ascii_text():
    recorder = Recorder(
        lambda request: httpx.Response(400, json={"message": "déjà vu"})
    )
    sdk = SkyApi(origin=ORIGIN, retries=0, transport=recorder.transport)

    with pytest.raises(ApiError) as exc_info:
        sdk.datasets.retrieve("d1")

    assert exc_info.value.detail == '{"message":"déjà vu"}'
    assert str(exc_info.value) == '{"message":"déjà vu"}'


def test_malformed_json_propagates():
    recorder = Recorder(lambda request: httpx.Response(200, content=b"<html>"))
    sdk = SkyApi(origin=ORIGIN, retries=0, transport=recorder.transport)

    with pytest.raises(json.JSONDecodeError):
        sdk.devices.retrieve_release("e1")


def test_server_errors_are_retried(no_wait):
    responses = iter(
        [httpx.Response(503, json={"message": "busy"}), httpx.Response(200, json=[])]
    )
    recorder = Recorder(lambda request: next(responses))
    sdk = SkyApi(origin=ORIGIN, retries=2, transport=recorder.transport)

    assert sdk.devices.retrieve_release("e1") == []
    assert len(recorder.requests) == 2


def test_server_error_is_raised_after_the_last_attempt(no_wait):
    recorder = Recorder(lambda request: httpx.Response(503, json={"message": "busy"}))
    sdk = SkyApi(origin=ORIGIN, retries=2, transport=recorder.transport)

    with pytest.raises(ApiError) as exc_info:
        sdk.devices.retrieve_release("e1")

    assert exc_info.value.status_code == 503
    assert len(recorder.requests) == 3


def test_client_errors_are_not_retried(no_wait):
    recorder = Recorder(lambda request: httpx.Response(400, json={"message": "bad"}))
    sdk = SkyApi(origin=ORIGIN, retries=2, transport=recorder.transport)

    with pytest.raises(ApiError):
        sdk.devices.retrieve_release("e1")

    assert len(recorder.requests) == 1


def test_connection_errors_are_retried_then_raised(no_wait):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    recorder = Recorder(handler)
    sdk = SkyApi(origin=ORIGIN, retries=1, transport=recorder.transport)

    with pytest.raises(httpx.ConnectError):
        sdk.devices.retrieve_release("e1")

    assert len(recorder.requests) == 2


def test_async_call_goes_through_the_same_pipeline(make_sdk, recorder):
    sdk = make_sdk(key="k", secret="s")

    result = asyncio.run(sdk.datasets.retrieve_async("d1", credentials=True))

    assert result == {"ok": True}
    assert len(recorder.token_requests) == 1
    request = recorder.api_requests[0]
    assert str(request.url) == f"{ORIGIN}/v2/datasets/d1?credentials=true"
    assert request.headers["authorization"] == f"Bearer {recorder.access_token}"


def test_async_error_classification():
    recorder = Recorder(lambda request: httpx.Response(409, json={"message": "busy"}))
    sdk = SkyApi(origin=ORIGIN, retries=0, transport=recorder.transport)

    with pytest.raises(ApiError, match="busy"):
        asyncio.run(sdk.exports.create_async(puuid="p1", type="landxml"))


def test_retry_callback_without_outcome_raises():
    state = RetryCallState(Retrying(), None, (), {})

    with pytest.raises(RuntimeError, match="without an outcome"):
        _last_outcome(state)
