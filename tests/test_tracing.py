import asyncio
import json
from contextlib import contextmanager

import httpx
import pytest
from conftest import Recorder

from skyapi.tracing import redact_inputs, traced


class RecordingSpan:
    def __init__(self, name):
        self.name = name
        self.attributes = {}
        self.exceptions = []

    def set_attribute(self, key, value):
        self.attributes[key] = value

    def record_exception(self, exception):
        self.exceptions.append(exception)

    def set_status(self, status):
        self.status = status


class RecordingTracer:
    def __init__(self):
        self.spans = []

    @contextmanager
    def start_as_current_span(self, name):
        span = RecordingSpan(name)
        self.spans.append(span)
        yield span


@pytest.fixture
def tracer(monkeypatch):
    recording = RecordingTracer()
    monkeypatch.setattr("skyapi.tracing._traced.get_tracer", lambda: recording)
    return recording


def _inputs(span):
    return json.loads(span.attributes["inputs"])


def test_inputs_and_output_are_recorded(tracer):
    @traced(name="add", run_type="skyapi")
    def add(a, *, b=None):
        return a + b

    assert add(1, b=2) == 3

    (span,) = tracer.spans
    assert span.name == "add"
    assert span.attributes["run_type"] == "skyapi"
    assert span.attributes["span_type"] == "function_call_sync"
    assert _inputs(span) == {"a": 1, "b": 2}
    assert json.loads(span.attributes["output"]) == 3


def test_redact_inputs_masks_only_named_inputs(tracer):
    @traced(name="login", input_processor=redact_inputs("password"))
    def login(user, *, password=None):
        return user

    login("ann", password="hunter2")

    assert _inputs(tracer.spans[0]) == {"user": "ann", "password": "[REDACTED]"}


def test_errors_are_recorded_and_raised(tracer):
    @traced(name="fail")
    async def fail():
        raise ValueError("boom")

    with pytest.raises(ValueError):
        asyncio.run(fail())

    (span,) = tracer.spans
    assert span.attributes["span_type"] == "function_call_async"
    assert [str(e) for e in span.exceptions] == ["boom"]


def test_processing_job_credentials_are_not_recorded(tracer, make_sdk, recorder):
    sdk = make_sdk()

    sdk.datasets.create_processing_job(
        "d1",
        type="sync",
        connection_string="DefaultEndpointsProtocol=https;AccountKey=abc",
        access_token="repo-access",
        refresh_token="repo-refresh",
    )

    inputs = _inputs(tracer.spans[0])
    assert inputs["uuid"] == "d1"
    assert inputs["type"] == "sync"
    assert inputs["connection_string"] == "[REDACTED]"
    assert inputs["access_token"] == "[REDACTED]"
    assert inputs["refresh_token"] == "[REDACTED]"
    assert "repo-access" not in tracer.spans[0].attributes["inputs"]
    assert json.loads(recorder.requests[0].content)["accessToken"] == "repo-access"


def test_dataset_user_token_and_credentials_are_not_recorded(
    tracer, make_sdk, recorder
):
    sdk = make_sdk()

    asyncio.run(sdk.datasets.create_async(name="North pit", token="user-token"))

    span = tracer.spans[0]
    assert _inputs(span) == {"name": "North pit", "token": "[REDACTED]"}
    assert "user-token" not in json.dumps(span.attributes)
    assert "redacted" in json.loads(span.attributes["output"])
    assert recorder.requests[0].url.params["token"] == "user-token"


def test_file_manager_credentials_are_not_recorded(tracer, make_sdk):
    recorder = Recorder(lambda request: httpx.Response(200, json={"password": "s3cret"}))
    sdk = make_sdk(transport=recorder.transport)

    assert sdk.files.create_file_manager_credentials(site="s1") == {
        "password": "s3cret"
    }

    assert "s3cret" not in tracer.spans[0].attributes["output"]
