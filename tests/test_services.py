import asyncio

import pytest
from conftest import body_of, make_token

# (call, method, path, query, body, secured)
OPERATIONS = [
    (
        lambda sdk: sdk.coordinate_systems.create_ccrs_localization(
            version="2", file="cal", units="m"
        ),
        "POST",
        "/v2/ccrs/localization",
        "version=2",
        {"file": "cal", "units": "m"},
        False,
    ),
    (
        lambda sdk: sdk.coordinate_systems.retrieve_geoid_height("g12", lat=1, lon=2),
        "GET",
        "/v2/geoids/g12/height",
        "lat=1&lon=2",
        None,
        False,
    ),
    (
        lambda sdk: sdk.coordinate_systems.list_projections(lon=2, lat=1),
        "GET",
        "/v2/projections",
        "lon=2&lat=1",
        None,
        False,
    ),
    (
        lambda sdk: sdk.coordinate_systems.upload_site_localization(
            "s1", ccrs_file="cal"
        ),
        "POST",
        "/v2/sites/s1",
        "",
        {"ccrsFile": "cal"},
        True,
    ),
    (
        lambda sdk: sdk.files.create_file_manager_credentials(
            dataset="d1", expiration=60
        ),
        "POST",
        "/v2/credentials/filemanager",
        "",
        {"dataset": "d1", "expiration": 60},
        True,
    ),
    (
        lambda sdk: sdk.files.retrieve_design_files("s1"),
        "GET",
        "/v2/designfiles/s1",
        "",
        None,
        True,
    ),
    (
        lambda sdk: sdk.datasets.create(name="n", source_id="src", token="t"),
        "POST",
        "/v2/datasets",
        "token=t",
        {"name": "n", "sourceId": "src"},
        True,
    ),
    (
        lambda sdk: sdk.datasets.update("d1", name="renamed"),
        "PATCH",
        "/v2/datasets/d1",
        "",
        {"name": "renamed"},
        True,
    ),
    (
        lambda sdk: sdk.datasets.retrieve_photo("d1", "p1"),
        "GET",
        "/v2/datasets/d1/photos/p1",
        "",
        None,
        True,
    ),
    (
        lambda sdk: sdk.datasets.list_processing_jobs("d1"),
        "GET",
        "/v2/datasets/d1/processes",
        "",
        None,
        True,
    ),
    (
        lambda sdk: sdk.datasets.create_processing_job(
            "d1",
            dryrun=True,
            source_data="rgb",
            point_cloud_column_order="xyz",
            sync_type="full",
        ),
        "POST",
        "/v2/datasets/d1/processes",
        "",
        {
            "dryrun": True,
            "sourceData": "rgb",
            "pointCloudColumnOrder": "xyz",
            "syncType": "full",
        },
        True,
    ),
    (
        lambda sdk: sdk.datasets.list_validations("d1", type="gcp"),
        "GET",
        "/v2/datasets/d1/validations",
        "type=gcp",
        None,
        True,
    ),
    (
        lambda sdk: sdk.datasets.create_validations("d1", type="gcp", data={"a": 1}),
        "POST",
        "/v2/datasets/d1/validations",
        "",
        {"type": "gcp", "data": {"a": 1}},
        True,
    ),
    (
        lambda sdk: sdk.datasets.delete_file("d1", "f1"),
        "DELETE",
        "/v2/datasets/d1/files/f1",
        "",
        {},
        True,
    ),
    (
        lambda sdk: sdk.datasets.delete_files("d1", type="tif"),
        "DELETE",
        "/v2/datasets/d1/files",
        "type=tif",
        {},
        True,
    ),
    (
        lambda sdk: sdk.devices.retrieve_release("e1"),
        "GET",
        "/v2/edge1/e1/version",
        "",
        None,
        False,
    ),
    (
        lambda sdk: sdk.devices.retrieve_demo_iot_data("dev1", start="a", end="b"),
        "GET",
        "/v2/demos/teck/iot/dev1",
        "start=a&end=b",
        None,
        False,
    ),
    (
        lambda sdk: sdk.email.send(
            api_key="k", sender="a@example.com", to=["b@example.com"], text="hi"
        ),
        "POST",
        "/v2/email/send",
        "api_key=k",
        {"from": "a@example.com", "to": ["b@example.com"], "text": "hi"},
        True,
    ),
    (
        lambda sdk: sdk.exports.create(puuid="p1", type="landxml", dryrun=False),
        "POST",
        "/v2/exports",
        "",
        {"puuid": "p1", "type": "landxml", "dryrun": False},
        True,
    ),
    (
        lambda sdk: sdk.exports.retrieve("x1"),
        "GET",
        "/v2/exports/x1",
        "",
        None,
        True,
    ),
    (
        lambda sdk: sdk.flight_logs.create(service="dji", user="u", password="pw"),
        "POST",
        "/v2/flightlogs",
        "",
        {"service": "dji", "user": "u", "pass": "pw"},
        True,
    ),
    (
        lambda sdk: sdk.flight_logs.retrieve("fl1"),
        "GET",
        "/v2/flightlogs/fl1",
        "",
        None,
        True,
    ),
    (
        lambda sdk: sdk.integrations.create(puuid="p1", provider="acme"),
        "POST",
        "/v2/integrations",
        "",
        {"puuid": "p1", "provider": "acme"},
        True,
    ),
    (
        lambda sdk: sdk.measurements.measure_surface_elevation(
            compact=True, surface_id="s1", surface_type="dsm"
        ),
        "POST",
        "/v2/measure/elevations",
        "compact=true",
        {"surfaceId": "s1", "surfaceType": "dsm"},
        True,
    ),
    (
        lambda sdk: sdk.measurements.measure_progress(
            processing_jobs=["p1", "p2"], change_threshold=0.1
        ),
        "POST",
        "/v2/measure/progress",
        "",
        {"processingJobs": ["p1", "p2"], "changeThreshold": 0.1},
        True,
    ),
    (
        lambda sdk: sdk.measurements.retrieve_result("progress", "m1"),
        "GET",
        "/v2/measure/progress/m1",
        "",
        None,
        True,
    ),
    (
        lambda sdk: sdk.measurements.measure_aggregate_volume(
            "stockpile", dryrun=True, base_plane={"type": "lowest"}
        ),
        "POST",
        "/v2/measure/aggregate/stockpile",
        "dryrun=true",
        {"basePlane": {"type": "lowest"}},
        True,
    ),
    (
        lambda sdk: sdk.measurements.measure_surface(refresh=False, batch=True),
        "POST",
        "/v2/measure/surface",
        "refresh=false",
        {"batch": True},
        True,
    ),
    (
        lambda sdk: sdk.metadata.retrieve(puuid="p1", path="quality.gsd"),
        "GET",
        "/v2/metadata",
        "puuid=p1&path=quality.gsd",
        None,
        True,
    ),
    (
        lambda sdk: sdk.metadata.update(puuid="p1", path="a", action="set", value=0),
        "PATCH",
        "/v2/metadata",
        "",
        {"puuid": "p1", "path": "a", "action": "set", "value": 0},
        True,
    ),
    (
        lambda sdk: sdk.precog_jobs.list(count=10, next_process_uuid="p9"),
        "GET",
        "/v2/precog-jobs",
        "count=10&next-process_uuid=p9",
        None,
        False,
    ),
    (
        lambda sdk: sdk.precog_jobs.create("p1"),
        "POST",
        "/v2/precog-jobs/p1/process",
        "",
        {},
        False,
    ),
    (
        lambda sdk: sdk.precog_jobs.delete_marks("j1", "m1", cp_id="cp", image_id="i"),
        "DELETE",
        "/v2/precog-jobs/j1/marks/m1",
        "",
        {"cpId": "cp", "imageId": "i"},
        False,
    ),
    (
        lambda sdk: sdk.precog_jobs.update_marks(
            "j1", "m1", cp_id="cp", image_id="i", x=1.5, y=2
        ),
        "PATCH",
        "/v2/precog-jobs/j1/marks/m1",
        "",
        {"cpId": "cp", "imageId": "i", "x": 1.5, "y": 2},
        False,
    ),
    (
        lambda sdk: sdk.processes.retrieve_results(
            "p1", layers=["dsm", "ortho"], export_types="las", expiration=60
        ),
        "GET",
        "/v2/processes/p1/result",
        "layers=dsm&layers=ortho&exportTypes=las&expiration=60",
        None,
        True,
    ),
    (
        lambda sdk: sdk.processes.resume("p1", apikey="k", jump_to="mesh"),
        "POST",
        "/v2/processes/p1/resume",
        "",
        {"apikey": "k", "jumpTo": "mesh"},
        False,
    ),
    (
        lambda sdk: sdk.support.find_uuid("u1", env="prod"),
        "GET",
        "/v2/support/find/u1",
        "env=prod",
        None,
        False,
    ),
    (
        lambda sdk: sdk.overlays.create(uuid="s1", geometry={"type": "Point"}),
        "POST",
        "/v2/overlays",
        "",
        {"uuid": "s1", "geometry": {"type": "Point"}},
        True,
    ),
    (
        lambda sdk: sdk.overlays.retrieve("o1", include_urls=True),
        "GET",
        "/v2/overlays/o1",
        "include_urls=true",
        None,
        True,
    ),
]


@pytest.mark.parametrize("call,method,path,query,body,secured", OPERATIONS)
def test_operation_request_shape(
    make_sdk, recorder, call, method, path, query, body, secured
):
    token = make_token()
    sdk = make_sdk(token=token)

    assert call(sdk) == {"ok": True}

    (request,) = recorder.requests
    assert request.method == method
    assert request.url.path == path
    assert request.url.query.decode() == query
    assert body_of(request) == body
    if secured:
        assert request.headers["authorization"] == f"Bearer {token}"
    else:
        assert "authorization" not in request.headers


@pytest.mark.parametrize(
    "call",
    [
        lambda sdk: sdk.datasets.retrieve(None),
        lambda sdk: sdk.datasets.retrieve_photo("d1", ""),
        lambda sdk: sdk.measurements.retrieve_result("progress", None),
        lambda sdk: sdk.precog_jobs.update_marks("", "m1"),
    ],
)
def test_missing_path_parameter_is_rejected_before_sending(make_sdk, recorder, call):
    sdk = make_sdk(token=make_token())

    with pytest.raises(ValueError):
        call(sdk)

    assert recorder.requests == []


def test_async_variants_match_sync_requests(make_sdk, recorder):
    sdk = make_sdk(token=make_token())

    async def main():
        await sdk.datasets.retrieve_photo_async("d1", "p1")
        await sdk.precog_jobs.update_marks_async("j1", "m1", x=1)
        await sdk.metadata.retrieve_async(duuid="d1", resolve=True)

    asyncio.run(main())

    photo, marks, metadata = recorder.requests
    assert photo.url.path == "/v2/datasets/d1/photos/p1"
    assert marks.method == "PATCH"
    assert body_of(marks) == {"x": 1}
    assert "authorization" not in marks.headers
    assert metadata.url.query == b"duuid=d1&resolve=true"
