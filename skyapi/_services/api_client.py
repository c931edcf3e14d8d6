from typing import Any, Optional, Union

from .._utils import Endpoint, HttpMethod
from ._base_service import BaseService


class ApiClient(BaseService):
    """Low-level client for making direct HTTP requests to SkyAPI.

    This class provides a flexible way to call SkyAPI endpoints the
    higher-level service classes do not wrap. Requests go through the same
    pipeline as the services: version prefix, environment header, bearer token,
    trace logging and error classification.

    Examples:
        ```python
        from skyapi import SkyApi

        sdk = SkyApi()

        sdk.api_client.request(
            "GET", "/datasets/{uuid}", path_params={"uuid": "d1"}, params={"exif": True}
        )
        ```
    """

    def request(
        self,
        method: Union[HttpMethod, str],
        url: Union[Endpoint, str],
        *,
        path_params: Optional[dict[str, Any]] = None,
        **kwargs: Any,
    ) -> Any:
        if path_params:
            url = Endpoint(url).format(**path_params)

        return super().request(method, url, **kwargs)

    async def request_async(
        self,
        method: Union[HttpMethod, str],
        url: Union[Endpoint, str],
        *,
        path_params: Optional[dict[str, Any]] = None,
        **kwargs: Any,
    ) -> Any:
        if path_params:
            url = Endpoint(url).format(**path_params)

        return await super().request_async(method, url, **kwargs)
