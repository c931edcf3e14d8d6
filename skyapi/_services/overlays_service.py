from typing import Any, Dict, Optional

from .._utils import Endpoint, RequestSpec
from ..tracing import traced
from ._base_service import BaseService


class OverlaysService(BaseService):
    """Service for overlays, the GeoJSON geometries drawn on top of a site map."""

    @traced(name="overlays_create", run_type="skyapi")
    def create(
        self,
        *,
        uuid: Optional[str] = None,
        geometry: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Create an overlay.

        Args:
            uuid (Optional[str]): The identifier of the site the overlay belongs to.
            geometry (Optional[Dict[str, Any]]): The GeoJSON geometry.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The created overlay.
        """
        return self.request_spec(
            self._create_spec(uuid=uuid, geometry=geometry, request_id=request_id)
        )

    @traced(name="overlays_create", run_type="skyapi")
    async def create_async(
        self,
        *,
        uuid: Optional[str] = None,
        geometry: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously create an overlay."""
        return await self.request_spec_async(
            self._create_spec(uuid=uuid, geometry=geometry, request_id=request_id)
        )

    @traced(name="overlays_retrieve", run_type="skyapi")
    def retrieve(
        self,
        uuid: str,
        *,
        include_urls: Optional[bool] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Retrieve an overlay.

        Args:
            uuid (str): The overlay identifier.
            include_urls (Optional[bool]): Include signed URLs of the overlay files.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The overlay.
        """
        return self.request_spec(
            self._retrieve_spec(uuid, include_urls=include_urls, request_id=request_id)
        )

    @traced(name="overlays_retrieve", run_type="skyapi")
    async def retrieve_async(
        self,
        uuid: str,
        *,
        include_urls: Optional[bool] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        return await self.request_spec_async(
            self._retrieve_spec(uuid, include_urls=include_urls, request_id=request_id)
        )

    def _create_spec(
        self,
        *,
        uuid: Optional[str],
        geometry: Optional[Dict[str, Any]],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/overlays"),
            json={"uuid": uuid, "geometry": geometry},
            request_id=request_id,
        )

    def _retrieve_spec(
        self,
        uuid: str,
        *,
        include_urls: Optional[bool],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/overlays/{uuid}").format(uuid=uuid),
            params={"include_urls": include_urls},
            request_id=request_id,
        )
