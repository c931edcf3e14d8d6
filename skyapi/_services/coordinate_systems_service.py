from typing import Any, Optional

from .._utils import Endpoint, RequestSpec
from ..tracing import traced
from ._base_service import BaseService


class CoordinateSystemsService(BaseService):
    """Service for coordinate reference systems, geoids and projections.

    Apart from the site localization upload, these operations are public and
    never carry the bearer token.
    """

    @traced(name="coordinate_systems_create_ccrs_localization", run_type="skyapi")
    def create_ccrs_localization(
        self,
        *,
        version: Optional[str] = None,
        file: Optional[str] = None,
        units: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Build a custom coordinate reference system from a localization file.

        Args:
            version (Optional[str]): Version of the CCRS format to produce.
            file (Optional[str]): Contents of the localization file.
            units (Optional[str]): Units used by the localization file.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The custom coordinate reference system.

        Examples:
            ```python
            from skyapi import SkyApi

            sdk = SkyApi()

            ccrs = sdk.coordinate_systems.create_ccrs_localization(
                file=open("site.cal").read(), units="m"
            )
            ```
        """
        spec = self._create_ccrs_localization_spec(
            version=version, file=file, units=units, request_id=request_id
        )
        return self.request_spec(spec)

    @traced(name="coordinate_systems_create_ccrs_localization", run_type="skyapi")
    async def create_ccrs_localization_async(
        self,
        *,
        version: Optional[str] = None,
        file: Optional[str] = None,
        units: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously build a custom coordinate reference system."""
        spec = self._create_ccrs_localization_spec(
            version=version, file=file, units=units, request_id=request_id
        )
        return await self.request_spec_async(spec)

    @traced(name="coordinate_systems_list_geoids", run_type="skyapi")
    def list_geoids(
        self,
        *,
        lon: Optional[float] = None,
        lat: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """List the geoids available at a location.

        Args:
            lon (Optional[float]): Longitude in decimal degrees.
            lat (Optional[float]): Latitude in decimal degrees.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The geoids.
        """
        return self.request_spec(
            self._list_geoids_spec(lon=lon, lat=lat, request_id=request_id)
        )

    @traced(name="coordinate_systems_list_geoids", run_type="skyapi")
    async def list_geoids_async(
        self,
        *,
        lon: Optional[float] = None,
        lat: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously list the geoids available at a location."""
        return await self.request_spec_async(
            self._list_geoids_spec(lon=lon, lat=lat, request_id=request_id)
        )

    @traced(name="coordinate_systems_retrieve_geoid_height", run_type="skyapi")
    def retrieve_geoid_height(
        self,
        id: str,
        *,
        lat: Optional[float] = None,
        lon: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Retrieve the height of a geoid at a location.

        Args:
            id (str): The geoid identifier.
            lat (Optional[float]): Latitude in decimal degrees.
            lon (Optional[float]): Longitude in decimal degrees.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The geoid height.
        """
        return self.request_spec(
            self._retrieve_geoid_height_spec(
                id, lat=lat, lon=lon, request_id=request_id
            )
        )

    @traced(name="coordinate_systems_retrieve_geoid_height", run_type="skyapi")
    async def retrieve_geoid_height_async(
        self,
        id: str,
        *,
        lat: Optional[float] = None,
        lon: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously retrieve the height of a geoid at a location."""
        return await self.request_spec_async(
            self._retrieve_geoid_height_spec(
                id, lat=lat, lon=lon, request_id=request_id
            )
        )

    @traced(name="coordinate_systems_list_projections", run_type="skyapi")
    def list_projections(
        self,
        *,
        lon: Optional[float] = None,
        lat: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """List the projections available at a location."""
        return self.request_spec(
            self._list_projections_spec(lon=lon, lat=lat, request_id=request_id)
        )

    @traced(name="coordinate_systems_list_projections", run_type="skyapi")
    async def list_projections_async(
        self,
        *,
        lon: Optional[float] = None,
        lat: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        return await self.request_spec_async(
            self._list_projections_spec(lon=lon, lat=lat, request_id=request_id)
        )

    @traced(name="coordinate_systems_upload_site_localization", run_type="skyapi")
    def upload_site_localization(
        self,
        id: str,
        *,
        ccrs_file: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Upload a localization file to a site.

        Args:
            id (str): The site identifier.
            ccrs_file (Optional[str]): Contents of the localization file.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The updated site.
        """
        return self.request_spec(
            self._upload_site_localization_spec(
                id, ccrs_file=ccrs_file, request_id=request_id
            )
        )

    @traced(name="coordinate_systems_upload_site_localization", run_type="skyapi")
    async def upload_site_localization_async(
        self,
        id: str,
        *,
        ccrs_file: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously upload a localization file to a site."""
        return await self.request_spec_async(
            self._upload_site_localization_spec(
                id, ccrs_file=ccrs_file, request_id=request_id
            )
        )

    def _create_ccrs_localization_spec(
        self,
        *,
        version: Optional[str],
        file: Optional[str],
        units: Optional[str],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/ccrs/localization"),
            params={"version": version},
            json={"file": file, "units": units},
            security=False,
            request_id=request_id,
        )

    def _list_geoids_spec(
        self,
        *,
        lon: Optional[float],
        lat: Optional[float],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/geoids"),
            params={"lon": lon, "lat": lat},
            security=False,
            request_id=request_id,
        )

    def _retrieve_geoid_height_spec(
        self,
        id: str,
        *,
        lat: Optional[float],
        lon: Optional[float],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/geoids/{id}/height").format(id=id),
            params={"lat": lat, "lon": lon},
            security=False,
            request_id=request_id,
        )

    def _list_projections_spec(
        self,
        *,
        lon: Optional[float],
        lat: Optional[float],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/projections"),
            params={"lon": lon, "lat": lat},
            security=False,
            request_id=request_id,
        )

    def _upload_site_localization_spec(
        self,
        id: str,
        *,
        ccrs_file: Optional[str],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/sites/{id}").format(id=id),
            json={"ccrsFile": ccrs_file},
            request_id=request_id,
        )
