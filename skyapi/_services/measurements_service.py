from typing import Any, Dict, List, Optional

from .._utils import Endpoint, RequestSpec
from ..tracing import traced
from ._base_service import BaseService


class MeasurementsService(BaseService):
    """Service for volume, elevation and progress measurements on surveyed surfaces.

    Measurements run asynchronously on the server. The create calls return a
    measurement identifier and `retrieve_result` polls for the outcome, unless
    a `callback` URL is given to be notified when it completes.
    """

    @traced(name="measurements_measure_surface_elevation", run_type="skyapi")
    def measure_surface_elevation(
        self,
        *,
        compact: Optional[bool] = None,
        surface_id: Optional[str] = None,
        surface_type: Optional[str] = None,
        level: Optional[float] = None,
        feature: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Measure the elevation of a surface along a GeoJSON feature.

        Args:
            compact (Optional[bool]): Return a compact elevation profile.
            surface_id (Optional[str]): The surface identifier.
            surface_type (Optional[str]): The surface type.
            level (Optional[float]): Reference elevation.
            feature (Optional[Dict[str, Any]]): GeoJSON feature to sample.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The elevations.
        """
        spec = self._measure_surface_elevation_spec(
            compact=compact,
            surface_id=surface_id,
            surface_type=surface_type,
            level=level,
            feature=feature,
            request_id=request_id,
        )
        return self.request_spec(spec)

    @traced(name="measurements_measure_surface_elevation", run_type="skyapi")
    async def measure_surface_elevation_async(
        self,
        *,
        compact: Optional[bool] = None,
        surface_id: Optional[str] = None,
        surface_type: Optional[str] = None,
        level: Optional[float] = None,
        feature: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously measure the elevation of a surface."""
        spec = self._measure_surface_elevation_spec(
            compact=compact,
            surface_id=surface_id,
            surface_type=surface_type,
            level=level,
            feature=feature,
            request_id=request_id,
        )
        return await self.request_spec_async(spec)

    @traced(name="measurements_measure_progress", run_type="skyapi")
    def measure_progress(
        self,
        *,
        id: Optional[str] = None,
        initial_surface: Optional[Dict[str, Any]] = None,
        final_surface: Optional[Dict[str, Any]] = None,
        processing_jobs: Optional[List[str]] = None,
        level: Optional[float] = None,
        bounds: Optional[Dict[str, Any]] = None,
        change_threshold: Optional[float] = None,
        callback: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Measure the progress between two surfaces or across processing jobs.

        Args:
            id (Optional[str]): Identifier of the measurement.
            initial_surface (Optional[Dict[str, Any]]): The surface before the works.
            final_surface (Optional[Dict[str, Any]]): The surface after the works.
            processing_jobs (Optional[List[str]]): Processing jobs to compare in order.
            level (Optional[float]): Reference elevation.
            bounds (Optional[Dict[str, Any]]): GeoJSON area to measure.
            change_threshold (Optional[float]): Minimum elevation change to count.
            callback (Optional[str]): URL called when the measurement completes.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The measurement, or its identifier when it runs in the background.

        Examples:
            ```python
            from skyapi import SkyApi

            sdk = SkyApi()

            measurement = sdk.measurements.measure_progress(
                processing_jobs=["b7f1...", "c2a9..."], change_threshold=0.1
            )
            ```
        """
        spec = self._measure_progress_spec(
            id=id,
            initial_surface=initial_surface,
            final_surface=final_surface,
            processing_jobs=processing_jobs,
            level=level,
            bounds=bounds,
            change_threshold=change_threshold,
            callback=callback,
            request_id=request_id,
        )
        return self.request_spec(spec)

    @traced(name="measurements_measure_progress", run_type="skyapi")
    async def measure_progress_async(
        self,
        *,
        id: Optional[str] = None,
        initial_surface: Optional[Dict[str, Any]] = None,
        final_surface: Optional[Dict[str, Any]] = None,
        processing_jobs: Optional[List[str]] = None,
        level: Optional[float] = None,
        bounds: Optional[Dict[str, Any]] = None,
        change_threshold: Optional[float] = None,
        callback: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously measure the progress between two surfaces."""
        spec = self._measure_progress_spec(
            id=id,
            initial_surface=initial_surface,
            final_surface=final_surface,
            processing_jobs=processing_jobs,
            level=level,
            bounds=bounds,
            change_threshold=change_threshold,
            callback=callback,
            request_id=request_id,
        )
        return await self.request_spec_async(spec)

    @traced(name="measurements_retrieve_result", run_type="skyapi")
    def retrieve_result(
        self, type: str, id: str, *, request_id: Optional[str] = None
    ) -> Any:
        """Retrieve the result of a measurement.

        Args:
            type (str): The measurement type, such as `progress` or `surface`.
            id (str): The measurement identifier.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The measurement result.
        """
        return self.request_spec(
            self._retrieve_result_spec(type, id, request_id=request_id)
        )

    @traced(name="measurements_retrieve_result", run_type="skyapi")
    async def retrieve_result_async(
        self, type: str, id: str, *, request_id: Optional[str] = None
    ) -> Any:
        return await self.request_spec_async(
            self._retrieve_result_spec(type, id, request_id=request_id)
        )

    @traced(name="measurements_measure_aggregate_volume", run_type="skyapi")
    def measure_aggregate_volume(
        self,
        type: str,
        *,
        dryrun: Optional[bool] = None,
        refresh: Optional[bool] = None,
        surface_id: Optional[str] = None,
        surface_type: Optional[str] = None,
        surfaces: Optional[List[Dict[str, Any]]] = None,
        level: Optional[float] = None,
        feature: Optional[Dict[str, Any]] = None,
        base_plane: Optional[Dict[str, Any]] = None,
        change_threshold: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Measure the volume of stockpiles or aggregates on a surface.

        Args:
            type (str): The aggregation type.
            dryrun (Optional[bool]): Validate the request without measuring.
            refresh (Optional[bool]): Ignore any cached result.
            surface_id (Optional[str]): The surface identifier.
            surface_type (Optional[str]): The surface type.
            surfaces (Optional[List[Dict[str, Any]]]): Surfaces to measure.
            level (Optional[float]): Reference elevation.
            feature (Optional[Dict[str, Any]]): GeoJSON area to measure.
            base_plane (Optional[Dict[str, Any]]): Base plane the volume sits on.
            change_threshold (Optional[float]): Minimum elevation change to count.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The volumes.
        """
        spec = self._measure_aggregate_volume_spec(
            type,
            dryrun=dryrun,
            refresh=refresh,
            surface_id=surface_id,
            surface_type=surface_type,
            surfaces=surfaces,
            level=level,
            feature=feature,
            base_plane=base_plane,
            change_threshold=change_threshold,
            request_id=request_id,
        )
        return self.request_spec(spec)

    @traced(name="measurements_measure_aggregate_volume", run_type="skyapi")
    async def measure_aggregate_volume_async(
        self,
        type: str,
        *,
        dryrun: Optional[bool] = None,
        refresh: Optional[bool] = None,
        surface_id: Optional[str] = None,
        surface_type: Optional[str] = None,
        surfaces: Optional[List[Dict[str, Any]]] = None,
        level: Optional[float] = None,
        feature: Optional[Dict[str, Any]] = None,
        base_plane: Optional[Dict[str, Any]] = None,
        change_threshold: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously measure the volume of stockpiles or aggregates."""
        spec = self._measure_aggregate_volume_spec(
            type,
            dryrun=dryrun,
            refresh=refresh,
            surface_id=surface_id,
            surface_type=surface_type,
            surfaces=surfaces,
            level=level,
            feature=feature,
            base_plane=base_plane,
            change_threshold=change_threshold,
            request_id=request_id,
        )
        return await self.request_spec_async(spec)

    @traced(name="measurements_measure_surface", run_type="skyapi")
    def measure_surface(
        self,
        *,
        refresh: Optional[bool] = None,
        surfaces: Optional[List[Dict[str, Any]]] = None,
        level: Optional[float] = None,
        base_plane: Optional[Dict[str, Any]] = None,
        feature: Optional[Dict[str, Any]] = None,
        callback: Optional[str] = None,
        batch: Optional[bool] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Measure cut and fill volumes between surfaces.

        Args:
            refresh (Optional[bool]): Ignore any cached result.
            surfaces (Optional[List[Dict[str, Any]]]): Surfaces to compare.
            level (Optional[float]): Reference elevation.
            base_plane (Optional[Dict[str, Any]]): Base plane of the measurement.
            feature (Optional[Dict[str, Any]]): GeoJSON area to measure.
            callback (Optional[str]): URL called when the measurement completes.
            batch (Optional[bool]): Measure each feature of a collection separately.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The volumes, or the measurement identifier when it runs in the background.
        """
        spec = self._measure_surface_spec(
            refresh=refresh,
            surfaces=surfaces,
            level=level,
            base_plane=base_plane,
            feature=feature,
            callback=callback,
            batch=batch,
            request_id=request_id,
        )
        return self.request_spec(spec)

    @traced(name="measurements_measure_surface", run_type="skyapi")
    async def measure_surface_async(
        self,
        *,
        refresh: Optional[bool] = None,
        surfaces: Optional[List[Dict[str, Any]]] = None,
        level: Optional[float] = None,
        base_plane: Optional[Dict[str, Any]] = None,
        feature: Optional[Dict[str, Any]] = None,
        callback: Optional[str] = None,
        batch: Optional[bool] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously measure cut and fill volumes between surfaces."""
        spec = self._measure_surface_spec(
            refresh=refresh,
            surfaces=surfaces,
            level=level,
            base_plane=base_plane,
            feature=feature,
            callback=callback,
            batch=batch,
            request_id=request_id,
        )
        return await self.request_spec_async(spec)

    def _measure_surface_elevation_spec(
        self,
        *,
        compact: Optional[bool],
        surface_id: Optional[str],
        surface_type: Optional[str],
        level: Optional[float],
        feature: Optional[Dict[str, Any]],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/measure/elevations"),
            params={"compact": compact},
            json={
                "surfaceId": surface_id,
                "surfaceType": surface_type,
                "level": level,
                "feature": feature,
            },
            request_id=request_id,
        )

    def _measure_progress_spec(
        self,
        *,
        id: Optional[str],
        initial_surface: Optional[Dict[str, Any]],
        final_surface: Optional[Dict[str, Any]],
        processing_jobs: Optional[List[str]],
        level: Optional[float],
        bounds: Optional[Dict[str, Any]],
        change_threshold: Optional[float],
        callback: Optional[str],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/measure/progress"),
            json={
                "id": id,
                "initialSurface": initial_surface,
                "finalSurface": final_surface,
                "processingJobs": processing_jobs,
                "level": level,
                "bounds": bounds,
                "changeThreshold": change_threshold,
                "callback": callback,
            },
            request_id=request_id,
        )

    def _retrieve_result_spec(
        self, type: str, id: str, *, request_id: Optional[str]
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/measure/{type}/{id}").format(type=type, id=id),
            request_id=request_id,
        )

    def _measure_aggregate_volume_spec(
        self,
        type: str,
        *,
        dryrun: Optional[bool],
        refresh: Optional[bool],
        surface_id: Optional[str],
        surface_type: Optional[str],
        surfaces: Optional[List[Dict[str, Any]]],
        level: Optional[float],
        feature: Optional[Dict[str, Any]],
        base_plane: Optional[Dict[str, Any]],
        change_threshold: Optional[float],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/measure/aggregate/{type}").format(type=type),
            params={"dryrun": dryrun, "refresh": refresh},
            json={
                "surfaceId": surface_id,
                "surfaceType": surface_type,
                "surfaces": surfaces,
                "level": level,
                "feature": feature,
                "basePlane": base_plane,
                "changeThreshold": change_threshold,
            },
            request_id=request_id,
        )

    def _measure_surface_spec(
        self,
        *,
        refresh: Optional[bool],
        surfaces: Optional[List[Dict[str, Any]]],
        level: Optional[float],
        base_plane: Optional[Dict[str, Any]],
        feature: Optional[Dict[str, Any]],
        callback: Optional[str],
        batch: Optional[bool],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/measure/surface"),
            params={"refresh": refresh},
            json={
                "surfaces": surfaces,
                "level": level,
                "basePlane": base_plane,
                "feature": feature,
                "callback": callback,
                "batch": batch,
            },
            request_id=request_id,
        )
