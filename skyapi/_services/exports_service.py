from typing import Any, Dict, Optional

from .._utils import Endpoint, RequestSpec
from ..tracing import traced
from ._base_service import BaseService


class ExportsService(BaseService):
    """Service for export jobs.

    An export job converts the outputs of a processing job into a format
    consumed by a third-party application.
    """

    @traced(name="exports_create", run_type="skyapi")
    def create(
        self,
        *,
        puuid: Optional[str] = None,
        duuid: Optional[str] = None,
        type: Optional[str] = None,
        dryrun: Optional[bool] = None,
        payload: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Start an export job.

        Args:
            puuid (Optional[str]): The processing job identifier.
            duuid (Optional[str]): The dataset identifier.
            type (Optional[str]): The export type.
            dryrun (Optional[bool]): Create the export entry without starting the job.
            payload (Optional[Dict[str, Any]]): Export type specific options.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The created export job.

        Examples:
            ```python
            from skyapi import SkyApi

            sdk = SkyApi()

            export = sdk.exports.create(puuid="b7f1...", type="landxml")
            ```
        """
        spec = self._create_spec(
            puuid=puuid,
            duuid=duuid,
            type=type,
            dryrun=dryrun,
            payload=payload,
            request_id=request_id,
        )
        return self.request_spec(spec)

    @traced(name="exports_create", run_type="skyapi")
    async def create_async(
        self,
        *,
        puuid: Optional[str] = None,
        duuid: Optional[str] = None,
        type: Optional[str] = None,
        dryrun: Optional[bool] = None,
        payload: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously start an export job."""
        spec = self._create_spec(
            puuid=puuid,
            duuid=duuid,
            type=type,
            dryrun=dryrun,
            payload=payload,
            request_id=request_id,
        )
        return await self.request_spec_async(spec)

    @traced(name="exports_retrieve", run_type="skyapi")
    def retrieve(self, id: str, *, request_id: Optional[str] = None) -> Any:
        """Retrieve an export job and its status."""
        return self.request_spec(self._retrieve_spec(id, request_id=request_id))

    @traced(name="exports_retrieve", run_type="skyapi")
    async def retrieve_async(
        self, id: str, *, request_id: Optional[str] = None
    ) -> Any:
        return await self.request_spec_async(
            self._retrieve_spec(id, request_id=request_id)
        )

    def _create_spec(
        self,
        *,
        puuid: Optional[str],
        duuid: Optional[str],
        type: Optional[str],
        dryrun: Optional[bool],
        payload: Optional[Dict[str, Any]],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/exports"),
            json={
                "puuid": puuid,
                "duuid": duuid,
                "type": type,
                "dryrun": dryrun,
                "payload": payload,
            },
            request_id=request_id,
        )

    def _retrieve_spec(self, id: str, *, request_id: Optional[str]) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/exports/{id}").format(id=id),
            request_id=request_id,
        )
