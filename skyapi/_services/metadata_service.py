from typing import Any, Optional

from .._utils import Endpoint, RequestSpec
from ..tracing import traced
from ._base_service import BaseService


class MetadataService(BaseService):
    """Service for reading and editing the metadata of datasets and processing jobs.

    Metadata is addressed by a dotted `path` inside the metadata document.
    """

    @traced(name="metadata_retrieve", run_type="skyapi")
    def retrieve(
        self,
        *,
        duuid: Optional[str] = None,
        puuid: Optional[str] = None,
        path: Optional[str] = None,
        resolve: Optional[bool] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Retrieve metadata of a dataset or a processing job.

        Args:
            duuid (Optional[str]): The dataset identifier.
            puuid (Optional[str]): The processing job identifier.
            path (Optional[str]): Dotted path of the value to return.
            resolve (Optional[bool]): Resolve references to other documents.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The metadata.

        Examples:
            ```python
            from skyapi import SkyApi

            sdk = SkyApi()

            gsd = sdk.metadata.retrieve(puuid="b7f1...", path="quality.gsd")
            ```
        """
        spec = self._retrieve_spec(
            duuid=duuid,
            puuid=puuid,
            path=path,
            resolve=resolve,
            request_id=request_id,
        )
        return self.request_spec(spec)

    @traced(name="metadata_retrieve", run_type="skyapi")
    async def retrieve_async(
        self,
        *,
        duuid: Optional[str] = None,
        puuid: Optional[str] = None,
        path: Optional[str] = None,
        resolve: Optional[bool] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously retrieve metadata of a dataset or a processing job."""
        spec = self._retrieve_spec(
            duuid=duuid,
            puuid=puuid,
            path=path,
            resolve=resolve,
            request_id=request_id,
        )
        return await self.request_spec_async(spec)

    @traced(name="metadata_update", run_type="skyapi")
    def update(
        self,
        *,
        puuid: Optional[str] = None,
        path: Optional[str] = None,
        action: Optional[str] = None,
        value: Any = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Edit the metadata of a processing job.

        Args:
            puuid (Optional[str]): The processing job identifier.
            path (Optional[str]): Dotted path of the value to edit.
            action (Optional[str]): The edit to apply, such as `set` or `unset`.
            value (Any): The new value.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The updated metadata.
        """
        spec = self._update_spec(
            puuid=puuid, path=path, action=action, value=value, request_id=request_id
        )
        return self.request_spec(spec)

    @traced(name="metadata_update", run_type="skyapi")
    async def update_async(
        self,
        *,
        puuid: Optional[str] = None,
        path: Optional[str] = None,
        action: Optional[str] = None,
        value: Any = None,
        request_id: Optional[str] = None,
    ) -> Any:
        spec = self._update_spec(
            puuid=puuid, path=path, action=action, value=value, request_id=request_id
        )
        return await self.request_spec_async(spec)

    def _retrieve_spec(
        self,
        *,
        duuid: Optional[str],
        puuid: Optional[str],
        path: Optional[str],
        resolve: Optional[bool],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/metadata"),
            params={"duuid": duuid, "puuid": puuid, "path": path, "resolve": resolve},
            request_id=request_id,
        )

    def _update_spec(
        self,
        *,
        puuid: Optional[str],
        path: Optional[str],
        action: Optional[str],
        value: Any,
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="PATCH",
            endpoint=Endpoint("/metadata"),
            json={"puuid": puuid, "path": path, "action": action, "value": value},
            request_id=request_id,
        )
