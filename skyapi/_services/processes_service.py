from typing import Any, List, Optional, Union

from .._utils import Endpoint, RequestSpec
from ..tracing import traced
from ._base_service import BaseService


class ProcessesService(BaseService):
    """Service for inspecting and resuming SkyAPI processing jobs.

    Processing jobs turn the photos or the point cloud of a dataset into maps,
    surfaces and point clouds. They are created from a dataset with
    `DatasetsService.create_processing_job`.
    """

    @traced(name="processes_retrieve", run_type="skyapi")
    def retrieve(self, uuid: str, *, request_id: Optional[str] = None) -> Any:
        """Retrieve a processing job and its status.

        Args:
            uuid (str): The processing job identifier.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The processing job.

        Examples:
            ```python
            from skyapi import SkyApi

            sdk = SkyApi()

            job = sdk.processes.retrieve("b7f1c2d4-2f0e-4e8b-a0c1-7d2d1f0e9a33")
            print(job["status"])
            ```
        """
        return self.request_spec(self._retrieve_spec(uuid, request_id=request_id))

    @traced(name="processes_retrieve", run_type="skyapi")
    async def retrieve_async(
        self, uuid: str, *, request_id: Optional[str] = None
    ) -> Any:
        """Asynchronously retrieve a processing job and its status.

        Examples:
            ```python
            import asyncio

            from skyapi import SkyApi

            sdk = SkyApi()

            async def main():
                job = await sdk.processes.retrieve_async("b7f1c2d4-...")
                print(job)

            asyncio.run(main())
            ```
        """
        return await self.request_spec_async(
            self._retrieve_spec(uuid, request_id=request_id)
        )

    @traced(name="processes_retrieve_results", run_type="skyapi")
    def retrieve_results(
        self,
        uuid: str,
        *,
        layers: Optional[Union[str, List[str]]] = None,
        files: Optional[Union[str, List[str]]] = None,
        export_types: Optional[Union[str, List[str]]] = None,
        expiration: Optional[int] = None,
        layer: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Retrieve the outputs of a processing job.

        List arguments are sent as repeated query parameters.

        Args:
            uuid (str): The processing job identifier.
            layers (Optional[Union[str, List[str]]]): Map layers to return.
            files (Optional[Union[str, List[str]]]): Output files to return.
            export_types (Optional[Union[str, List[str]]]): Export formats to return.
            expiration (Optional[int]): Lifetime of the signed URLs in seconds.
            layer (Optional[str]): A single layer to return.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The processing results.
        """
        spec = self._retrieve_results_spec(
            uuid,
            layers=layers,
            files=files,
            export_types=export_types,
            expiration=expiration,
            layer=layer,
            request_id=request_id,
        )
        return self.request_spec(spec)

    @traced(name="processes_retrieve_results", run_type="skyapi")
    async def retrieve_results_async(
        self,
        uuid: str,
        *,
        layers: Optional[Union[str, List[str]]] = None,
        files: Optional[Union[str, List[str]]] = None,
        export_types: Optional[Union[str, List[str]]] = None,
        expiration: Optional[int] = None,
        layer: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously retrieve the outputs of a processing job."""
        spec = self._retrieve_results_spec(
            uuid,
            layers=layers,
            files=files,
            export_types=export_types,
            expiration=expiration,
            layer=layer,
            request_id=request_id,
        )
        return await self.request_spec_async(spec)

    @traced(name="processes_resume", run_type="skyapi", hide_input=True)
    def resume(
        self,
        uuid: str,
        *,
        apikey: Optional[str] = None,
        jump_to: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Resume a paused processing job.

        This call is authorized by `apikey`, not by the bearer token.

        Args:
            uuid (str): The processing job identifier.
            apikey (Optional[str]): The pipeline API key.
            jump_to (Optional[str]): The pipeline step to resume from.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The resumed processing job.
        """
        return self.request_spec(
            self._resume_spec(
                uuid, apikey=apikey, jump_to=jump_to, request_id=request_id
            )
        )

    @traced(name="processes_resume", run_type="skyapi", hide_input=True)
    async def resume_async(
        self,
        uuid: str,
        *,
        apikey: Optional[str] = None,
        jump_to: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously resume a paused processing job."""
        return await self.request_spec_async(
            self._resume_spec(
                uuid, apikey=apikey, jump_to=jump_to, request_id=request_id
            )
        )

    def _retrieve_spec(self, uuid: str, *, request_id: Optional[str]) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/processes/{uuid}").format(uuid=uuid),
            request_id=request_id,
        )

    def _retrieve_results_spec(
        self,
        uuid: str,
        *,
        layers: Optional[Union[str, List[str]]],
        files: Optional[Union[str, List[str]]],
        export_types: Optional[Union[str, List[str]]],
        expiration: Optional[int],
        layer: Optional[str],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/processes/{uuid}/result").format(uuid=uuid),
            params={
                "layers": layers,
                "files": files,
                "exportTypes": export_types,
                "expiration": expiration,
                "layer": layer,
            },
            request_id=request_id,
        )

    def _resume_spec(
        self,
        uuid: str,
        *,
        apikey: Optional[str],
        jump_to: Optional[str],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/processes/{uuid}/resume").format(uuid=uuid),
            json={"apikey": apikey, "jumpTo": jump_to},
            security=False,
            request_id=request_id,
        )
