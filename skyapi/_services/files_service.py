from typing import Any, Optional

from .._utils import Endpoint, RequestSpec
from ..tracing import traced
from ._base_service import BaseService


class FilesService(BaseService):
    """Service for file manager credentials and site design files."""

    @traced(
        name="files_create_file_manager_credentials",
        run_type="skyapi",
        hide_output=True,
    )
    def create_file_manager_credentials(
        self,
        *,
        site: Optional[str] = None,
        dataset: Optional[str] = None,
        processing: Optional[str] = None,
        export: Optional[str] = None,
        overlay: Optional[str] = None,
        expiration: Optional[int] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Create storage credentials scoped to one resource.

        Exactly one of the resource identifiers is expected.

        Args:
            site (Optional[str]): The site identifier.
            dataset (Optional[str]): The dataset identifier.
            processing (Optional[str]): The processing job identifier.
            export (Optional[str]): The export job identifier.
            overlay (Optional[str]): The overlay identifier.
            expiration (Optional[int]): Credentials lifetime in seconds.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The credentials.

        Examples:
            ```python
            from skyapi import SkyApi

            sdk = SkyApi()

            credentials = sdk.files.create_file_manager_credentials(
                dataset="6a0d4bb4-0a3b-4cf5-9f1c-2f7d0c8f1d11", expiration=3600
            )
            ```
        """
        spec = self._create_file_manager_credentials_spec(
            site=site,
            dataset=dataset,
            processing=processing,
            export=export,
            overlay=overlay,
            expiration=expiration,
            request_id=request_id,
        )
        return self.request_spec(spec)

    @traced(
        name="files_create_file_manager_credentials",
        run_type="skyapi",
        hide_output=True,
    )
    async def create_file_manager_credentials_async(
        self,
        *,
        site: Optional[str] = None,
        dataset: Optional[str] = None,
        processing: Optional[str] = None,
        export: Optional[str] = None,
        overlay: Optional[str] = None,
        expiration: Optional[int] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously create storage credentials scoped to one resource."""
        spec = self._create_file_manager_credentials_spec(
            site=site,
            dataset=dataset,
            processing=processing,
            export=export,
            overlay=overlay,
            expiration=expiration,
            request_id=request_id,
        )
        return await self.request_spec_async(spec)

    @traced(name="files_retrieve_design_files", run_type="skyapi")
    def retrieve_design_files(
        self, uuid: str, *, request_id: Optional[str] = None
    ) -> Any:
        """Retrieve the design files of a site.

        Args:
            uuid (str): The site identifier.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The design files.
        """
        return self.request_spec(
            self._retrieve_design_files_spec(uuid, request_id=request_id)
        )

    @traced(name="files_retrieve_design_files", run_type="skyapi")
    async def retrieve_design_files_async(
        self, uuid: str, *, request_id: Optional[str] = None
    ) -> Any:
        return await self.request_spec_async(
            self._retrieve_design_files_spec(uuid, request_id=request_id)
        )

    def _create_file_manager_credentials_spec(
        self,
        *,
        site: Optional[str],
        dataset: Optional[str],
        processing: Optional[str],
        export: Optional[str],
        overlay: Optional[str],
        expiration: Optional[int],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/credentials/filemanager"),
            json={
                "site": site,
                "dataset": dataset,
                "processing": processing,
                "export": export,
                "overlay": overlay,
                "expiration": expiration,
            },
            request_id=request_id,
        )

    def _retrieve_design_files_spec(
        self, uuid: str, *, request_id: Optional[str]
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/designfiles/{uuid}").format(uuid=uuid),
            request_id=request_id,
        )
