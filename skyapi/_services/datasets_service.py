from typing import Any, Dict, Optional

from .._utils import Endpoint, RequestSpec
from ..tracing import redact_inputs, traced
from ._base_service import BaseService


class DatasetsService(BaseService):
    """Service for managing SkyAPI datasets.

    A dataset is a set of raw drone photos or a point cloud uploaded to the
    customer's account. Datasets are the input of processing jobs and
    validations, and own the files produced while they are processed.
    """

    @traced(
        name="datasets_create",
        run_type="skyapi",
        input_processor=redact_inputs("token"),
        hide_output=True,
    )
    def create(
        self,
        *,
        name: Optional[str] = None,
        source_id: Optional[str] = None,
        type: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        duration: Optional[float] = None,
        token: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Create a new dataset in the customer's account.

        Args:
            name (Optional[str]): The dataset name.
            source_id (Optional[str]): The source ID in the app creating the dataset. When
                passed it is used as the name of the storage directory in place of the
                dataset UUID, as long as it does not exist yet.
            type (Optional[str]): The dataset type.
            metadata (Optional[Dict[str, Any]]): Metadata about the dataset.
            duration (Optional[float]): Upload duration in hours.
            token (Optional[str]): User access token.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The created dataset, including its upload credentials.

        Examples:
            ```python
            from skyapi import SkyApi

            sdk = SkyApi()

            dataset = sdk.datasets.create(name="North pit", type="images")
            ```
        """
        spec = self._create_spec(
            name=name,
            source_id=source_id,
            type=type,
            metadata=metadata,
            duration=duration,
            token=token,
            request_id=request_id,
        )
        return self.request_spec(spec)

    @traced(
        name="datasets_create",
        run_type="skyapi",
        input_processor=redact_inputs("token"),
        hide_output=True,
    )
    async def create_async(
        self,
        *,
        name: Optional[str] = None,
        source_id: Optional[str] = None,
        type: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        duration: Optional[float] = None,
        token: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously create a new dataset in the customer's account."""
        spec = self._create_spec(
            name=name,
            source_id=source_id,
            type=type,
            metadata=metadata,
            duration=duration,
            token=token,
            request_id=request_id,
        )
        return await self.request_spec_async(spec)

    @traced(name="datasets_retrieve", run_type="skyapi")
    def retrieve(
        self,
        uuid: str,
        *,
        exif: Optional[bool] = None,
        credentials: Optional[bool] = None,
        duration: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Retrieve a dataset by its identifier.

        Args:
            uuid (str): The dataset identifier.
            exif (Optional[bool]): Fetch additional EXIF information for the raw photos.
            credentials (Optional[bool]): Generate upload credentials.
            duration (Optional[float]): Upload credentials duration in hours.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The dataset.
        """
        spec = self._retrieve_spec(
            uuid,
            exif=exif,
            credentials=credentials,
            duration=duration,
            request_id=request_id,
        )
        return self.request_spec(spec)

    @traced(name="datasets_retrieve", run_type="skyapi")
    async def retrieve_async(
        self,
        uuid: str,
        *,
        exif: Optional[bool] = None,
        credentials: Optional[bool] = None,
        duration: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously retrieve a dataset by its identifier."""
        spec = self._retrieve_spec(
            uuid,
            exif=exif,
            credentials=credentials,
            duration=duration,
            request_id=request_id,
        )
        return await self.request_spec_async(spec)

    @traced(name="datasets_update", run_type="skyapi")
    def update(
        self,
        uuid: str,
        *,
        name: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Rename a dataset.

        Args:
            uuid (str): The dataset identifier.
            name (Optional[str]): The new dataset name.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The updated dataset.
        """
        return self.request_spec(
            self._update_spec(uuid, name=name, request_id=request_id)
        )

    @traced(name="datasets_update", run_type="skyapi")
    async def update_async(
        self,
        uuid: str,
        *,
        name: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously rename a dataset."""
        return await self.request_spec_async(
            self._update_spec(uuid, name=name, request_id=request_id)
        )

    @traced(name="datasets_retrieve_photo", run_type="skyapi")
    def retrieve_photo(
        self, uuid: str, id: str, *, request_id: Optional[str] = None
    ) -> Any:
        """Retrieve the metadata of a raw drone photo.

        Args:
            uuid (str): The dataset identifier.
            id (str): The photo identifier.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The photo metadata.
        """
        return self.request_spec(
            self._retrieve_photo_spec(uuid, id, request_id=request_id)
        )

    @traced(name="datasets_retrieve_photo", run_type="skyapi")
    async def retrieve_photo_async(
        self, uuid: str, id: str, *, request_id: Optional[str] = None
    ) -> Any:
        """Asynchronously retrieve the metadata of a raw drone photo."""
        return await self.request_spec_async(
            self._retrieve_photo_spec(uuid, id, request_id=request_id)
        )

    @traced(name="datasets_list_processing_jobs", run_type="skyapi")
    def list_processing_jobs(
        self, uuid: str, *, request_id: Optional[str] = None
    ) -> Any:
        """List the processing jobs of a dataset.

        Args:
            uuid (str): The dataset identifier.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The processing jobs.
        """
        return self.request_spec(
            self._list_processing_jobs_spec(uuid, request_id=request_id)
        )

    @traced(name="datasets_list_processing_jobs", run_type="skyapi")
    async def list_processing_jobs_async(
        self, uuid: str, *, request_id: Optional[str] = None
    ) -> Any:
        """Asynchronously list the processing jobs of a dataset."""
        return await self.request_spec_async(
            self._list_processing_jobs_spec(uuid, request_id=request_id)
        )

    @traced(
        name="datasets_create_processing_job",
        run_type="skyapi",
        input_processor=redact_inputs(
            "connection_string", "access_token", "refresh_token"
        ),
    )
    def create_processing_job(
        self,
        uuid: str,
        *,
        dryrun: Optional[bool] = None,
        type: Optional[str] = None,
        source_data: Optional[str] = None,
        ccrs: Optional[Dict[str, Any]] = None,
        options: Optional[Dict[str, Any]] = None,
        container_name: Optional[str] = None,
        prefix: Optional[str] = None,
        point_cloud_column_order: Optional[str] = None,
        connection_string: Optional[str] = None,
        resource_owner_id: Optional[str] = None,
        access_token: Optional[str] = None,
        refresh_token: Optional[str] = None,
        sync_type: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        revision: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Start processing the images or the point cloud of a dataset.

        Args:
            uuid (str): The dataset identifier.
            dryrun (Optional[bool]): Create the processing job entry without starting the job.
            type (Optional[str]): Type of process to run.
            source_data (Optional[str]): Type of input images.
            ccrs (Optional[Dict[str, Any]]): The custom coordinate reference system used to
                generate outputs and parse inputs.
            options (Optional[Dict[str, Any]]): Option flags to trigger custom behavior.
            container_name (Optional[str]): Partner storage container to sync back to.
            prefix (Optional[str]): Prefix inside the partner storage container.
            point_cloud_column_order (Optional[str]): Column order of a TXT point cloud.
            connection_string (Optional[str]): Connection string of the repository source,
                only needed for syncing.
            resource_owner_id (Optional[str]): Owner of the synced resource.
            access_token (Optional[str]): Access token of the synced repository.
            refresh_token (Optional[str]): Refresh token of the synced repository.
            sync_type (Optional[str]): Kind of synchronization.
            metadata (Optional[Dict[str, Any]]): Metadata.
            revision (Optional[str]): Pipeline revision to run.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The created processing job.

        Examples:
            ```python
            from skyapi import SkyApi

            sdk = SkyApi()

            job = sdk.datasets.create_processing_job(
                "6a0d4bb4-0a3b-4cf5-9f1c-2f7d0c8f1d11", type="mapping", dryrun=True
            )
            ```
        """
        spec = self._create_processing_job_spec(
            uuid,
            dryrun=dryrun,
            type=type,
            source_data=source_data,
            ccrs=ccrs,
            options=options,
            container_name=container_name,
            prefix=prefix,
            point_cloud_column_order=point_cloud_column_order,
            connection_string=connection_string,
            resource_owner_id=resource_owner_id,
            access_token=access_token,
            refresh_token=refresh_token,
            sync_type=sync_type,
            metadata=metadata,
            revision=revision,
            request_id=request_id,
        )
        return self.request_spec(spec)

    @traced(
        name="datasets_create_processing_job",
        run_type="skyapi",
        input_processor=redact_inputs(
            "connection_string", "access_token", "refresh_token"
        ),
    )
    async def create_processing_job_async(
        self,
        uuid: str,
        *,
        dryrun: Optional[bool] = None,
        type: Optional[str] = None,
        source_data: Optional[str] = None,
        ccrs: Optional[Dict[str, Any]] = None,
        options: Optional[Dict[str, Any]] = None,
        container_name: Optional[str] = None,
        prefix: Optional[str] = None,
        point_cloud_column_order: Optional[str] = None,
        connection_string: Optional[str] = None,
        resource_owner_id: Optional[str] = None,
        access_token: Optional[str] = None,
        refresh_token: Optional[str] = None,
        sync_type: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        revision: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously start processing a dataset."""
        spec = self._create_processing_job_spec(
            uuid,
            dryrun=dryrun,
            type=type,
            source_data=source_data,
            ccrs=ccrs,
            options=options,
            container_name=container_name,
            prefix=prefix,
            point_cloud_column_order=point_cloud_column_order,
            connection_string=connection_string,
            resource_owner_id=resource_owner_id,
            access_token=access_token,
            refresh_token=refresh_token,
            sync_type=sync_type,
            metadata=metadata,
            revision=revision,
            request_id=request_id,
        )
        return await self.request_spec_async(spec)

    @traced(name="datasets_list_validations", run_type="skyapi")
    def list_validations(
        self,
        uuid: str,
        *,
        type: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """List the known validations of a dataset.

        Args:
            uuid (str): The dataset identifier.
            type (Optional[str]): Only return validations of this type.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The validations.
        """
        return self.request_spec(
            self._list_validations_spec(uuid, type=type, request_id=request_id)
        )

    @traced(name="datasets_list_validations", run_type="skyapi")
    async def list_validations_async(
        self,
        uuid: str,
        *,
        type: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously list the known validations of a dataset."""
        return await self.request_spec_async(
            self._list_validations_spec(uuid, type=type, request_id=request_id)
        )

    @traced(name="datasets_create_validations", run_type="skyapi")
    def create_validations(
        self,
        uuid: str,
        *,
        type: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Start validating the images and/or the CCRS of a dataset.

        Args:
            uuid (str): The dataset identifier.
            type (Optional[str]): Type of validation to run.
            data (Optional[Dict[str, Any]]): Validation input such as images or CCRS.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The created validations.
        """
        return self.request_spec(
            self._create_validations_spec(
                uuid, type=type, data=data, request_id=request_id
            )
        )

    @traced(name="datasets_create_validations", run_type="skyapi")
    async def create_validations_async(
        self,
        uuid: str,
        *,
        type: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously start validating a dataset."""
        return await self.request_spec_async(
            self._create_validations_spec(
                uuid, type=type, data=data, request_id=request_id
            )
        )

    @traced(name="datasets_delete_file", run_type="skyapi")
    def delete_file(self, uuid: str, id: str, *, request_id: Optional[str] = None) -> Any:
        """Delete a dataset file.

        The file is backed up with a `.del` suffix before the original is removed.

        Args:
            uuid (str): The dataset identifier.
            id (str): The file identifier.
            request_id (Optional[str]): Correlation id for the trace logs.
        """
        return self.request_spec(
            self._delete_file_spec(uuid, id, request_id=request_id)
        )

    @traced(name="datasets_delete_file", run_type="skyapi")
    async def delete_file_async(
        self, uuid: str, id: str, *, request_id: Optional[str] = None
    ) -> Any:
        """Asynchronously delete a dataset file."""
        return await self.request_spec_async(
            self._delete_file_spec(uuid, id, request_id=request_id)
        )

    @traced(name="datasets_delete_files", run_type="skyapi")
    def delete_files(
        self,
        uuid: str,
        *,
        type: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Delete every dataset file of the given type.

        The files are backed up with a `.del` suffix before the originals are removed.

        Args:
            uuid (str): The dataset identifier.
            type (Optional[str]): The file type.
            request_id (Optional[str]): Correlation id for the trace logs.
        """
        return self.request_spec(
            self._delete_files_spec(uuid, type=type, request_id=request_id)
        )

    @traced(name="datasets_delete_files", run_type="skyapi")
    async def delete_files_async(
        self,
        uuid: str,
        *,
        type: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously delete every dataset file of the given type."""
        return await self.request_spec_async(
            self._delete_files_spec(uuid, type=type, request_id=request_id)
        )

    def _create_spec(
        self,
        *,
        name: Optional[str],
        source_id: Optional[str],
        type: Optional[str],
        metadata: Optional[Dict[str, Any]],
        duration: Optional[float],
        token: Optional[str],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/datasets"),
            params={"token": token},
            json={
                "name": name,
                "sourceId": source_id,
                "type": type,
                "metadata": metadata,
                "duration": duration,
            },
            request_id=request_id,
        )

    def _retrieve_spec(
        self,
        uuid: str,
        *,
        exif: Optional[bool],
        credentials: Optional[bool],
        duration: Optional[float],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/datasets/{uuid}").format(uuid=uuid),
            params={"exif": exif, "credentials": credentials, "duration": duration},
            request_id=request_id,
        )

    def _update_spec(
        self, uuid: str, *, name: Optional[str], request_id: Optional[str]
    ) -> RequestSpec:
        return RequestSpec(
            method="PATCH",
            endpoint=Endpoint("/datasets/{uuid}").format(uuid=uuid),
            json={"name": name},
            request_id=request_id,
        )

    def _retrieve_photo_spec(
        self, uuid: str, id: str, *, request_id: Optional[str]
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/datasets/{uuid}/photos/{id}").format(uuid=uuid, id=id),
            request_id=request_id,
        )

    def _list_processing_jobs_spec(
        self, uuid: str, *, request_id: Optional[str]
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/datasets/{uuid}/processes").format(uuid=uuid),
            request_id=request_id,
        )

    def _create_processing_job_spec(
        self,
        uuid: str,
        *,
        dryrun: Optional[bool],
        type: Optional[str],
        source_data: Optional[str],
        ccrs: Optional[Dict[str, Any]],
        options: Optional[Dict[str, Any]],
        container_name: Optional[str],
        prefix: Optional[str],
        point_cloud_column_order: Optional[str],
        connection_string: Optional[str],
        resource_owner_id: Optional[str],
        access_token: Optional[str],
        refresh_token: Optional[str],
        sync_type: Optional[str],
        metadata: Optional[Dict[str, Any]],
        revision: Optional[str],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/datasets/{uuid}/processes").format(uuid=uuid),
            json={
                "dryrun": dryrun,
                "type": type,
                "sourceData": source_data,
                "ccrs": ccrs,
                "options": options,
                "containerName": container_name,
                "prefix": prefix,
                "pointCloudColumnOrder": point_cloud_column_order,
                "connectionString": connection_string,
                "resourceOwnerId": resource_owner_id,
                "accessToken": access_token,
                "refreshToken": refresh_token,
                "syncType": sync_type,
                "metadata": metadata,
                "revision": revision,
            },
            request_id=request_id,
        )

    def _list_validations_spec(
        self, uuid: str, *, type: Optional[str], request_id: Optional[str]
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/datasets/{uuid}/validations").format(uuid=uuid),
            params={"type": type},
            request_id=request_id,
        )

    def _create_validations_spec(
        self,
        uuid: str,
        *,
        type: Optional[str],
        data: Optional[Dict[str, Any]],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/datasets/{uuid}/validations").format(uuid=uuid),
            json={"type": type, "data": data},
            request_id=request_id,
        )

    def _delete_file_spec(
        self, uuid: str, id: str, *, request_id: Optional[str]
    ) -> RequestSpec:
        return RequestSpec(
            method="DELETE",
            endpoint=Endpoint("/datasets/{uuid}/files/{id}").format(uuid=uuid, id=id),
            request_id=request_id,
        )

    def _delete_files_spec(
        self, uuid: str, *, type: Optional[str], request_id: Optional[str]
    ) -> RequestSpec:
        return RequestSpec(
            method="DELETE",
            endpoint=Endpoint("/datasets/{uuid}/files").format(uuid=uuid),
            params={"type": type},
            request_id=request_id,
        )
