from typing import Any, Optional

from .._utils import Endpoint, RequestSpec
from ..tracing import traced
from ._base_service import BaseService


class PrecogJobsService(BaseService):
    """Service for the control point marking jobs of the Precog UI.

    A Precog job lists the photos in which the ground control points of a
    processing job must be marked. Marks are placed, moved or removed one
    control point and image at a time. These calls are public.
    """

    @traced(name="precog_jobs_list", run_type="skyapi")
    def list(
        self,
        *,
        count: Optional[int] = None,
        next_process_uuid: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """List the Precog jobs waiting for marks.

        Args:
            count (Optional[int]): Maximum number of jobs to return.
            next_process_uuid (Optional[str]): Pagination cursor, the processing job
                to start the page from.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The Precog jobs.
        """
        return self.request_spec(
            self._list_spec(
                count=count, next_process_uuid=next_process_uuid, request_id=request_id
            )
        )

    @traced(name="precog_jobs_list", run_type="skyapi")
    async def list_async(
        self,
        *,
        count: Optional[int] = None,
        next_process_uuid: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously list the Precog jobs waiting for marks."""
        return await self.request_spec_async(
            self._list_spec(
                count=count, next_process_uuid=next_process_uuid, request_id=request_id
            )
        )

    @traced(name="precog_jobs_retrieve", run_type="skyapi")
    def retrieve(self, uuid: str, *, request_id: Optional[str] = None) -> Any:
        """Retrieve a Precog job with its control points and images."""
        return self.request_spec(self._retrieve_spec(uuid, request_id=request_id))

    @traced(name="precog_jobs_retrieve", run_type="skyapi")
    async def retrieve_async(
        self, uuid: str, *, request_id: Optional[str] = None
    ) -> Any:
        return await self.request_spec_async(
            self._retrieve_spec(uuid, request_id=request_id)
        )

    @traced(name="precog_jobs_create", run_type="skyapi")
    def create(self, uuid: str, *, request_id: Optional[str] = None) -> Any:
        """Create the Precog job of a processing job.

        Args:
            uuid (str): The processing job identifier.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The created Precog job.
        """
        return self.request_spec(self._create_spec(uuid, request_id=request_id))

    @traced(name="precog_jobs_create", run_type="skyapi")
    async def create_async(
        self, uuid: str, *, request_id: Optional[str] = None
    ) -> Any:
        """Asynchronously create the Precog job of a processing job."""
        return await self.request_spec_async(
            self._create_spec(uuid, request_id=request_id)
        )

    @traced(name="precog_jobs_delete_marks", run_type="skyapi")
    def delete_marks(
        self,
        uuid: str,
        id: str,
        *,
        cp_id: Optional[str] = None,
        image_id: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Remove the mark of a control point from an image.

        Args:
            uuid (str): The Precog job identifier.
            id (str): The marks identifier.
            cp_id (Optional[str]): The control point identifier.
            image_id (Optional[str]): The image identifier.
            request_id (Optional[str]): Correlation id for the trace logs.
        """
        return self.request_spec(
            self._delete_marks_spec(
                uuid, id, cp_id=cp_id, image_id=image_id, request_id=request_id
            )
        )

    @traced(name="precog_jobs_delete_marks", run_type="skyapi")
    async def delete_marks_async(
        self,
        uuid: str,
        id: str,
        *,
        cp_id: Optional[str] = None,
        image_id: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously remove the mark of a control point from an image."""
        return await self.request_spec_async(
            self._delete_marks_spec(
                uuid, id, cp_id=cp_id, image_id=image_id, request_id=request_id
            )
        )

    @traced(name="precog_jobs_update_marks", run_type="skyapi")
    def update_marks(
        self,
        uuid: str,
        id: str,
        *,
        cp_id: Optional[str] = None,
        image_id: Optional[str] = None,
        x: Optional[float] = None,
        y: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Place or move the mark of a control point on an image.

        Args:
            uuid (str): The Precog job identifier.
            id (str): The marks identifier.
            cp_id (Optional[str]): The control point identifier.
            image_id (Optional[str]): The image identifier.
            x (Optional[float]): Horizontal pixel position of the mark.
            y (Optional[float]): Vertical pixel position of the mark.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The updated marks.
        """
        spec = self._update_marks_spec(
            uuid, id, cp_id=cp_id, image_id=image_id, x=x, y=y, request_id=request_id
        )
        return self.request_spec(spec)

    @traced(name="precog_jobs_update_marks", run_type="skyapi")
    async def update_marks_async(
        self,
        uuid: str,
        id: str,
        *,
        cp_id: Optional[str] = None,
        image_id: Optional[str] = None,
        x: Optional[float] = None,
        y: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously place or move the mark of a control point."""
        spec = self._update_marks_spec(
            uuid, id, cp_id=cp_id, image_id=image_id, x=x, y=y, request_id=request_id
        )
        return await self.request_spec_async(spec)

    def _list_spec(
        self,
        *,
        count: Optional[int],
        next_process_uuid: Optional[str],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/precog-jobs"),
            params={"count": count, "next-process_uuid": next_process_uuid},
            security=False,
            request_id=request_id,
        )

    def _retrieve_spec(self, uuid: str, *, request_id: Optional[str]) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/precog-jobs/{uuid}").format(uuid=uuid),
            security=False,
            request_id=request_id,
        )

    def _create_spec(self, uuid: str, *, request_id: Optional[str]) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/precog-jobs/{uuid}/process").format(uuid=uuid),
            security=False,
            request_id=request_id,
        )

    def _delete_marks_spec(
        self,
        uuid: str,
        id: str,
        *,
        cp_id: Optional[str],
        image_id: Optional[str],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="DELETE",
            endpoint=Endpoint("/precog-jobs/{uuid}/marks/{id}").format(uuid=uuid, id=id),
            json={"cpId": cp_id, "imageId": image_id},
            security=False,
            request_id=request_id,
        )

    def _update_marks_spec(
        self,
        uuid: str,
        id: str,
        *,
        cp_id: Optional[str],
        image_id: Optional[str],
        x: Optional[float],
        y: Optional[float],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="PATCH",
            endpoint=Endpoint("/precog-jobs/{uuid}/marks/{id}").format(uuid=uuid, id=id),
            json={"cpId": cp_id, "imageId": image_id, "x": x, "y": y},
            security=False,
            request_id=request_id,
        )
