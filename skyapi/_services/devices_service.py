from typing import Any, Optional

from .._utils import Endpoint, RequestSpec
from ..tracing import traced
from ._base_service import BaseService


class DevicesService(BaseService):
    """Service for edge devices and demo IoT feeds. These calls are public."""

    @traced(name="devices_retrieve_release", run_type="skyapi")
    def retrieve_release(self, uuid: str, *, request_id: Optional[str] = None) -> Any:
        """Retrieve the software release installed on an edge device.

        Args:
            uuid (str): The device identifier.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The device release.
        """
        return self.request_spec(
            self._retrieve_release_spec(uuid, request_id=request_id)
        )

    @traced(name="devices_retrieve_release", run_type="skyapi")
    async def retrieve_release_async(
        self, uuid: str, *, request_id: Optional[str] = None
    ) -> Any:
        """Asynchronously retrieve the software release of an edge device."""
        return await self.request_spec_async(
            self._retrieve_release_spec(uuid, request_id=request_id)
        )

    @traced(name="devices_retrieve_demo_iot_data", run_type="skyapi")
    def retrieve_demo_iot_data(
        self,
        device_id: str,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Retrieve readings of a demo IoT device over a time window.

        Args:
            device_id (str): The device identifier.
            start (Optional[str]): Start of the window.
            end (Optional[str]): End of the window.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The device readings.
        """
        return self.request_spec(
            self._retrieve_demo_iot_data_spec(
                device_id, start=start, end=end, request_id=request_id
            )
        )

    @traced(name="devices_retrieve_demo_iot_data", run_type="skyapi")
    async def retrieve_demo_iot_data_async(
        self,
        device_id: str,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        return await self.request_spec_async(
            self._retrieve_demo_iot_data_spec(
                device_id, start=start, end=end, request_id=request_id
            )
        )

    def _retrieve_release_spec(
        self, uuid: str, *, request_id: Optional[str]
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/edge1/{uuid}/version").format(uuid=uuid),
            security=False,
            request_id=request_id,
        )

    def _retrieve_demo_iot_data_spec(
        self,
        device_id: str,
        *,
        start: Optional[str],
        end: Optional[str],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/demos/teck/iot/{deviceId}").format(deviceId=device_id),
            params={"start": start, "end": end},
            security=False,
            request_id=request_id,
        )
