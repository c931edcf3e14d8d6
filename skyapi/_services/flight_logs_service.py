from typing import Any, Optional

from .._utils import Endpoint, RequestSpec
from ..tracing import traced
from ._base_service import BaseService


class FlightLogsService(BaseService):
    """Service for importing drone flight logs from third-party services."""

    @traced(name="flight_logs_create", run_type="skyapi", hide_input=True)
    def create(
        self,
        *,
        service: Optional[str] = None,
        token: Optional[str] = None,
        app: Optional[str] = None,
        file: Optional[str] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        server: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Import a flight log.

        The log is either fetched from a flight log `service` with the given
        account or read from `file`.

        Args:
            service (Optional[str]): The flight log service.
            token (Optional[str]): Access token for the flight log service.
            app (Optional[str]): The application that recorded the log.
            file (Optional[str]): Location of the flight log file.
            user (Optional[str]): Account name on the flight log service.
            password (Optional[str]): Account password, sent as `pass`.
            server (Optional[str]): Server of the flight log service.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The created flight log.
        """
        spec = self._create_spec(
            service=service,
            token=token,
            app=app,
            file=file,
            user=user,
            password=password,
            server=server,
            request_id=request_id,
        )
        return self.request_spec(spec)

    @traced(name="flight_logs_create", run_type="skyapi", hide_input=True)
    async def create_async(
        self,
        *,
        service: Optional[str] = None,
        token: Optional[str] = None,
        app: Optional[str] = None,
        file: Optional[str] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        server: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously import a flight log."""
        spec = self._create_spec(
            service=service,
            token=token,
            app=app,
            file=file,
            user=user,
            password=password,
            server=server,
            request_id=request_id,
        )
        return await self.request_spec_async(spec)

    @traced(name="flight_logs_retrieve", run_type="skyapi")
    def retrieve(self, uuid: str, *, request_id: Optional[str] = None) -> Any:
        """Retrieve an imported flight log.

        Args:
            uuid (str): The flight log identifier.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The flight log.
        """
        return self.request_spec(self._retrieve_spec(uuid, request_id=request_id))

    @traced(name="flight_logs_retrieve", run_type="skyapi")
    async def retrieve_async(
        self, uuid: str, *, request_id: Optional[str] = None
    ) -> Any:
        """Asynchronously retrieve an imported flight log."""
        return await self.request_spec_async(
            self._retrieve_spec(uuid, request_id=request_id)
        )

    def _create_spec(
        self,
        *,
        service: Optional[str],
        token: Optional[str],
        app: Optional[str],
        file: Optional[str],
        user: Optional[str],
        password: Optional[str],
        server: Optional[str],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/flightlogs"),
            json={
                "service": service,
                "token": token,
                "app": app,
                "file": file,
                "user": user,
                "pass": password,
                "server": server,
            },
            request_id=request_id,
        )

    def _retrieve_spec(self, uuid: str, *, request_id: Optional[str]) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/flightlogs/{uuid}").format(uuid=uuid),
            request_id=request_id,
        )
