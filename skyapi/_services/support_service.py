from typing import Any, Optional

from .._utils import Endpoint, RequestSpec
from ..tracing import traced
from ._base_service import BaseService


class SupportService(BaseService):
    @traced(name="support_find_uuid", run_type="skyapi")
    def find_uuid(
        self, uuid: str, *, env: Optional[str] = None, request_id: Optional[str] = None
    ) -> Any:
        """Find which kind of resource an identifier belongs to.

        Args:
            uuid (str): Any SkyAPI identifier.
            env (Optional[str]): The environment to search in.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The matching resources.
        """
        return self.request_spec(
            self._find_uuid_spec(uuid, env=env, request_id=request_id)
        )

    @traced(name="support_find_uuid", run_type="skyapi")
    async def find_uuid_async(
        self, uuid: str, *, env: Optional[str] = None, request_id: Optional[str] = None
    ) -> Any:
        return await self.request_spec_async(
            self._find_uuid_spec(uuid, env=env, request_id=request_id)
        )

    def _find_uuid_spec(
        self, uuid: str, *, env: Optional[str], request_id: Optional[str]
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/support/find/{uuid}").format(uuid=uuid),
            params={"env": env},
            security=False,
            request_id=request_id,
        )
