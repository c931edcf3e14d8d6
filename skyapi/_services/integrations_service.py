from typing import Any, Dict, Optional

from .._utils import Endpoint, RequestSpec
from ..tracing import traced
from ._base_service import BaseService


class IntegrationsService(BaseService):
    """Service for pushing processing outputs to partner platforms."""

    @traced(name="integrations_create", run_type="skyapi")
    def create(
        self,
        *,
        puuid: Optional[str] = None,
        duuid: Optional[str] = None,
        account: Optional[str] = None,
        provider: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Start an integration job.

        Args:
            puuid (Optional[str]): The processing job identifier.
            duuid (Optional[str]): The dataset identifier.
            account (Optional[str]): The partner account.
            provider (Optional[str]): The partner platform.
            payload (Optional[Dict[str, Any]]): Provider specific options.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The created integration job.
        """
        spec = self._create_spec(
            puuid=puuid,
            duuid=duuid,
            account=account,
            provider=provider,
            payload=payload,
            request_id=request_id,
        )
        return self.request_spec(spec)

    @traced(name="integrations_create", run_type="skyapi")
    async def create_async(
        self,
        *,
        puuid: Optional[str] = None,
        duuid: Optional[str] = None,
        account: Optional[str] = None,
        provider: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously start an integration job."""
        spec = self._create_spec(
            puuid=puuid,
            duuid=duuid,
            account=account,
            provider=provider,
            payload=payload,
            request_id=request_id,
        )
        return await self.request_spec_async(spec)

    def _create_spec(
        self,
        *,
        puuid: Optional[str],
        duuid: Optional[str],
        account: Optional[str],
        provider: Optional[str],
        payload: Optional[Dict[str, Any]],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/integrations"),
            json={
                "puuid": puuid,
                "duuid": duuid,
                "account": account,
                "provider": provider,
                "payload": payload,
            },
            request_id=request_id,
        )
