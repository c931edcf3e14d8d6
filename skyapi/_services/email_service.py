from typing import Any, Dict, List, Optional, Union

from .._utils import Endpoint, RequestSpec
from ..tracing import traced
from ._base_service import BaseService


class EmailService(BaseService):
    """Service for sending transactional email through SkyAPI."""

    @traced(name="email_send", run_type="skyapi", hide_input=True)
    def send(
        self,
        *,
        api_key: Optional[str] = None,
        method: Optional[str] = None,
        sender: Optional[str] = None,
        to: Optional[Union[str, List[str]]] = None,
        subject: Optional[str] = None,
        html: Optional[str] = None,
        text: Optional[str] = None,
        template: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
        destinations: Optional[List[Dict[str, Any]]] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Send an email.

        Either `html`/`text` or a `template` with its `data` is expected.
        `destinations` sends one templated email per entry.

        Args:
            api_key (Optional[str]): API key of the email integration.
            method (Optional[str]): Delivery method.
            sender (Optional[str]): The sender address, sent as `from`.
            to (Optional[Union[str, List[str]]]): The recipient address or addresses.
            subject (Optional[str]): The subject line.
            html (Optional[str]): HTML body.
            text (Optional[str]): Plain text body.
            template (Optional[str]): Template name.
            data (Optional[Dict[str, Any]]): Template variables.
            destinations (Optional[List[Dict[str, Any]]]): Per-recipient template data.
            request_id (Optional[str]): Correlation id for the trace logs.

        Returns:
            Any: The delivery status.

        Examples:
            ```python
            from skyapi import SkyApi

            sdk = SkyApi()

            sdk.email.send(
                sender="noreply@example.com",
                to="ops@example.com",
                subject="Processing done",
                text="The survey of the north pit is ready.",
            )
            ```
        """
        spec = self._send_spec(
            api_key=api_key,
            method=method,
            sender=sender,
            to=to,
            subject=subject,
            html=html,
            text=text,
            template=template,
            data=data,
            destinations=destinations,
            request_id=request_id,
        )
        return self.request_spec(spec)

    @traced(name="email_send", run_type="skyapi", hide_input=True)
    async def send_async(
        self,
        *,
        api_key: Optional[str] = None,
        method: Optional[str] = None,
        sender: Optional[str] = None,
        to: Optional[Union[str, List[str]]] = None,
        subject: Optional[str] = None,
        html: Optional[str] = None,
        text: Optional[str] = None,
        template: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
        destinations: Optional[List[Dict[str, Any]]] = None,
        request_id: Optional[str] = None,
    ) -> Any:
        """Asynchronously send an email."""
        spec = self._send_spec(
            api_key=api_key,
            method=method,
            sender=sender,
            to=to,
            subject=subject,
            html=html,
            text=text,
            template=template,
            data=data,
            destinations=destinations,
            request_id=request_id,
        )
        return await self.request_spec_async(spec)

    def _send_spec(
        self,
        *,
        api_key: Optional[str],
        method: Optional[str],
        sender: Optional[str],
        to: Optional[Union[str, List[str]]],
        subject: Optional[str],
        html: Optional[str],
        text: Optional[str],
        template: Optional[str],
        data: Optional[Dict[str, Any]],
        destinations: Optional[List[Dict[str, Any]]],
        request_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/email/send"),
            params={"api_key": api_key},
            json={
                "method": method,
                "from": sender,
                "to": to,
                "subject": subject,
                "html": html,
                "text": text,
                "template": template,
                "data": data,
                "destinations": destinations,
            },
            request_id=request_id,
        )
