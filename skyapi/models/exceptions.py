import json
from typing import Any, Optional


def stringify_body(body: Any) -> str:
    """Renders an error payload the way the remote service sent it."""
    return json.dumps(body, ensure_ascii=False, separators=(",", ":"), default=str)


class SkyApiError(Exception):
    """Base class for the errors raised when a SkyAPI call fails.

    The message is the remote service's own error payload, so `str(error)`
    can be shown to users as-is.
    """

    def __init__(self, detail: str, status_code: Optional[int] = None) -> None:
        self.detail = detail
        self.status_code = status_code
        super().__init__(detail)


class AuthError(SkyApiError):
    """The call failed before reaching the target endpoint.

    Raised when the token endpoint rejects the client credentials, when a
    bearer token cannot be decoded, or when an expired token cannot be
    refreshed because no credentials are configured.
    """


class ApiError(SkyApiError):
    """The target endpoint answered with a 4xx or 5xx status."""

    def __init__(self, body: Any, status_code: int) -> None:
        self.body = body
        super().__init__(stringify_body(body), status_code)
