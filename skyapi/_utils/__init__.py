from ._endpoint import Endpoint
from ._logs import log_request, log_response, setup_logging
from ._query import append_query, serialize_query
from ._request_spec import (
    HttpMethod,
    RequestSpec,
    carries_body,
    compact,
    is_client_or_server_error,
    normalize_method,
)
from ._user_agent import header_user_agent, user_agent_value

__all__ = [
    "Endpoint",
    "HttpMethod",
    "RequestSpec",
    "append_query",
    "carries_body",
    "compact",
    "header_user_agent",
    "is_client_or_server_error",
    "log_request",
    "log_response",
    "normalize_method",
    "serialize_query",
    "setup_logging",
    "user_agent_value",
]
