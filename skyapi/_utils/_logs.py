import json
import logging
import os
import re
import sys
from typing import Any, Mapping, Optional

from httpx import Response

from .constants import (
    DEBUG_NAMESPACE,
    ENV_DEBUG,
    ENV_LOG_FORMAT,
    LOGGER_NAME,
    TRACE_TYPE,
)

logger: logging.Logger = logging.getLogger(LOGGER_NAME)
http_logger: logging.Logger = logging.getLogger(f"{LOGGER_NAME}.http")

_handler: Optional[logging.Handler] = None


def setup_logging(should_debug: Optional[bool] = None) -> None:
    global _handler

    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s - %(name)s:%(lineno)d - %(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(_handler)


def is_http_trace_enabled() -> bool:
    """Whether request/response trace events are emitted.

    Tracing follows the `DEBUG` environment variable convention: any value
    mentioning the `skyapi` namespace turns it on. Otherwise it is on when the
    `skyapi.http` logger is enabled for DEBUG, e.g. after `setup_logging(True)`.
    """
    debug_env = os.environ.get(ENV_DEBUG, "")
    if re.search(rf"\b{DEBUG_NAMESPACE}\b", debug_env):
        return True
    return http_logger.isEnabledFor(logging.DEBUG)


def _structured() -> bool:
    return os.environ.get(ENV_LOG_FORMAT, "json").lower() != "text"


def _trace_level() -> int:
    # DEBUG env opt-in must not be filtered out by the logger level
    if http_logger.isEnabledFor(logging.DEBUG):
        return logging.DEBUG
    return max(logging.INFO, http_logger.getEffectiveLevel())


def _emit(record: dict[str, Any]) -> None:
    http_logger.log(_trace_level(), json.dumps(record, default=str))


def parse_body(body: Optional[str]) -> Any:
    return json.loads(body) if body else None


def log_request(
    *,
    method: str,
    url: str,
    headers: Mapping[str, str],
    body: Optional[str] = None,
    request_id: Optional[str] = None,
) -> None:
    if not is_http_trace_enabled():
        return

    if _structured():
        _emit(
            {
                "requestId": request_id,
                "type": TRACE_TYPE,
                "method": method,
                "url": url,
                "headers": dict(headers),
                "body": parse_body(body),
            }
        )
    else:
        level = _trace_level()
        http_logger.log(level, "request %s %s", method, url)
        http_logger.log(level, "request %s", dict(headers))
        http_logger.log(level, "request %s", parse_body(body))


def log_response(
    *,
    response: Response,
    body: Any,
    request_id: Optional[str] = None,
) -> None:
    if not is_http_trace_enabled():
        return

    if _structured():
        _emit(
            {
                "requestId": request_id,
                "type": TRACE_TYPE,
                "status": f"{response.status_code} {response.reason_phrase}",
                "headers": dict(response.headers),
                "body": body,
            }
        )
    else:
        level = _trace_level()
        http_logger.log(
            level, "response %s %s", response.status_code, response.reason_phrase
        )
        http_logger.log(level, "response %s", dict(response.headers))
        http_logger.log(level, "response %s", body)
