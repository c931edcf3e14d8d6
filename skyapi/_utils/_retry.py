from httpx import ConnectError, ConnectTimeout, Response, TimeoutException
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    Retrying,
    retry_if_exception,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)


def is_retryable_exception(exception: BaseException) -> bool:
    return isinstance(exception, (ConnectError, ConnectTimeout, TimeoutException))


def is_retryable_status_code(response: Response) -> bool:
    return response.status_code >= 500 and response.status_code < 600


def _last_outcome(retry_state: RetryCallState) -> Response:
    # the last 5xx response is handed back for classification,
    # the last transport error is re-raised as is
    if retry_state.outcome is None:
        raise RuntimeError("Retry finished without an outcome")
    return retry_state.outcome.result()


def _retry_kwargs(retries: int) -> dict:
    return {
        "retry": (
            retry_if_exception(is_retryable_exception)
            | retry_if_result(is_retryable_status_code)
        ),
        "wait": wait_exponential(multiplier=1, min=1, max=10),
        "stop": stop_after_attempt(max(retries, 0) + 1),
        "retry_error_callback": _last_outcome,
    }


def retrying(retries: int) -> Retrying:
    """Retry policy of the transport: timeouts, connection errors and 5xx."""
    return Retrying(**_retry_kwargs(retries))


def async_retrying(retries: int) -> AsyncRetrying:
    return AsyncRetrying(**_retry_kwargs(retries))
