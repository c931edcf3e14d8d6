from typing import Any, Mapping

from httpx import QueryParams


def serialize_query(params: Mapping[str, Any]) -> str:
    """Serializes a query map using the repeat array format.

    A list value repeats its key once per item, booleans are rendered as
    `true`/`false` and keys keep their insertion order.

    >>> serialize_query({"type": "A", "tags": ["x", "y"]})
    'type=A&tags=x&tags=y'
    """
    return str(QueryParams(dict(params)))


def append_query(path: str, params: Mapping[str, Any]) -> str:
    if not params:
        return path

    return f"{path}?{serialize_query(params)}"
