from typing import Any


class Endpoint(str):
    """A string subclass representing a normalized SkyAPI endpoint path.

    This class ensures consistent endpoint formatting by:
    - Adding a leading slash if missing
    - Removing trailing slashes (except for root '/')
    - Stripping query parameters

    Path placeholders use the `{name}` syntax of the API reference and are
    filled in with `format()`. The version segment is not part of the
    endpoint; it is added by `versioned()` when the request is sent.

    Examples:
        >>> endpoint = Endpoint("/datasets/{uuid}/photos/{id}")
        >>> endpoint.format(uuid="d1", id="p1")
        '/datasets/d1/photos/p1'

        >>> Endpoint("overlays/").versioned(2)
        '/v2/overlays'

    Args:
        endpoint (str): The endpoint path to normalize.

    Raises:
        ValueError: If format() is called with None or empty string arguments.
    """

    def __new__(cls, endpoint: str) -> "Endpoint":
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"

        if endpoint != "/" and endpoint.endswith("/"):
            endpoint = endpoint[:-1]

        endpoint = endpoint.split("?")[0]

        return super().__new__(cls, endpoint)

    def format(self, *args: Any, **kwargs: Any) -> "Endpoint":
        """Substitutes the path placeholders with the given values."""
        for index, arg in enumerate(args):
            if not self._is_valid_value(arg):
                raise ValueError(f"Positional argument `{index}` is `{arg}`.")

        for key, value in kwargs.items():
            if not self._is_valid_value(value):
                raise ValueError(f"Path parameter `{key}` is `{value}`.")

        return Endpoint(super().format(*args, **kwargs))

    def versioned(self, version: int) -> str:
        return f"/v{version}{self}"

    def __repr__(self) -> str:
        return f"Endpoint({super().__str__()!r})"

    def _is_valid_value(self, value: Any) -> bool:
        return value is not None and value != ""
