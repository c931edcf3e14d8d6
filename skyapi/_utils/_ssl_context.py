import os
import ssl
from typing import Any, Dict, Optional

from .constants import DEFAULT_TIMEOUT, ENV_DISABLE_SSL_VERIFY


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    path = os.path.expandvars(path)
    path = os.path.expanduser(path)
    return path


def create_ssl_context():
    # Try truststore first (system certificates)
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        ssl_cert_file = expand_path(os.environ.get("SSL_CERT_FILE"))
        requests_ca_bundle = expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
        ssl_cert_dir = expand_path(os.environ.get("SSL_CERT_DIR"))

        return ssl.create_default_context(
            cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
            capath=ssl_cert_dir,
        )


def get_httpx_client_kwargs(
    timeout: float = DEFAULT_TIMEOUT, transport: Optional[Any] = None
) -> Dict[str, Any]:
    """Get standardized httpx client configuration.

    Args:
        timeout: Default timeout in seconds for every request of the client.
        transport: Optional httpx transport replacing the network one. It has to
            support the sync and the async protocol (e.g. `httpx.MockTransport`)
            since it is shared by `Client` and `AsyncClient`.
    """
    client_kwargs: Dict[str, Any] = {"follow_redirects": True, "timeout": timeout}

    disable_ssl_env = os.environ.get(ENV_DISABLE_SSL_VERIFY, "").lower()
    disable_ssl_from_env = disable_ssl_env in ("1", "true", "yes", "on")

    if disable_ssl_from_env:
        client_kwargs["verify"] = False
    else:
        client_kwargs["verify"] = create_ssl_context()

    if transport is not None:
        client_kwargs["transport"] = transport

    # HTTP_PROXY, HTTPS_PROXY, NO_PROXY are read by httpx by default

    return client_kwargs
