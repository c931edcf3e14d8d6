from typing import Optional

import click
from dotenv import load_dotenv
from httpx import HTTPError

from .._auth import update_env_file
from .._skyapi import SkyApi
from .._utils.constants import (
    ENV_AUDIENCE,
    ENV_DOMAIN,
    ENV_ORIGIN,
    ENV_TENANT,
    ENV_TOKEN,
)
from ..models import BaseUrlMissingError, InvalidConfigurationError, SkyApiError
from ._utils._console import ConsoleLogger

load_dotenv(override=True)
console = ConsoleLogger()


@click.command()
@click.option("--key", required=False, help="OAuth2 client id (SKYAPI_KEY)")
@click.option("--secret", required=False, help="OAuth2 client secret (SKYAPI_SECRET)")
@click.option("--audience", required=False, help="OAuth2 audience (SKYAPI_AUDIENCE)")
@click.option("--tenant", required=False, help="Token host (SKYAPI_TENANT)")
@click.option("--origin", required=False, help="Full base URL (SKYAPI_ORIGIN)")
@click.option("--domain", required=False, help="API host (SKYAPI_DOMAIN)")
def auth(
    key: Optional[str],
    secret: Optional[str],
    audience: Optional[str],
    tenant: Optional[str],
    origin: Optional[str],
    domain: Optional[str],
) -> None:
    """Acquire a SkyAPI access token with the client credentials grant.

    The token is written to `.env` as SKYAPI_TOKEN, next to the connection
    settings used to get it. Options fall back to the SKYAPI_* environment
    variables.

    Network options:
    - Set HTTP_PROXY/HTTPS_PROXY/NO_PROXY environment variables for proxy configuration
    - Set SSL_CERT_FILE to specify a custom CA bundle for SSL verification
    - Set SKYAPI_DISABLE_SSL_VERIFY to disable SSL verification (not recommended)
    """
    try:
        sdk = SkyApi(
            key=key,
            secret=secret,
            audience=audience,
            tenant=tenant,
            origin=origin,
            domain=domain,
        )
    except (BaseUrlMissingError, InvalidConfigurationError) as e:
        console.error(e.message)
        return

    config = sdk.config
    if not config.has_credentials:
        console.error("--key and --secret are required (or SKYAPI_KEY/SKYAPI_SECRET).")
        return

    with console.spinner("Authenticating with client credentials ..."):
        try:
            access_token = sdk.token_provider.acquire()
        except SkyApiError as e:
            console.error(f"Authentication failed: {e.detail}")
            return
        except HTTPError as e:
            console.error(f"Network error during authentication: {e}")
            return

    env_vars = {ENV_TOKEN: access_token}
    settings = {
        ENV_ORIGIN: config.origin,
        ENV_DOMAIN: config.domain,
        ENV_TENANT: config.tenant,
        ENV_AUDIENCE: config.audience,
    }
    env_vars.update({name: value for name, value in settings.items() if value})
    update_env_file(env_vars)

    console.success("Client credentials authentication successful.")
