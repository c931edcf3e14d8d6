import importlib.metadata

import click

from .cli_auth import auth as auth  # type: ignore
from .cli_invoke import invoke as invoke  # type: ignore


def _get_safe_version() -> str:
    """Get the version of the skyapi package."""
    try:
        version = importlib.metadata.version("skyapi")
        return version
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


@click.group()
@click.version_option(
    _get_safe_version(),
    prog_name="skyapi",
    message="%(prog)s version %(version)s",
)
def cli() -> None:
    """Command line client for SkyAPI."""


cli.add_command(auth)
cli.add_command(invoke)
