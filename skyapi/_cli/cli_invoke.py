import inspect
import json
import os
from typing import Any, Dict, List, Optional

import click
from dotenv import load_dotenv
from httpx import HTTPError

from .._services._base_service import BaseService
from .._skyapi import SkyApi
from ..models import (
    ApiError,
    BaseUrlMissingError,
    InvalidConfigurationError,
    SkyApiError,
)
from ._utils._console import ConsoleLogger

load_dotenv(override=True)
console = ConsoleLogger()


def _read_input(input: str, file: Optional[str]) -> Dict[str, Any]:
    if file:
        _, file_extension = os.path.splitext(file)
        if file_extension != ".json":
            console.error("Input file extension must be '.json'.")
        with open(file) as f:
            input = f.read()

    try:
        arguments = json.loads(input)
    except json.JSONDecodeError as e:
        console.error(f"Input is not valid JSON: {e}")

    if not isinstance(arguments, dict):
        console.error("Input must be a JSON object of operation arguments.")
    return arguments


def _resolve_operation(sdk: SkyApi, service: str, operation: str) -> Any:
    service_name = service.replace("-", "_")
    target = getattr(type(sdk), service_name, None)
    if service_name.startswith("_") or not isinstance(target, property):
        console.error(f"Unknown service '{service}'.")

    instance = getattr(sdk, service_name)
    if not isinstance(instance, BaseService):
        console.error(f"Unknown service '{service}'.")

    operation_name = operation.replace("-", "_")
    method = getattr(instance, operation_name, None)
    if operation_name.startswith("_") or not callable(method):
        console.error(f"Unknown operation '{operation}' on service '{service}'.")
    return method


@click.command()
@click.argument("service")
@click.argument("operation")
@click.argument("input", required=False, default="{}")
@click.option(
    "-f",
    "--file",
    required=False,
    type=click.Path(exists=True),
    help="File path for the .json input",
)
def invoke(service: str, operation: str, input: str, file: Optional[str]) -> None:
    """Call a SkyAPI operation and print its JSON result.

    INPUT is a JSON object of keyword arguments. Positional path parameters go
    in its "path_args" list, for example:

        skyapi invoke datasets retrieve-photo '{"path_args": ["d1", "p1"]}'
    """
    arguments = _read_input(input, file)
    path_args: List[Any] = arguments.pop("path_args", [])
    if not isinstance(path_args, list):
        console.error('"path_args" must be a JSON list.')

    try:
        sdk = SkyApi()
    except (BaseUrlMissingError, InvalidConfigurationError) as e:
        console.error(e.message)
        return

    method = _resolve_operation(sdk, service, operation)
    if inspect.iscoroutinefunction(method):
        console.error("Asynchronous operations cannot be invoked from the CLI.")

    try:
        inspect.signature(method).bind(*path_args, **arguments)
    except TypeError as e:
        console.error(f"Invalid arguments for {service} {operation}: {e}")
        return

    try:
        result = method(*path_args, **arguments)
    except ApiError as e:
        console.error(f"Error: {e.status_code} {e.detail}")
        return
    except SkyApiError as e:
        console.error(f"Error: {e.detail}")
        return
    except json.JSONDecodeError as e:
        console.error(f"Response is not valid JSON: {e}")
        return
    except ValueError as e:
        console.error(f"Invalid arguments for {service} {operation}: {e}")
        return
    except HTTPError as e:
        console.error(f"Network error: {e}")
        return

    click.echo(json.dumps(result, indent=2))
