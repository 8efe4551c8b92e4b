"""Shared helpers for CLI commands: client construction and result output."""

import json
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console

from sessiongate.constants import EXIT_API_ERROR, EXIT_OK
from sessiongate.models import ApiResult, LoginRequest
from sessiongate.services import AuthenticatedApiClient


def build_client(ctx: click.Context) -> AuthenticatedApiClient:
    return AuthenticatedApiClient.from_config(ctx.obj["client_config"])


def resolve_credentials(username: Optional[str], password: Optional[str]) -> Optional[LoginRequest]:
    """Build the login body from CLI options, prompting for a missing password.

    Returns None when no username was given.
    """
    if username is None:
        return None
    if password is None:
        password = click.prompt("Password", hide_input=True)
    try:
        return LoginRequest(username=username, password=password)
    except ValidationError as e:
        raise click.BadParameter(e.errors()[0]["msg"], param_hint="--username")


def emit_result(result: ApiResult) -> int:
    """Print an ApiResult as JSON and return the matching exit code."""
    Console().print_json(json.dumps(result.to_dict(), default=str))
    return EXIT_OK if result.ok else EXIT_API_ERROR
