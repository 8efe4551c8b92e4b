"""Session commands: CSRF token, login and logout."""

from typing import Optional

import click
import requests

from sessiongate.core.security import mask_credential
from sessiongate.exceptions import SessionGateError
from sessiongate.infrastructure.http import normalize_error
from sessiongate.models import ApiErr, ApiOk

from ..output import build_client, emit_result, resolve_credentials


@click.command()
@click.option("--show", is_flag=True, help="Print the token unmasked")
@click.pass_context
def csrf(ctx: click.Context, show: bool) -> None:
    """Fetch a CSRF token from the backend.

    \b
    Examples:
        sessiongate csrf
        sessiongate csrf --show
    """
    with build_client(ctx) as client:
        try:
            token = client.ensure_token()
        except (requests.RequestException, SessionGateError) as e:
            ctx.exit(emit_result(ApiErr(normalize_error(e))))
        shown = token if show else mask_credential(token)
        ctx.exit(emit_result(ApiOk({"csrfToken": shown})))


@click.command()
@click.option("--username", "-u", required=True, help="Account user name / email")
@click.option("--password", "-p", help="Account password (prompted when omitted)")
@click.pass_context
def login(ctx: click.Context, username: str, password: Optional[str]) -> None:
    """Log in and print the backend's response.

    \b
    Examples:
        sessiongate login -u alice@example.com
    """
    credentials = resolve_credentials(username, password)
    with build_client(ctx) as client:
        ctx.exit(emit_result(client.login(credentials.username, credentials.password)))


@click.command()
@click.option("--username", "-u", help="Log in first with this account")
@click.option("--password", "-p", help="Account password (prompted when omitted)")
@click.pass_context
def logout(ctx: click.Context, username: Optional[str], password: Optional[str]) -> None:
    """Log out, optionally logging in first within the same session.

    \b
    Examples:
        sessiongate logout -u alice@example.com
    """
    credentials = resolve_credentials(username, password)
    with build_client(ctx) as client:
        if credentials is not None:
            result = client.login(credentials.username, credentials.password)
            if not result.ok:
                ctx.exit(emit_result(result))
        ctx.exit(emit_result(client.logout()))
